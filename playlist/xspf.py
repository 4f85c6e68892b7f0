"""XSPF serialization for finalized playlists."""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET

from config.settings import XSPF_NAMESPACE, XSPF_VERSION
from playlist.models import Playlist, Track

logger = logging.getLogger(__name__)

# Characters outside the XML 1.0 Char production.
_INVALID_XML_CHARS_RE = re.compile("[^\u0009\u000A\u000D\u0020-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")
_REPLACEMENT_CHAR = "\ufffd"

# Child element order required by the XSPF schema.
_TRACK_FIELDS = (
    ("identifier", "identifier"),
    ("title", "title"),
    ("creator", "creator"),
    ("album", "album"),
    ("trackNum", "track_num"),
    ("duration", "duration"),
)
_PLAYLIST_FIELDS = (
    ("title", "title"),
    ("creator", "creator"),
    ("annotation", "annotation"),
)


def build_playlist_element(playlist: Playlist) -> ET.Element:
    root = ET.Element("playlist", {"version": XSPF_VERSION, "xmlns": XSPF_NAMESPACE})
    _add_fields(root, playlist, _PLAYLIST_FIELDS)
    track_list = ET.SubElement(root, "trackList")
    for track in playlist.tracks:
        track_list.append(build_track_element(track))
    return root


def build_track_element(track: Track) -> ET.Element:
    element = ET.Element("track")
    _add_fields(element, track, _TRACK_FIELDS)
    for meta in track.metas:
        ET.SubElement(element, "meta", {"rel": xml_safe(meta.key)}).text = xml_safe(meta.value)
    return element


def render_xspf(playlist: Playlist) -> bytes:
    """Return the complete UTF-8 XSPF document for ``playlist``.

    Output is deterministic: identical playlists render to identical bytes.
    """
    root = build_playlist_element(playlist)
    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode")
    return ('<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n").encode("utf-8")


def _add_fields(parent: ET.Element, source: object, fields: tuple[tuple[str, str], ...]) -> None:
    for tag, attr in fields:
        value = getattr(source, attr)
        if value is None or value == "":
            continue
        ET.SubElement(parent, tag).text = xml_safe(value)


def xml_safe(value: str) -> str:
    """Replace characters XML 1.0 cannot carry with U+FFFD."""
    cleaned, count = _INVALID_XML_CHARS_RE.subn(_REPLACEMENT_CHAR, value)
    if count:
        logger.warning("Replaced %d character(s) not allowed in XML in %r", count, cleaned)
    return cleaned
