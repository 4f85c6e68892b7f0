"""Application settings constants."""

from __future__ import annotations

# XSPF document root attributes.
XSPF_NAMESPACE = "http://xspf.org/ns/0/"
XSPF_VERSION = "1"

# Namespace prefix for every track meta key. Keys are written as the XSPF
# <meta rel="..."> attribute, which is the schema's name for a meta key.
META_KEY_BASE = "http://browser.org/xspf/spotify/"

META_ADDED_BY = META_KEY_BASE + "added_by"
META_ADDED_TIME = META_KEY_BASE + "added_time"
META_TRACK = META_KEY_BASE + "track"
META_ALBUM = META_KEY_BASE + "album"
META_ARTIST = META_KEY_BASE + "artist"

# Output files are written as <output dir>/<n><suffix>.
DEFAULT_OUTPUT_DIRNAME = "playlists"
OUTPUT_SUFFIX = ".xspf"

ARTIST_SEPARATOR = ", "
