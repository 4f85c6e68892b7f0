from __future__ import annotations

import pytest

import xspf_export

RECORDS = """PLAYLIST p1 Morning
OWNER p1 alice
TRACK:CREATOR p1 0 alice
TRACK:URI p1 0 spotify:track:abc
TRACK:END p1 0
PLAYLIST:END p1
"""


def test_main_writes_into_playlists_under_cwd(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "playlists").mkdir()
    source = tmp_path / "records.txt"
    source.write_text(RECORDS, encoding="utf-8")

    assert xspf_export.main([str(source)]) == 0

    assert capsys.readouterr().out == "Written 1 Morning\n"
    assert [p.name for p in (tmp_path / "playlists").iterdir()] == ["0.xspf"]


def test_main_ignores_environment_for_output_location(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SPOTIFY_XSPF_OUTPUT_DIR", str(tmp_path / "elsewhere"))
    (tmp_path / "playlists").mkdir()
    (tmp_path / "elsewhere").mkdir()
    source = tmp_path / "records.txt"
    source.write_text(RECORDS, encoding="utf-8")

    assert xspf_export.main([str(source)]) == 0

    assert (tmp_path / "playlists" / "0.xspf").exists()
    assert list((tmp_path / "elsewhere").iterdir()) == []


def test_main_missing_output_dir_exits_nonzero(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "records.txt"
    source.write_text(RECORDS, encoding="utf-8")

    assert xspf_export.main([str(source)]) == 1
    assert capsys.readouterr().out == ""


def test_main_output_dir_options(tmp_path, capsys) -> None:
    source = tmp_path / "records.txt"
    source.write_text(RECORDS, encoding="utf-8")
    output_dir = tmp_path / "out"

    code = xspf_export.main([str(source), "--output-dir", str(output_dir), "--create-output-dir"])

    assert code == 0
    assert [p.name for p in output_dir.iterdir()] == ["0.xspf"]
    assert "Written 1 Morning" in capsys.readouterr().out


def test_main_start_index_option_is_gone(tmp_path) -> None:
    with pytest.raises(SystemExit):
        xspf_export.main(["--output-dir", str(tmp_path), "--start-index", "3"])


def test_main_missing_input_file_exits_nonzero(tmp_path, caplog) -> None:
    assert xspf_export.main([str(tmp_path / "nope.txt"), "--output-dir", str(tmp_path)]) == 1
    assert "Cannot read input" in caplog.text


def test_main_does_not_report_output_errors_as_input_errors(tmp_path, monkeypatch, caplog) -> None:
    source = tmp_path / "records.txt"
    source.write_text(RECORDS, encoding="utf-8")

    def _broken_stdout(lines, emitter):
        raise BrokenPipeError("stdout closed")

    monkeypatch.setattr(xspf_export, "convert_stream", _broken_stdout)

    with pytest.raises(BrokenPipeError):
        xspf_export.main([str(source), "--output-dir", str(tmp_path)])
    assert "Cannot read input" not in caplog.text
