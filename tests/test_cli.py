# tests/test_cli.py
import os
import sys
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest

from dirscope.cli import format_oldest, main, run
from dirscope.core import codec
from dirscope.core.reader import DirectoryReader
from dirscope.errors import AccessError, DecodeError
from dirscope.models import OldestFile

@pytest.fixture
def project(tmp_path):
    (tmp_path / "a").write_bytes(b"x" * 10)
    (tmp_path / "bb").write_bytes(b"x" * 20)
    (tmp_path / "c").mkdir()
    logs = tmp_path / "logs"
    logs.mkdir()
    (logs / "app.log").write_text("ERROR: ...")

    base = 1_600_000_000
    for offset, path in enumerate([tmp_path / "a", tmp_path / "bb"], start=1):
        os.utime(path, (base + offset * 100, base + offset * 100))
    os.utime(logs / "app.log", (base, base))
    return tmp_path

# --- Formatting helpers ---

def test_format_oldest_found():
    oldest = OldestFile(name="old.txt", modified=datetime(2001, 2, 3, 4, 5, 6))
    assert format_oldest(oldest) == "Najstarszy plik: old.txt, Data utworzenia: 03.02.2001 04:05:06"

def test_format_oldest_absent():
    assert format_oldest(None) == "Brak plików w katalogu."

# --- End-to-end ---

def test_end_to_end_run(project, capsys):
    exit_code = main([str(project)])
    out = capsys.readouterr().out.splitlines()

    assert exit_code == 0
    assert out[0] == f"Zawartość katalogu {project}:"
    assert "a (10 bajtów) ----" in out
    assert "logs (1 items) ----" in out
    assert "  app.log (10 bajtów) ----" in out

    expected_time = datetime.fromtimestamp(1_600_000_000).strftime("%d.%m.%Y %H:%M:%S")
    assert f"Najstarszy plik: app.log, Data utworzenia: {expected_time}" in out

    header_at = out.index("Zawartość kolekcji po deserializacji:")
    assert out[header_at + 1:] == ["a -> 10 B", "c -> 0 B", "bb -> 20 B", "logs -> 1 B"]

def test_exclude_hides_entries(project, capsys):
    exit_code = main([str(project), "--exclude", "logs/"])
    out = capsys.readouterr().out

    assert exit_code == 0
    assert "logs" not in out
    assert "app.log" not in out
    assert "Najstarszy plik: a," in out

def test_ignore_file_option(project, tmp_path_factory, capsys):
    ignore_file = tmp_path_factory.mktemp("cfg") / "rules"
    ignore_file.write_text("*.log\n", encoding="utf-8")

    main([str(project), "--ignore-file", str(ignore_file)])
    out = capsys.readouterr().out

    assert "logs (0 items) ----" in out
    assert "app.log" not in out

def test_empty_directory_reports_no_files(tmp_path, capsys):
    (tmp_path / "only_dirs" / "nested").mkdir(parents=True)

    exit_code = main([str(tmp_path)])
    out = capsys.readouterr().out.splitlines()

    assert exit_code == 0
    assert "Brak plików w katalogu." in out
    assert out[-1] == "only_dirs -> 1 B"

# --- Error paths ---

def test_missing_argument_prints_usage(capsys):
    assert main([]) == 1
    assert "Proszę podać ścieżkę katalogu" in capsys.readouterr().out

def test_invalid_directory(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 1
    assert "Invalid directory" in capsys.readouterr().err

def test_decode_failure_aborts_round_trip(project, monkeypatch, capsys):
    def broken_decode(data):
        raise DecodeError("Snapshot is malformed or truncated")

    monkeypatch.setattr("dirscope.cli.decode_snapshot", broken_decode)

    exit_code = main([str(project)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Najstarszy plik: app.log" in captured.out
    assert "Zawartość kolekcji po deserializacji:" not in captured.out
    assert "Snapshot round-trip failed" in captured.err

def test_run_uses_sys_argv(project):
    with patch.object(sys, "argv", ["dirscope", str(project)]):
        with pytest.raises(SystemExit) as excinfo:
            run()
    assert excinfo.value.code == 0

def test_cli_encodes_snapshot_in_name_order(project, monkeypatch):
    calls = []
    real_encode = codec.encode_snapshot

    def spy(snapshot):
        calls.append(list(snapshot))
        return real_encode(snapshot)

    monkeypatch.setattr("dirscope.cli.encode_snapshot", spy)
    main([str(project)])
    assert calls == [["a", "c", "bb", "logs"]]

def test_unreadable_directory_reported_once_on_stdout(project, monkeypatch, capsys):
    blocked = project / "logs"
    original = DirectoryReader.list_directory

    def fake_list(self, directory):
        if Path(directory) == blocked:
            raise AccessError(directory, "Permission denied")
        return original(self, directory)

    monkeypatch.setattr(DirectoryReader, "list_directory", fake_list)

    exit_code = main([str(project)])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out.count("Błąd przy wyświetlaniu zawartości") == 1
    assert "Cannot list" not in captured.err
