import os

import pytest

from cengine.files import get_file_path, read_file, read_local


def test_get_file_path_prefixes_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = get_file_path("/Assets/Models/cube.obj")
    assert path.startswith(os.getcwd())
    assert path.endswith("/Assets/Models/cube.obj")


def test_read_local_round_trip(tmp_path, monkeypatch):
    models = tmp_path / "Assets" / "Models"
    models.mkdir(parents=True)
    (models / "cube.obj").write_bytes(b"v 1.0 2.0 3.0\n")
    monkeypatch.chdir(tmp_path)
    assert read_local("/Assets/Models/cube.obj") == "v 1.0 2.0 3.0\n"


def test_read_file_keeps_line_endings(tmp_path):
    target = tmp_path / "data.txt"
    target.write_bytes(b"a\r\nb\r\n")
    assert read_file(target) == "a\r\nb\r\n"


def test_read_file_empty(tmp_path):
    target = tmp_path / "empty.txt"
    target.write_bytes(b"")
    assert read_file(target) == ""


def test_read_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.txt")


def test_read_local_missing_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        read_local("/Assets/none.glsl")