import os

import pytest

from wbi.pylang import (
    PyLangError,
    python_profile_exists,
    remove_python_from_path,
    remove_python_from_paths,
    scan_for_python_versions,
    sort_opt_python_version_paths,
)


def _make_python(root, version):
    binary = root / version / "bin" / "python"
    binary.parent.mkdir(parents=True)
    binary.write_text("")
    return str(binary)


@pytest.fixture
def empty_path(tmp_path, monkeypatch):
    empty = tmp_path / "empty-bin"
    empty.mkdir()
    monkeypatch.setenv("PATH", str(empty))
    return empty


def test_scan_orders_managed_first_newest_first(tmp_path, empty_path):
    managed = tmp_path / "opt_python"
    other = tmp_path / "other"
    old = _make_python(managed, "3.9.1")
    newest = _make_python(managed, "3.11.2")
    middle = _make_python(managed, "3.10.0")
    extra = _make_python(other, "3.8.0")
    global_bin = tmp_path / "python"
    global_bin.write_text("")

    result = scan_for_python_versions(
        paths=[str(global_bin), str(tmp_path / "missing")],
        root_dirs=[str(managed), str(other)],
    )

    assert result == [newest, middle, old, str(global_bin), extra]


def test_scan_skips_dirs_without_binary_and_plain_files(tmp_path, empty_path):
    managed = tmp_path / "opt_python"
    (managed / "3.10.0").mkdir(parents=True)
    (managed / "notes.txt").write_text("")
    found = _make_python(managed, "3.11.2")

    result = scan_for_python_versions(paths=[], root_dirs=[str(managed)])

    assert result == [found]


def test_scan_missing_roots_give_empty_list(tmp_path, empty_path):
    result = scan_for_python_versions(
        paths=[], root_dirs=[str(tmp_path / "nope"), str(tmp_path / "nada")]
    )
    assert result == []


def test_scan_adds_python3_from_path(tmp_path, monkeypatch):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    python3 = bin_dir / "python3"
    python3.write_text("#!/bin/sh\n")
    python3.chmod(0o755)
    monkeypatch.setenv("PATH", str(bin_dir))

    result = scan_for_python_versions(paths=[str(python3)], root_dirs=[str(tmp_path / "none")])

    assert result == [str(python3)]


def test_scan_bad_version_directory_raises(tmp_path, empty_path):
    managed = tmp_path / "opt_python"
    _make_python(managed, "not-a-version!")
    with pytest.raises(PyLangError):
        scan_for_python_versions(paths=[], root_dirs=[str(managed)])


def test_sort_opt_paths_newest_first():
    paths = [
        "/opt/python/3.9.16/bin/python",
        "/opt/python/3.11.2/bin/python",
        "/opt/python/3.10.10/bin/python",
    ]
    result = sort_opt_python_version_paths(paths)
    assert result == [paths[1], paths[2], paths[0]]
    assert sorted(result) == sorted(paths)


def test_sort_opt_paths_rejects_bad_version():
    with pytest.raises(PyLangError):
        sort_opt_python_version_paths(["/opt/python/abc!/bin/python"])


def test_sort_opt_paths_rejects_short_path():
    with pytest.raises(PyLangError):
        sort_opt_python_version_paths(["python"])


def test_remove_python_from_binary_path():
    assert remove_python_from_path("/opt/python/3.11.2/bin/python") == "/opt/python/3.11.2/bin"


def test_remove_python_without_python_is_unchanged():
    assert remove_python_from_path("/usr/local/bin/R") == "/usr/local/bin/R"


def test_remove_python_from_paths_maps_each():
    paths = ["/opt/python/3.11.2/bin/python", "/usr/local/bin/R"]
    assert remove_python_from_paths(paths) == [remove_python_from_path(p) for p in paths]
    assert remove_python_from_paths([]) == []


def test_profile_exists(tmp_path, capsys):
    profile = tmp_path / "wbi_python.sh"
    profile.write_text("export PATH=/opt/python/3.11.2/bin:$PATH\n")
    assert python_profile_exists(str(profile)) is True
    assert str(profile) in capsys.readouterr().out


def test_profile_missing(tmp_path, capsys):
    assert python_profile_exists(os.path.join(str(tmp_path), "wbi_python.sh")) is False
    assert capsys.readouterr().out == ""