import subprocess
import tomllib
from pathlib import Path

import pytest

from noname import cli
from noname.packages import PackageError, validate_package_and_get_manifest


@pytest.fixture
def git_user(monkeypatch):
    result = subprocess.CompletedProcess(args=[], returncode=0, stdout="Test User\n", stderr="")
    monkeypatch.setattr(cli.subprocess, "run", lambda *a, **k: result)
    return "test_user"


def test_get_git_user_normalises(git_user):
    assert cli.get_git_user() == git_user


def test_get_git_user_failure(monkeypatch):
    failed = subprocess.CompletedProcess(args=[], returncode=1, stdout="", stderr="")
    monkeypatch.setattr(cli.subprocess, "run", lambda *a, **k: failed)
    with pytest.raises(PackageError, match="failed to get git user name"):
        cli.get_git_user()


def test_cmd_new_binary(tmp_path, git_user):
    path = tmp_path / "proj"
    cli.cmd_new(path)
    manifest = tomllib.loads((path / "Noname.toml").read_text(encoding="utf-8"))
    assert manifest["package"]["name"] == f"{git_user}/{path}"
    assert manifest["package"]["dependencies"] == []
    assert (path / "src" / "main.no").read_text(encoding="utf-8") == cli.MAIN_CONTENT
    assert not (path / "src" / "lib.no").exists()


def test_cmd_new_existing_path(tmp_path, git_user):
    with pytest.raises(PackageError, match="already exists"):
        cli.cmd_new(tmp_path)


def test_cmd_init_library_round_trip(tmp_path, git_user):
    path = tmp_path / "myproj"
    path.mkdir()
    cli.cmd_init(path, lib=True)
    assert (path / "src" / "lib.no").read_text(encoding="utf-8") == cli.LIB_CONTENT
    manifest = validate_package_and_get_manifest(path, True)
    assert manifest.package.name == f"{git_user}/myproj"
    assert manifest.dependency_names() == []


def test_cmd_init_missing_path(tmp_path, git_user):
    with pytest.raises(PackageError, match="doesn't exists"):
        cli.cmd_init(tmp_path / "missing")


def test_cmd_init_not_a_directory(tmp_path, git_user):
    file_path = tmp_path / "afile"
    file_path.write_text("", encoding="utf-8")
    with pytest.raises(PackageError, match="is not a directory"):
        cli.cmd_init(file_path)


def test_cmd_init_twice(tmp_path, git_user):
    path = tmp_path / "myproj"
    path.mkdir()
    cli.cmd_init(path)
    with pytest.raises(PackageError, match="manifest file already exists"):
        cli.cmd_init(path)


def test_cmd_init_existing_src(tmp_path, git_user):
    path = tmp_path / "myproj"
    (path / "src").mkdir(parents=True)
    with pytest.raises(PackageError, match="src directory already exists"):
        cli.cmd_init(path)


def test_main_new_and_failure(tmp_path, git_user, capsys):
    path = tmp_path / "proj"
    assert cli.main(["new", "--path", str(path), "--lib"]) == 0
    assert (path / "src" / "lib.no").exists()
    assert cli.main(["new", "--path", str(path)]) == 1
    assert "already exists" in capsys.readouterr().err


def test_main_init(tmp_path, git_user):
    path = tmp_path / "myproj"
    path.mkdir()
    assert cli.main(["init", "-p", str(path)]) == 0
    assert Path(path / "src" / "main.no").read_text(encoding="utf-8") == cli.MAIN_CONTENT