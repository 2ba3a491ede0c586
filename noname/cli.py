"""Command-line creation of new noname packages."""

from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path

from .manifest import MANIFEST_FILENAME, ManifestError
from .packages import PackageError

MAIN_CONTENT = """fn main(pub xx: Field, yy: Field) {
    let zz = yy + 1;
    assert_eq(zz, xx);
}
"""

LIB_CONTENT = """fn add(xx: Field, yy: Field) -> Field {
    return xx + yy;
}
"""


def get_git_user() -> str:
    """The configured git user name, lower-cased with spaces turned into underscores."""
    try:
        result = subprocess.run(
            ["git", "config", "user.name"], capture_output=True, text=True, check=False
        )
    except OSError as exc:
        raise PackageError("failed to execute git command") from exc

    if result.returncode != 0:
        raise PackageError("failed to get git user name")

    return result.stdout.strip().replace(" ", "_").lower()


def _mk(path: Path, package_name: str, is_lib: bool) -> None:
    user = get_git_user()
    content = (
        "[package]\n"
        f'name = "{user}/{package_name}"\n'
        'version = "0.1.0"\n'
        "\n"
        "dependencies = []\n"
    )

    manifest_file = path / MANIFEST_FILENAME
    if manifest_file.exists():
        raise PackageError(f"manifest file already exists at `{manifest_file}`")
    try:
        manifest_file.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise PackageError(
            f"cannot create Noname.toml file at given path: `{manifest_file}`"
        ) from exc

    src_path = path / "src"
    if src_path.exists():
        raise PackageError(f"src directory already exists at `{src_path}`")
    try:
        src_path.mkdir()
    except OSError as exc:
        raise PackageError(f"cannot create src directory at given path: `{src_path}`") from exc

    code, file_name = (LIB_CONTENT, "lib.no") if is_lib else (MAIN_CONTENT, "main.no")
    file_path = src_path / file_name
    if file_path.exists():
        raise PackageError(f"file already exists at `{file_path}`")
    try:
        file_path.write_text(code, encoding="utf-8")
    except OSError as exc:
        raise PackageError(f"cannot create file at given path: `{file_path}`") from exc

    print(f"created new package at `{path}`")


def cmd_new(path: str | Path, lib: bool = False) -> None:
    """Create a new package in a directory that does not exist yet."""
    path = Path(path)
    package_name = str(path)

    if path.exists():
        raise PackageError(
            f"path `{path}` already exists. Use `noname init` to create a new package "
            "in an existing directory"
        )
    try:
        path.mkdir()
    except OSError as exc:
        raise PackageError("couldn't create directory at given path") from exc

    _mk(path, package_name, lib)


def cmd_init(path: str | Path | None = None, lib: bool = False) -> None:
    """Create a new package in an existing directory (the current one by default)."""
    path = Path.cwd() if path is None else Path(path)

    package_name = path.name
    if not package_name:
        raise PackageError("invalid path given in argument to CLI")

    if not path.exists():
        raise PackageError(
            f"path `{path}` doesn't exists. Use `noname new` to create a new package "
            "in an non-existing directory"
        )
    if not path.is_dir():
        raise PackageError(f"path `{path}` is not a directory")

    _mk(path, package_name, lib)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="noname")
    commands = parser.add_subparsers(dest="command", required=True)

    new = commands.add_parser("new", help="create a new package in a new directory")
    new.add_argument("-p", "--path", required=True, help="path to the directory to create")
    new.add_argument("--lib", action="store_true", help="create a library instead of a binary")

    init = commands.add_parser("init", help="create a new package in an existing directory")
    init.add_argument("-p", "--path", help="path to the directory (defaults to the current one)")
    init.add_argument("--lib", action="store_true", help="create a library instead of a binary")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    args = _parser().parse_args(argv)
    try:
        if args.command == "new":
            cmd_new(args.path, args.lib)
        else:
            cmd_init(args.path, args.lib)
    except (PackageError, ManifestError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())