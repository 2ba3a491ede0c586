"""Reading and validating the `Noname.toml` package manifest."""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

MANIFEST_FILENAME = "Noname.toml"

_PACKAGE_NAME = re.compile(r"[a-z0-9_-]+/[a-z0-9_-]+")


class ManifestError(ValueError):
    """Raised when a manifest is missing, malformed or invalid."""


@dataclass(frozen=True)
class Package:
    """The `[package]` table of a manifest."""

    name: str
    version: str
    description: str | None = None
    dependencies: tuple[str, ...] | None = None


@dataclass(frozen=True)
class Manifest:
    """A parsed package manifest."""

    package: Package

    def dependency_names(self) -> list[str]:
        """The `user/repo` names of the package's dependencies (empty if none are listed)."""
        return list(self.package.dependencies or ())


def _require_str(table: dict[str, Any], key: str) -> str:
    if key not in table:
        raise ManifestError(f"missing field `{key}`")
    value = table[key]
    if not isinstance(value, str):
        raise ManifestError(f"field `{key}` must be a string")
    return value


def _decode(text: str) -> Manifest:
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ManifestError(str(exc)) from exc

    table = data.get("package")
    if table is None:
        raise ManifestError("missing field `package`")
    if not isinstance(table, dict):
        raise ManifestError("field `package` must be a table")

    name = _require_str(table, "name")
    version = _require_str(table, "version")

    description = table.get("description")
    if description is not None and not isinstance(description, str):
        raise ManifestError("field `description` must be a string")

    deps = table.get("dependencies")
    if deps is not None:
        if not isinstance(deps, list) or not all(isinstance(d, str) for d in deps):
            raise ManifestError("field `dependencies` must be a list of strings")
        deps = tuple(deps)

    return Manifest(Package(name, version, description, deps))


def _validate(manifest: Manifest) -> Manifest:
    name = manifest.package.name
    if not _PACKAGE_NAME.fullmatch(name):
        raise ManifestError(
            f"invalid package name `{name}`. Package names must be in the format `user/repo`"
        )
    if name.startswith("std"):
        raise ManifestError("package name `std` is reserved")

    for dep in manifest.dependency_names():
        if dep.startswith("std"):
            raise ManifestError("package `std/..` cannot be a dependency")
        if not _PACKAGE_NAME.fullmatch(dep):
            raise ManifestError(
                f"invalid package name `{dep}`. Package names must be in the format `user/repo`"
            )
    return manifest


def parse_manifest(text: str) -> Manifest:
    """Parse and validate the text of a manifest file."""
    return _validate(_decode(text))


def read_manifest(path: str | Path) -> Manifest:
    """Read and validate the manifest of the package found in directory `path`."""
    path = Path(path)
    if not path.exists():
        raise ManifestError(
            f"path `{path}` doesn't exists. Use `noname new` to create a new package "
            "in an non-existing directory"
        )

    manifest_file = path / MANIFEST_FILENAME
    try:
        content = manifest_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"could not find manifest file `{manifest_file}`") from exc

    try:
        manifest = _decode(content)
    except ManifestError as exc:
        raise ManifestError(f"could not parse file `{manifest_file}`: {exc}") from exc

    return _validate(manifest)