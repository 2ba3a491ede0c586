"""Package locations, dependency fetching and dependency-graph ordering."""

from __future__ import annotations

import subprocess
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .manifest import Manifest, ManifestError, read_manifest

NONAME_DIRECTORY = ".noname"
"""The directory under the user's home directory holding all noname files."""

PACKAGE_DIRECTORY = "packages"
"""The directory under NONAME_DIRECTORY holding downloaded packages."""

GIT_HOST = "https://github.com"


class PackageError(Exception):
    """Raised when a package or one of its dependencies is unusable."""


@dataclass(frozen=True)
class UserRepo:
    """A dependency, named by a `user/repo` pair."""

    user: str
    repo: str

    @classmethod
    def parse(cls, text: str) -> UserRepo:
        """Parse a `user/repo` string."""
        parts = text.split("/")
        if len(parts) != 2:
            raise PackageError(f"invalid dependency name `{text}` (expected: user/repo)")
        return cls(parts[0], parts[1])

    def __str__(self) -> str:
        return f"{self.user}/{self.repo}"


@dataclass
class DependencyNode:
    """A package together with the nodes of its own dependencies."""

    dep: UserRepo
    deps: list[DependencyNode] = field(default_factory=list)


class DependencyGraph:
    """The dependency tree of a package, built from the manifests of its dependencies."""

    def __init__(self, this: UserRepo | None) -> None:
        self.this = this
        self.roots: list[DependencyNode] = []
        self.cached_manifests: dict[UserRepo, list[UserRepo]] = {}

    @classmethod
    def from_manifest(cls, this: UserRepo | None, manifest: Manifest) -> DependencyGraph:
        """Build the graph of every dependency listed in `manifest`."""
        graph = cls(this)
        graph.add_deps(get_deps_of_package(manifest))
        return graph

    def add_deps(self, deps: Iterable[UserRepo]) -> None:
        """Add each dependency as a root of the graph."""
        for dep in deps:
            self.add_dep(dep)

    def add_dep(self, dep: UserRepo) -> None:
        """Add one dependency (and, recursively, its own) as a root of the graph."""
        parents: set[UserRepo] = set()
        if self.this is not None:
            if self.this == dep:
                raise PackageError(f"this library (`{dep}`) cannot depend on itself")
            parents.add(self.this)

        self.roots.append(self.init_package(dep, parents))

    def init_package(self, package: UserRepo, parents: set[UserRepo]) -> DependencyNode:
        """Resolve `package` and its dependencies, refusing cycles through `parents`."""
        parents = set(parents)
        parents.add(package)

        cached = self.cached_manifests.get(package)
        if cached is not None:
            deps = list(cached)
        else:
            path = path_to_package(package)
            if not path.exists():
                download_from_github(package)

            try:
                manifest = validate_package_and_get_manifest(path, True)
            except (PackageError, ManifestError) as exc:
                raise PackageError(f"the dependency {package} is invalid.: {exc}") from exc

            if manifest.package.name != str(package):
                raise PackageError(
                    f"package `{package}` has a different name in its manifest: "
                    f"`{manifest.package.name}`"
                )
            deps = get_deps_of_package(manifest)

        nodes = []
        for dep in deps:
            if dep in parents:
                raise PackageError(
                    f"circular dependency detected: {dep} is already a parent of {package}"
                )
            nodes.append(self.init_package(dep, parents))

        return DependencyNode(package, nodes)

    def from_leaves_to_roots(self) -> list[UserRepo]:
        """Order all packages so that each comes after every package it depends on."""
        ordered: list[UserRepo] = []
        for root in self.roots:
            stack = [root]
            while stack:
                node = stack.pop()
                if node.dep in ordered:
                    continue
                if all(child.dep in ordered for child in node.deps):
                    ordered.append(node.dep)
                else:
                    stack.append(node)
                    stack.extend(node.deps)
        return ordered


def get_dep(dep: UserRepo) -> Manifest:
    """Download `dep` if needed and return its validated manifest (it must be a library)."""
    path = path_to_package(dep)
    if not path.exists():
        download_from_github(dep)
    return validate_package_and_get_manifest(path, True)


def get_deps_of_package(manifest: Manifest) -> list[UserRepo]:
    """The dependencies listed in a manifest."""
    return [UserRepo.parse(dep) for dep in manifest.dependency_names()]


def get_dep_code(dep: UserRepo) -> str:
    """The source of a package's `lib.no` file."""
    path = path_to_package(dep)
    lib_file = path / "src" / "lib.no"
    try:
        return lib_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise PackageError(f"could not read file `{path}`") from exc


def path_to_package(dep: UserRepo) -> Path:
    """Local directory where a package is stored."""
    return Path.home() / NONAME_DIRECTORY / PACKAGE_DIRECTORY / dep.user / dep.repo


def download_from_github(dep: UserRepo) -> None:
    """Clone a package's repository into its local directory."""
    url = f"{GIT_HOST}/{dep.user}/{dep.repo}.git"
    path = path_to_package(dep)
    try:
        result = subprocess.run(
            ["git", "clone", url, str(path)], capture_output=True, check=False
        )
    except OSError as exc:
        raise PackageError("failed to execute git command") from exc

    if result.returncode != 0:
        raise PackageError(
            f"could not download package `{dep}`. Are you sure that {GIT_HOST}/{dep} "
            "is a valid package?"
        )


def is_lib(path: str | Path) -> bool:
    """Whether the package at `path` is a library (has a `src/lib.no`)."""
    return (Path(path) / "src" / "lib.no").exists()


def validate_package_and_get_manifest(path: str | Path, must_be_lib: bool) -> Manifest:
    """Check that `path` holds a valid package and return its manifest."""
    path = Path(path)
    if not path.exists():
        raise PackageError(
            f"path `{path}` doesn't exists. Use `noname new` to create a new package "
            "in an non-existing directory"
        )

    manifest = read_manifest(path)

    src = path / "src"
    has_lib = (src / "lib.no").exists()
    has_main = (src / "main.no").exists()

    if has_lib and has_main:
        raise PackageError(
            "package has both a `lib.no` and a `main.no` file. Only one of them is allowed"
        )
    if not has_lib and not has_main:
        raise PackageError(
            "package has neither a `lib.no` nor a `main.no` file. "
            "At least one of them is required"
        )
    if not has_lib and must_be_lib:
        raise PackageError("package is missing a `lib.no` file")

    return manifest