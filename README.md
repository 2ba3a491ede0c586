# noname

Package tooling for the noname circuit language: scaffolding of new
packages, reading and validating `Noname.toml` manifests, fetching and
ordering `user/repo` dependencies, parsing JSON program inputs, and
source spans with a table of registered source files.

## Installing

```
pip install .
```

Creating packages and fetching dependencies call `git`, which must be
installed and on the `PATH`.

## Creating a package

Create a new package in a directory that does not exist yet:

```
noname new --path my_circuit
```

Add `--lib` to create a library (`src/lib.no`) rather than a binary
(`src/main.no`). To set up a package in a directory that already exists:

```
noname init --path existing_dir
```

Without `--path`, `init` uses the current directory. The package is named
`<git user>/<name>`, where the git user is `git config user.name`,
lower-cased with spaces replaced by underscores. For `new` the name is the
path as given; for `init` it is the directory's last component. The command
refuses to overwrite an existing `Noname.toml`, `src` directory or source
file, prints `error: ...` and exits with status 1.

A new binary package contains:

```
Noname.toml
src/main.no
```

The same operations are available as `noname.cli.cmd_new(path, lib)` and
`noname.cli.cmd_init(path, lib)`; they raise `noname.packages.PackageError`
on failure.

## Manifests

`Noname.toml` describes a package:

```toml
[package]
name = "user/repo"
version = "0.1.0"
dependencies = ["someone/lib"]
```

`name` and `version` are required; `description` and `dependencies` are
optional. The package name and every dependency must match `user/repo`
using lower-case letters, digits, `_` and `-`, and must not start with
`std`.

```python
from noname.manifest import parse_manifest, read_manifest

manifest = parse_manifest(text)          # from the text of a manifest
manifest = read_manifest("my_circuit")   # from a package directory
manifest.dependency_names()              # ["someone/lib"]
```

Invalid or unreadable manifests raise `noname.manifest.ManifestError`.

## Packages and dependencies

```python
from noname.packages import (
    DependencyGraph, UserRepo, validate_package_and_get_manifest, is_lib,
)

manifest = validate_package_and_get_manifest("my_circuit", False)
graph = DependencyGraph.from_manifest(UserRepo.parse("me/app"), manifest)
order = graph.from_leaves_to_roots()
```

- `validate_package_and_get_manifest(path, must_be_lib)` checks that the
  package has exactly one of `src/lib.no` and `src/main.no` (and `lib.no`
  when `must_be_lib` is true) and returns its manifest.
- `is_lib(path)` tells whether a package has a `src/lib.no`.
- Dependencies live in `~/.noname/packages/<user>/<repo>`
  (`path_to_package`). A missing one is cloned with `git clone` from
  `https://github.com/<user>/<repo>.git` (`download_from_github`).
- `get_dep(dep)` fetches a dependency if needed and returns its manifest;
  `get_dep_code(dep)` returns the text of its `src/lib.no`.
- `DependencyGraph` resolves dependencies recursively, rejecting a package
  that depends on itself, circular dependencies, and dependencies whose
  manifest names a different package. `from_leaves_to_roots()` lists every
  package after all of the packages it depends on.

Errors are raised as `PackageError`.

## Inputs

```python
from noname.inputs import parse_inputs

parse_inputs('{"xx": "1", "arr": ["2", "3"]}')
# {'xx': '1', 'arr': ['2', '3']}
```

Text that is not a JSON object raises `noname.inputs.ParsingError`.

## Spans and sources

`noname.span.Span(filename_id, start, length)` marks a region of a source
file, with `end()` and `merge_with(other)`. `noname.span.Sources` maps file
ids to `(filename, source)`; id 0 is reserved for built-in code and
`add(filename, source)` returns the next id.

## What this package does not do

There is no lexer, parser, type checker or circuit compiler here, so `.no`
files cannot be checked, built, run, proved or verified; the only commands
are `new` and `init`.