"""Source locations and the registry of compiled source files."""

from __future__ import annotations

from dataclasses import dataclass, field

BUILTIN_FILENAME = "<BUILTIN>"
BUILTIN_SOURCE = "<SEE NONAME CODE>"


@dataclass(frozen=True, order=True)
class Span:
    """A region of a source file: which file, where it starts, how long it is."""

    filename_id: int = 0
    start: int = 0
    length: int = 0

    def is_empty(self) -> bool:
        """A span is considered empty when it starts at offset zero."""
        return self.start == 0

    def end(self) -> int:
        """Offset just past the last character covered by the span."""
        return self.start + self.length

    def merge_with(self, other: Span) -> Span:
        """Return a span running from the start of this one to the end of `other`."""
        if self.filename_id != other.filename_id:
            raise ValueError(
                f"cannot merge spans from different files "
                f"({self.filename_id} and {other.filename_id})"
            )
        real_len = other.end() - self.start
        if real_len < 0:
            raise ValueError("cannot merge with a span that ends before this one starts")
        return Span(self.filename_id, self.start, real_len)


@dataclass
class Sources:
    """Maps numeric file ids to their filename and source code.

    Id 0 is reserved for built-in code.
    """

    map: dict[int, tuple[str, str]] = field(
        default_factory=lambda: {0: (BUILTIN_FILENAME, BUILTIN_SOURCE)}
    )
    _last_id: int = field(default=0, repr=False)

    def add(self, filename: str, source: str) -> int:
        """Register a file and return the id it was given."""
        self._last_id += 1
        self.map[self._last_id] = (filename, source)
        return self._last_id

    def get(self, file_id: int) -> tuple[str, str] | None:
        """Return `(filename, source)` for an id, or None if it is unknown."""
        return self.map.get(file_id)