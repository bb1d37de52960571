"""Core value types: non-owning string views and scan cursors."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import cast


type TextLike = str | StrView


@dataclass(frozen=True, slots=True, eq=False)
class StrView:
    """Read-only window ``source[start:stop]`` that never copies the text.

    An empty view is the "no result" sentinel used throughout the package;
    ``bool(view)`` is False for it. Views compare equal to plain strings and
    to other views by their characters, not by their offsets.
    """

    source: str
    start: int = 0
    stop: int | None = None

    def __post_init__(self) -> None:
        if self.stop is None:
            object.__setattr__(self, "stop", len(self.source))
        stop = self.end
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start}")
        if stop < self.start:
            raise ValueError(f"stop must be >= start, got {stop} < {self.start}")
        if stop > len(self.source):
            raise ValueError(
                f"stop must be <= len(source), got {stop} > {len(self.source)}",
            )

    @classmethod
    def of(cls, text: TextLike | None) -> StrView:
        """Wrap ``text`` in a view; views pass through, ``None`` becomes empty."""
        if isinstance(text, StrView):
            return text
        if text is None:
            return cls("")
        return cls(text)

    @property
    def end(self) -> int:
        return cast(int, self.stop)

    @property
    def text(self) -> str:
        """Materialize the viewed characters as a new ``str``."""
        return self.source[self.start:self.end]

    def subview(self, start: int, stop: int | None = None) -> StrView:
        """Return a view relative to this one, clamped to its bounds."""
        size = len(self)
        lo = min(max(start, 0), size)
        hi = size if stop is None else min(max(stop, lo), size)
        return StrView(self.source, self.start + lo, self.start + hi)

    def __len__(self) -> int:
        return self.end - self.start

    def __bool__(self) -> bool:
        return self.end > self.start

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"StrView({self.text!r}, start={self.start}, stop={self.end})"

    def __iter__(self) -> Iterator[str]:
        for i in range(self.start, self.end):
            yield self.source[i]

    def __getitem__(self, key: int | slice) -> str | StrView:
        if isinstance(key, slice):
            lo, hi, step = key.indices(len(self))
            if step != 1:
                raise ValueError("StrView slices do not support a step")
            return StrView(self.source, self.start + lo, self.start + max(lo, hi))
        size = len(self)
        if key < 0:
            key += size
        if not 0 <= key < size:
            raise IndexError("StrView index out of range")
        return self.source[self.start + key]

    def __contains__(self, item: object) -> bool:
        if isinstance(item, StrView):
            item = item.text
        if not isinstance(item, str):
            return False
        return self.source.find(item, self.start, self.end) >= 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StrView):
            return self.text == other.text
        if isinstance(other, str):
            return self.text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)


@dataclass(slots=True)
class Cursor:
    """Caller-owned scan position threaded through ``substr`` calls."""

    offset: int = 0

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")

    def exhausted(self, sequence: TextLike) -> bool:
        return self.offset >= len(sequence)
