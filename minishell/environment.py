"""An ordered, mutable environment of ``NAME=value`` entries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping


class Environment:
    """Ordered list of ``NAME=value`` strings with lookup and update by name."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Environment":
        """Build an environment from a name-to-value mapping, keeping its order."""
        return cls(f"{name}={value}" for name, value in mapping.items())

    def _find(self, name: str) -> int | None:
        prefix = f"{name}="
        return next(
            (pos for pos, entry in enumerate(self._entries) if entry.startswith(prefix)),
            None,
        )

    def get(self, name: str) -> str | None:
        """Return the value of *name*, or None if it is not set."""
        pos = self._find(name)
        if pos is None:
            return None
        return self._entries[pos][len(name) + 1:]

    def set(self, name: str, value: str) -> None:
        """Set *name* to *value*, replacing it in place or appending it."""
        self._store(name, f"{name}={value}")

    def assign(self, assignment: str) -> bool:
        """Apply a ``NAME=value`` assignment; return False if it has no ``=``."""
        name, sep, _ = assignment.partition("=")
        if not sep:
            return False
        self._store(name, assignment)
        return True

    def remove(self, name: str) -> bool:
        """Remove the first entry named *name*; return whether one was removed."""
        if "=" in name:
            return False
        pos = self._find(name)
        if pos is None:
            return False
        del self._entries[pos]
        return True

    def entries(self) -> list[str]:
        """Return a copy of the entries in order."""
        return list(self._entries)

    def _store(self, name: str, entry: str) -> None:
        pos = self._find(name)
        if pos is None:
            self._entries.append(entry)
        else:
            self._entries[pos] = entry

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)