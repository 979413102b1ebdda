"""A small fixed pool of temporary variable names."""

from __future__ import annotations

DEFAULT_NAMES = ("V1", "V2", "V3", "V4", "V5", "V6", "V7")


class TooManyVariablesError(RuntimeError):
    """Raised when every temporary name is already in use."""


class VariablePool:
    """Hands out names stack-wise; a released name is the next one handed out."""

    def __init__(self, names: tuple[str, ...] | list[str] = DEFAULT_NAMES) -> None:
        self._names = list(names)
        self._used = 0

    @property
    def in_use(self) -> int:
        """How many names are currently handed out."""
        return self._used

    def acquire(self) -> str:
        """Take the next free name."""
        if self._used >= len(self._names):
            raise TooManyVariablesError("Too much variables needed")
        name = self._names[self._used]
        self._used += 1
        return name

    def release(self, name: str) -> None:
        """Give a name back; it fills the most recently taken slot."""
        if self._used == 0:
            raise IndexError("Stack underflow")
        self._used -= 1
        self._names[self._used] = name