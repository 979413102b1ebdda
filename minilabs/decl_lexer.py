"""Tokenizer for simple C-style variable declarations."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from enum import IntEnum


class DeclToken(IntEnum):
    INT = 1
    CHAR = 2
    FLOAT = 3
    DOUBLE = 4
    SIGNED = 5
    UNSIGNED = 6
    LONG = 7
    SHORT = 8
    CONST = 9
    VOLATILE = 10
    EOI = 11
    SEMI = 12
    NUM_ID = 13


_KEYWORDS = {
    "int": DeclToken.INT,
    "char": DeclToken.CHAR,
    "float": DeclToken.FLOAT,
    "double": DeclToken.DOUBLE,
    "signed": DeclToken.SIGNED,
    "unsigned": DeclToken.UNSIGNED,
    "long": DeclToken.LONG,
    "short": DeclToken.SHORT,
    "const": DeclToken.CONST,
    "volatile": DeclToken.VOLATILE,
}

_WORD = re.compile(r"[A-Za-z0-9_]+")


class DeclLexer:
    """Reads lines lazily and hands out one lookahead token at a time.

    ``line`` is the number of lines read so far and ``text`` the lexeme of
    the current lookahead.
    """

    def __init__(self, source: str | Iterable[str]) -> None:
        if isinstance(source, str):
            source = source.splitlines(keepends=True)
        self._lines = source
        self.line = 0
        self.text = ""
        self.lookahead: DeclToken | None = None
        self._tokens = self._scan()

    def _scan(self) -> Iterator[tuple[DeclToken, str]]:
        for raw in self._lines:
            self.line += 1
            pos = 0
            while pos < len(raw):
                ch = raw[pos]
                if ch == ";":
                    yield DeclToken.SEMI, ch
                    pos += 1
                elif ch in " \t\n":
                    pos += 1
                else:
                    found = _WORD.match(raw, pos)
                    if found:
                        word = found.group()
                        pos = found.end()
                        yield _KEYWORDS.get(word, DeclToken.NUM_ID), word
                    else:
                        # A stray character stands on its own as an identifier.
                        yield DeclToken.NUM_ID, ch
                        pos += 1
        while True:
            yield DeclToken.EOI, ""

    def advance(self) -> None:
        """Move the lookahead to the next token."""
        self.lookahead, self.text = next(self._tokens)

    def match(self, token: DeclToken) -> bool:
        """Tell whether the lookahead is ``token``, reading one if needed."""
        if self.lookahead is None:
            self.advance()
        return token == self.lookahead