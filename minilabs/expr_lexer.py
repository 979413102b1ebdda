"""Tokenizer for semicolon-separated arithmetic expressions."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from enum import IntEnum


class ExprToken(IntEnum):
    EOI = 0
    PLUS = 1
    TIMES = 2
    LP = 3
    RP = 4
    SEMI = 5
    NUM_OR_ID = 6


_PUNCTUATION = {
    ";": ExprToken.SEMI,
    "(": ExprToken.LP,
    ")": ExprToken.RP,
    "+": ExprToken.PLUS,
    "*": ExprToken.TIMES,
}

_WORD = re.compile(r"[A-Za-z0-9]+")


class ExprLexer:
    """Reads lines lazily and hands out one lookahead token at a time.

    ``line`` is the number of lines read so far, ``text`` the lexeme of the
    current lookahead, ``count`` the number of tokens read and ``errors``
    the messages about characters that were skipped.
    """

    def __init__(self, source: str | Iterable[str]) -> None:
        if isinstance(source, str):
            source = source.splitlines(keepends=True)
        self._lines = source
        self.line = 0
        self.text = ""
        self.count = 0
        self.lookahead: ExprToken | None = None
        self.errors: list[str] = []
        self._tokens = self._scan()

    def _scan(self) -> Iterator[tuple[ExprToken, str]]:
        for raw in self._lines:
            self.line += 1
            pos = 0
            while pos < len(raw):
                ch = raw[pos]
                if ch in _PUNCTUATION:
                    yield _PUNCTUATION[ch], ch
                    pos += 1
                elif ch in " \t\n":
                    pos += 1
                else:
                    found = _WORD.match(raw, pos)
                    if found:
                        pos = found.end()
                        yield ExprToken.NUM_OR_ID, found.group()
                    else:
                        self.errors.append(
                            f"{self.line}, Errore: {ch} carattere non riconosciuto"
                        )
                        pos += 1
        while True:
            yield ExprToken.EOI, ""

    def advance(self) -> None:
        """Move the lookahead to the next token."""
        self.lookahead, self.text = next(self._tokens)
        self.count += 1

    def match(self, token: ExprToken) -> bool:
        """Tell whether the lookahead is ``token``, reading one if needed."""
        if self.lookahead is None:
            self.advance()
        return token == self.lookahead