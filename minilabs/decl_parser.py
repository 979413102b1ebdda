"""Recursive-descent checker for C-style variable declarations."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from minilabs.decl_lexer import DeclLexer, DeclToken

T = DeclToken


class DeclarationParser:
    """Checks a sequence of ``[mods] [sign] [length] type name ;`` declarations."""

    def __init__(self, source: str | Iterable[str] | DeclLexer) -> None:
        self.lexer = source if isinstance(source, DeclLexer) else DeclLexer(source)
        self.errors: list[str] = []

    def _error(self, message: str) -> None:
        self.errors.append(f"{self.lexer.line}, Error: {message}")

    def _match_any(self, *kinds: DeclToken) -> bool:
        return any(self.lexer.match(kind) for kind in kinds)

    def parse(self) -> list[str]:
        """Consume the whole input and return the error messages found."""
        lexer = self.lexer
        while not lexer.match(T.EOI):
            self._type()
            self._name()
            if lexer.match(T.SEMI):
                lexer.advance()
            else:
                self._error("missing semicolon")
        return list(self.errors)

    def _name(self) -> None:
        if self.lexer.match(T.NUM_ID):
            self.lexer.advance()
        else:
            self._error("missing variable NAME")

    def _type(self) -> None:
        self._modifiers()
        signed = self._sign()
        any_len, only_long = self._length()

        if signed:
            if not self._match_any(T.INT, T.CHAR):
                self._error("expected INT or CHAR")
            self.lexer.advance()
            return

        if any_len:
            if only_long:
                if self._match_any(T.INT, T.DOUBLE):
                    self.lexer.advance()
                else:
                    self._error("expected INT or DOUBLE")
            elif self.lexer.match(T.INT):
                self.lexer.advance()
            else:
                self._error("expected INT")
            return

        if self._match_any(T.INT, T.CHAR, T.FLOAT, T.DOUBLE):
            self.lexer.advance()
        else:
            self._error("expected type specifier")

    def _modifiers(self) -> None:
        while self._match_any(T.CONST, T.VOLATILE):
            self.lexer.advance()

    def _sign(self) -> bool:
        if self._match_any(T.SIGNED, T.UNSIGNED):
            self.lexer.advance()
            return True
        return False

    def _length(self) -> tuple[bool, bool]:
        if self.lexer.match(T.SHORT):
            self.lexer.advance()
            return True, False
        if self.lexer.match(T.LONG):
            self.lexer.advance()
            if self.lexer.match(T.LONG):
                self.lexer.advance()
                return True, False
            return True, True
        return False, False


def main(argv: list[str] | None = None) -> int:
    """Check the declarations in a file (default ``Declaration.txt``)."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "Declaration.txt"
    try:
        with open(path, encoding="utf-8") as handle:
            errors = DeclarationParser(handle).parse()
    except OSError as exc:
        print(f"Unable to open {path}: {exc.strerror}", file=sys.stderr)
        return 1
    for message in errors:
        print(message, file=sys.stderr)
    return 0