"""Recursive-descent parsers for ``+``/``*`` expressions: a code generator and a recognizer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from minilabs.expr_lexer import ExprLexer, ExprToken
from minilabs.expr_vars import TooManyVariablesError, VariablePool

T = ExprToken

_FIRST = (T.NUM_OR_ID, T.LP)


class _Base:
    def __init__(self, source: str | Iterable[str] | ExprLexer) -> None:
        self.lexer = source if isinstance(source, ExprLexer) else ExprLexer(source)
        self.errors = self.lexer.errors

    def _error(self, message: str) -> None:
        self.errors.append(f"{self.lexer.line}, Error: {message}")

    def _expect_semicolon(self) -> None:
        if self.lexer.match(T.SEMI):
            self.lexer.advance()
        else:
            self._error("Missing semicolon on line")

    def _close_paren(self) -> None:
        if self.lexer.match(T.RP):
            self.lexer.advance()
        else:
            self._error("Parenthesis doesn't match")


class CodeGenerator(_Base):
    """Translates each expression into three-address style assignments.

    Generated lines gather in ``output``, with an empty line after each
    statement; diagnostics gather in ``errors``.
    """

    def __init__(
        self,
        source: str | Iterable[str] | ExprLexer,
        pool: VariablePool | None = None,
    ) -> None:
        super().__init__(source)
        self.pool = pool if pool is not None else VariablePool()
        self.output: list[str] = []

    def _acquire(self) -> str:
        try:
            return self.pool.acquire()
        except TooManyVariablesError as exc:
            raise TooManyVariablesError(f"{self.lexer.line}, Error: {exc}") from None

    def statement(self) -> list[str]:
        """Translate the whole input and return the generated lines."""
        while not self.lexer.match(T.EOI):
            var = self._acquire()
            self._expression(var)
            self.pool.release(var)
            self.output.append("")
            self._expect_semicolon()
        return list(self.output)

    def _expression(self, var: str) -> None:
        if not self._legal_lookahead(*_FIRST):
            return
        self._term(var)
        while self.lexer.match(T.PLUS):
            self.lexer.advance()
            other = self._acquire()
            self._term(other)
            self.output.append(f"{var} += {other}")
            self.pool.release(other)

    def _term(self, var: str) -> None:
        if not self._legal_lookahead(*_FIRST):
            return
        self._factor(var)
        while self.lexer.match(T.TIMES):
            self.lexer.advance()
            other = self._acquire()
            self._factor(other)
            self.output.append(f"{var} *= {other}")
            self.pool.release(other)

    def _factor(self, var: str) -> None:
        if not self._legal_lookahead(*_FIRST):
            return
        if self.lexer.match(T.NUM_OR_ID):
            self.output.append(f"{var} = {self.lexer.text}")
            self.lexer.advance()
        elif self.lexer.match(T.LP):
            self.lexer.advance()
            self._expression(var)
            self._close_paren()
        else:
            self._error("Number or id missing")

    def _legal_lookahead(self, *tokens: ExprToken) -> bool:
        """Skip input until one of ``tokens`` comes up; False if a ``;`` or the end comes first."""
        if not tokens:
            return self.lexer.match(T.EOI)
        reported = False
        while not self.lexer.match(T.SEMI) and not self.lexer.match(T.EOI):
            if any(self.lexer.match(token) for token in tokens):
                return True
            if not reported:
                self._error("No first set value")
                reported = True
            self.lexer.advance()
        return False


class Recognizer(_Base):
    """Checks the expression grammar without generating code."""

    def statement(self) -> list[str]:
        """Consume the whole input and return the error messages found."""
        while True:
            self.lexer.match(T.EOI)
            start = self.lexer.count
            self._expression()
            self._expect_semicolon()
            if self.lexer.match(T.EOI):
                break
            if self.lexer.count == start:
                # Nothing accepted the lookahead; drop it so parsing moves on.
                self.lexer.advance()
        return list(self.errors)

    def _expression(self) -> None:
        self._term()
        while self.lexer.match(T.PLUS):
            self.lexer.advance()
            self._term()

    def _term(self) -> None:
        self._factor()
        while self.lexer.match(T.TIMES):
            self.lexer.advance()
            self._factor()

    def _factor(self) -> None:
        if self.lexer.match(T.NUM_OR_ID):
            self.lexer.advance()
        elif self.lexer.match(T.LP):
            self.lexer.advance()
            self._expression()
            self._close_paren()
        else:
            self._error("Number or id missing")


def main(argv: list[str] | None = None) -> int:
    """Translate (or only check) the expressions in a file (default ``Test.txt``)."""
    parser = argparse.ArgumentParser(description="Parse ';'-separated expressions.")
    parser.add_argument("path", nargs="?", default="Test.txt")
    parser.add_argument(
        "-r", "--recognize", action="store_true", help="only check the grammar"
    )
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            if args.recognize:
                errors = Recognizer(handle).statement()
                output: list[str] = []
            else:
                generator = CodeGenerator(handle)
                try:
                    output = generator.statement()
                except TooManyVariablesError as exc:
                    for line in generator.output:
                        print(line)
                    for message in generator.errors:
                        print(message, file=sys.stderr)
                    print(exc, file=sys.stderr)
                    return 1
                errors = generator.errors
    except OSError as exc:
        print(f"Unable to open {args.path}: {exc.strerror}", file=sys.stderr)
        return 1
    for line in output:
        print(line)
    for message in errors:
        print(message, file=sys.stderr)
    return 0