"""JSON parsing into plain Python values.

Objects become dicts, arrays lists, numbers floats, and ``null`` None.
Text after the first complete value is ignored.
"""

from __future__ import annotations

from typing import Any

from saffron.tokenizer import TokenKind, TokenStream, Tokenizer


class ParseError(ValueError):
    """Raised when text cannot be scanned or parsed as JSON."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"ParseError: {self.message}"


class _Parser:
    def __init__(self, tokens: TokenStream) -> None:
        self._tokens = tokens

    def value(self) -> Any:
        token = self._tokens.current()
        kind = token.kind
        if kind is TokenKind.STRING:
            return self._tokens.advance().lexeme
        if kind is TokenKind.NUMBER:
            lexeme = self._tokens.advance().lexeme
            try:
                return float(lexeme)
            except ValueError:
                raise ParseError(f"Invalid number '{lexeme}'") from None
        if kind is TokenKind.BOOLEAN:
            lexeme = self._tokens.advance().lexeme
            if lexeme == "true":
                return True
            if lexeme == "false":
                return False
            raise ParseError(f"Invalid boolean literal '{lexeme}'")
        if kind is TokenKind.NULL:
            self._tokens.advance()
            return None
        if kind is TokenKind.LEFT_BRACE:
            return self.object()
        if kind is TokenKind.LEFT_BRACKET:
            return self.array()
        raise ParseError(f"Unexpected token: {kind.value}")

    def object(self) -> dict[str, Any]:
        if self._tokens.current().kind is not TokenKind.LEFT_BRACE:
            raise ParseError("Expected '{' at start of object")
        self._tokens.advance()

        result: dict[str, Any] = {}
        if self._tokens.current().kind is TokenKind.RIGHT_BRACE:
            self._tokens.advance()
            return result

        while True:
            key_token = self._tokens.current()
            if key_token.kind is not TokenKind.STRING:
                raise ParseError(
                    f"Expected string key in object, found {key_token.kind.value}"
                )
            key = self._tokens.advance().lexeme

            if self._tokens.current().kind is not TokenKind.COLON:
                raise ParseError("Expected ':' after object key")
            self._tokens.advance()

            result[key] = self.value()

            kind = self._tokens.current().kind
            if kind is TokenKind.COMMA:
                self._tokens.advance()
            elif kind is TokenKind.RIGHT_BRACE:
                self._tokens.advance()
                return result
            else:
                raise ParseError(f"Expected ',' or '}}' in object, found {kind.value}")

    def array(self) -> list[Any]:
        if self._tokens.current().kind is not TokenKind.LEFT_BRACKET:
            raise ParseError("Expected '[' at start of array")
        self._tokens.advance()

        items: list[Any] = []
        if self._tokens.current().kind is TokenKind.RIGHT_BRACKET:
            self._tokens.advance()
            return items

        while True:
            items.append(self.value())

            kind = self._tokens.current().kind
            if kind is TokenKind.COMMA:
                self._tokens.advance()
            elif kind is TokenKind.RIGHT_BRACKET:
                self._tokens.advance()
                return items
            else:
                raise ParseError(f"Expected ',' or ']' in array, found {kind.value}")


def parse_json(source: str) -> Any:
    """Parse ``source`` and return the first JSON value it holds."""
    try:
        tokens = Tokenizer(source).scan_tokens()
    except ValueError as exc:
        raise ParseError(str(exc)) from exc
    return _Parser(tokens).value()