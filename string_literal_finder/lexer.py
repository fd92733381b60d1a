"""
Minimal lexer for Dart source text.

It only needs to find token boundaries and attach comments to the token that
follows them, which is what the `// NON-NLS` line check relies on.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
_NUMBER = re.compile(r"0[xX][0-9a-fA-F]+|\d+(?:\.\d+)?(?:[eE][+-]?\d+)?")
_QUOTES = ("'", '"')


class TokenKind(Enum):
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    STRING = "STRING"
    PUNCTUATION = "PUNCTUATION"
    EOF = "EOF"


@dataclass(frozen=True)
class Comment:
    text: str
    offset: int
    end: int


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str
    offset: int
    end: int
    preceding_comments: Tuple[Comment, ...] = ()


class Lexer:
    """Splits source text into tokens; comments ride on the next token."""

    def __init__(self, content: str):
        self.content = content
        self.length = len(content)

    def tokenize(self) -> List[Token]:
        content = self.content
        tokens: List[Token] = []
        comments: List[Comment] = []
        pos = 0
        while True:
            while pos < self.length and content[pos].isspace():
                pos += 1
            if pos >= self.length:
                tokens.append(Token(TokenKind.EOF, "", self.length, self.length, tuple(comments)))
                return tokens

            if content.startswith("//", pos):
                end = content.find("\n", pos)
                if end == -1:
                    end = self.length
                if end > pos and content[end - 1] == "\r":
                    end -= 1
                comments.append(Comment(content[pos:end], pos, end))
                pos = max(end, pos + 2)
                continue
            if content.startswith("/*", pos):
                end = self._block_comment_end(pos)
                comments.append(Comment(content[pos:end], pos, end))
                pos = end
                continue

            identifier = _IDENTIFIER.match(content, pos)
            number = _NUMBER.match(content, pos)
            if self._starts_string(pos):
                kind, end = TokenKind.STRING, self._scan_string(pos)
            elif identifier:
                kind, end = TokenKind.IDENTIFIER, identifier.end()
            elif number:
                kind, end = TokenKind.NUMBER, number.end()
            else:
                kind, end = TokenKind.PUNCTUATION, pos + 1

            tokens.append(Token(kind, content[pos:end], pos, end, tuple(comments)))
            comments = []
            pos = end

    def _starts_string(self, pos: int) -> bool:
        ch = self.content[pos]
        if ch in _QUOTES:
            return True
        # raw string prefix, r'...'
        return (
            ch in "rR"
            and pos + 1 < self.length
            and self.content[pos + 1] in _QUOTES
        )

    def _block_comment_end(self, pos: int) -> int:
        """Block comments nest in Dart."""
        depth = 0
        i = pos
        while i < self.length:
            if self.content.startswith("/*", i):
                depth += 1
                i += 2
            elif self.content.startswith("*/", i):
                depth -= 1
                i += 2
                if depth == 0:
                    return i
            else:
                i += 1
        return self.length

    def _scan_string(self, pos: int) -> int:
        content = self.content
        raw = content[pos] in "rR"
        if raw:
            pos += 1
        quote = content[pos]
        delimiter = quote * 3 if content.startswith(quote * 3, pos) else quote
        i = pos + len(delimiter)
        while i < self.length:
            if content.startswith(delimiter, i):
                return i + len(delimiter)
            ch = content[i]
            if ch == "\\" and not raw:
                i += 2
                continue
            if ch == "\n" and len(delimiter) == 1:
                # unterminated single line string
                return i
            if not raw and content.startswith("${", i):
                i = self._skip_interpolation(i + 2)
                continue
            i += 1
        return self.length

    def _skip_interpolation(self, i: int) -> int:
        depth = 1
        while i < self.length:
            ch = self.content[i]
            if ch in _QUOTES:
                i = self._scan_string(i)
                continue
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return i + 1
            i += 1
        return self.length


def tokenize(content: str) -> List[Token]:
    """Tokenize `content`. The last token is always EOF."""
    return Lexer(content).tokenize()
