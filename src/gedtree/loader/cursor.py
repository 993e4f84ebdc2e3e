# src/gedtree/loader/cursor.py

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence

from .scanner import Token


class LineCursor:
    """
    Forward-only iterator over scanned tokens with restartable lookahead.

    Iterating the cursor yields each token once. ``nested(level)`` peeks at
    the tokens that follow the current position while their level is greater
    than ``level``; it never moves the cursor. Once the lookahead has used a
    token, ``consume_through(token)`` advances the outer iteration past it so
    those lines are not handled twice.
    """

    def __init__(self, tokens: Sequence[Token]):
        self._tokens: List[Token] = list(tokens)
        self._pos = 0

    def __iter__(self) -> Iterator[Token]:
        while self._pos < len(self._tokens):
            token = self._tokens[self._pos]
            self._pos += 1
            yield token

    def __len__(self) -> int:  # pragma: no cover - trivial wrapper
        return len(self._tokens)

    @property
    def position(self) -> int:
        return self._pos

    def nested(self, level: int) -> Iterator[Token]:
        """Yield following tokens until one has a level <= ``level``."""
        index = self._pos
        while index < len(self._tokens):
            token = self._tokens[index]
            if token.level <= level:
                return
            yield token
            index += 1

    def find_nested(self, level: int, tag: str, max_depth: Optional[int] = None) -> Optional[Token]:
        """
        Return the first nested token with ``tag`` beneath ``level``.

        ``max_depth`` restricts matches to ``level + max_depth`` and shallower.
        """
        for token in self.nested(level):
            if max_depth is not None and token.level > level + max_depth:
                continue
            if token.tag == tag:
                return token
        return None

    def consume_through(self, token: Token) -> None:
        """Advance the cursor so the next yielded token follows ``token``."""
        for index in range(self._pos, len(self._tokens)):
            if self._tokens[index] is token:
                self._pos = index + 1
                return
