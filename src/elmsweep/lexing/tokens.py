"""Token models produced by the lexer.

A Token is the unit the lexer hands back on every step: its kind, the raw
text it covers, and its [start, end) offsets into the scanned content.
Statement and comment tokens also carry their parsed structure as payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from .statements import ImportStatement, ModuleStatement


class TokenKind(Enum):
    """What a token was recognized as."""

    COMMENT = "comment"
    MODULE_STATEMENT = "module_statement"
    IMPORT_STATEMENT = "import_statement"
    TYPE_ALIAS = "type_alias"
    TYPE_ENUM = "type_enum"
    FUNCTION = "function"
    NONE = "none"


class CommentKind(Enum):
    LINE = "line"
    BLOCK = "block"


@dataclass(frozen=True)
class Comment:
    """A line (``--``) or block (``{- -}``) comment.

    Attributes:
        kind: Line or block comment
        start: Offset of the opening delimiter
        end: Offset just past the comment (exclusive)
    """

    kind: CommentKind
    start: int
    end: int


Payload = Union["ModuleStatement", "ImportStatement", Comment, None]


@dataclass(frozen=True)
class Token:
    """One recognized unit of source text.

    Attributes:
        value: Covered text (empty for plain whitespace/text markers)
        kind: Recognized kind
        start: Start offset (inclusive)
        end: End offset (exclusive)
        payload: Parsed statement or comment, if any
    """

    value: str
    kind: TokenKind
    start: int
    end: int
    payload: Optional[Payload] = None

    @property
    def is_marker(self) -> bool:
        """True for the positional markers emitted for unrecognized text."""
        return self.kind is TokenKind.NONE and self.value == ""
