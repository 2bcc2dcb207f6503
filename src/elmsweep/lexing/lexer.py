"""Single-pass lexer over one source file.

The lexer knows four triggers: ``--`` and ``{-`` open comments, ``module``
and ``import`` open statements. Each trigger has an independent matcher
``(content, offset) -> (Token, next_offset) | None``; ``Lexer.next_token``
tries them in fixed priority order and commits to the first success. Any
other character becomes a one-character positional marker, so ordinary
source text never produces an error.

The scan is driven by the caller, one unit per call:

    >>> lexer = Lexer("-- note\\ncode")
    >>> token, offset = lexer.next_token(0)
    >>> token.value, offset
    ('-- note', 7)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Union

from ..exceptions import FileAccessError, SourceFileNotFoundError
from ..logging_config import get_logger
from .comments import (
    BLOCK_OPEN,
    LINE_COMMENT,
    find_block_comment_end,
    find_line_comment_end,
)
from .statements import ImportStatement, ModuleStatement
from .tokens import Comment, CommentKind, Token, TokenKind

logger = get_logger(__name__)

Match = tuple[Token, int]
Matcher = Callable[[str, int], Optional[Match]]

MODULE_KEYWORD = "module"
IMPORT_KEYWORD = "import"

# A keyword only counts when followed by one of these
KEYWORD_TERMINATORS = (" ", "\n", "{")


def _continues_identifier(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def keyword_at(content: str, offset: int, keyword: str) -> bool:
    """Check that ``keyword`` starts at ``offset`` as a whole word."""
    if not content.startswith(keyword, offset):
        return False
    if offset > 0 and _continues_identifier(content[offset - 1]):
        return False
    end = offset + len(keyword)
    return end < len(content) and content[end] in KEYWORD_TERMINATORS


def match_line_comment(content: str, offset: int) -> Optional[Match]:
    if not content.startswith(LINE_COMMENT, offset):
        return None
    end = find_line_comment_end(content, offset)
    comment = Comment(CommentKind.LINE, offset, end)
    return Token(content[offset:end], TokenKind.COMMENT, offset, end, comment), end


def match_block_comment(content: str, offset: int) -> Optional[Match]:
    if not content.startswith(BLOCK_OPEN, offset):
        return None
    end = find_block_comment_end(content, offset)
    comment = Comment(CommentKind.BLOCK, offset, end)
    return Token(content[offset:end], TokenKind.COMMENT, offset, end, comment), end


def match_module_statement(content: str, offset: int) -> Optional[Match]:
    if not keyword_at(content, offset, MODULE_KEYWORD):
        return None
    statement, end = ModuleStatement.parse(offset + len(MODULE_KEYWORD), content)
    return Token(content[offset:end], TokenKind.MODULE_STATEMENT, offset, end, statement), end


def match_import_statement(content: str, offset: int) -> Optional[Match]:
    if not keyword_at(content, offset, IMPORT_KEYWORD):
        return None
    statement, end = ImportStatement.parse(offset + len(IMPORT_KEYWORD), content)
    return Token(content[offset:end], TokenKind.IMPORT_STATEMENT, offset, end, statement), end


# Priority order: the first matcher that succeeds wins
MATCHERS: tuple[Matcher, ...] = (
    match_line_comment,
    match_block_comment,
    match_module_statement,
    match_import_statement,
)


@dataclass
class LexResult:
    """Everything one lexer pass collected.

    Attributes:
        comments: Comments in source order
        module_statement: The file's module declaration, if present
        imports: Import statements in declaration order
        newlines: Offsets of newline markers
        spaces: Offsets of space and tab markers
    """

    comments: list[Comment] = field(default_factory=list)
    module_statement: Optional[ModuleStatement] = None
    imports: list[ImportStatement] = field(default_factory=list)
    newlines: list[int] = field(default_factory=list)
    spaces: list[int] = field(default_factory=list)


class Lexer:
    """Forward scanner over the content of one file."""

    def __init__(self, content: str, path: Optional[str] = None):
        self.content = content
        self.path = path

    @classmethod
    def from_file(cls, path: Union[str, Path], encoding: str = "utf-8") -> Lexer:
        """Read ``path`` and return a lexer over its trimmed content.

        Raises:
            SourceFileNotFoundError: If the file does not exist
            FileAccessError: If the file exists but cannot be read
        """
        filepath = Path(path)
        if not filepath.is_file():
            raise SourceFileNotFoundError(filepath)

        try:
            content = filepath.read_text(encoding=encoding)
        except UnicodeDecodeError as e:
            raise FileAccessError(filepath, f"Encoding error: {e}")
        except OSError as e:
            raise FileAccessError(filepath, f"OS error: {e}")

        return cls(content.strip(), path=str(filepath))

    def next_token(self, offset: int) -> Match:
        """Recognize one unit at ``offset`` and return it with the next offset."""
        for matcher in MATCHERS:
            match = matcher(self.content, offset)
            if match is not None:
                return match
        return Token("", TokenKind.NONE, offset, offset + 1), offset + 1

    def tokens(self) -> Iterator[Token]:
        """Yield every unit until the end of content."""
        offset = 0
        while offset < len(self.content):
            token, offset = self.next_token(offset)
            yield token

    def run(self) -> LexResult:
        """Scan the whole content and collect statements and comments."""
        result = LexResult()

        for token in self.tokens():
            if token.kind is TokenKind.COMMENT:
                result.comments.append(token.payload)
            elif token.kind is TokenKind.IMPORT_STATEMENT:
                result.imports.append(token.payload)
            elif token.kind is TokenKind.MODULE_STATEMENT:
                if result.module_statement is None:
                    result.module_statement = token.payload
                else:
                    logger.debug(f"Ignoring extra module statement in {self.path or '<content>'}")
            else:
                ch = self.content[token.start]
                if ch == "\n":
                    result.newlines.append(token.start)
                elif ch in " \t":
                    result.spaces.append(token.start)

        logger.debug(
            f"Lexed {self.path or '<content>'}: {len(result.imports)} imports, "
            f"{len(result.comments)} comments"
        )
        return result
