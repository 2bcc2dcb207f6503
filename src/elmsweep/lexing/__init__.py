"""Lexing: comments, module and import statements, declaration outline."""

from .comments import find_block_comment_end, find_line_comment_end, strip_comments
from .declarations import scan_declarations
from .lexer import MATCHERS, Lexer, LexResult, keyword_at
from .statements import ImportStatement, ModuleStatement, find_end_of_statement
from .tokens import Comment, CommentKind, Token, TokenKind

__all__ = [
    "Lexer",
    "LexResult",
    "MATCHERS",
    "keyword_at",
    "Token",
    "TokenKind",
    "Comment",
    "CommentKind",
    "ModuleStatement",
    "ImportStatement",
    "find_end_of_statement",
    "find_block_comment_end",
    "find_line_comment_end",
    "strip_comments",
    "scan_declarations",
]
