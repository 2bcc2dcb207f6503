"""Top-level declaration outline.

Walks a file one top-level statement at a time and classifies each one:
comments, module and import statements, type aliases, custom types, and
functions (a type annotation is merged with the definition that follows it).
Statement boundaries use the same newline-then-letter heuristic as the
statement parsers, so this is an outline, not a parse.
"""

from __future__ import annotations

import re

from .lexer import MATCHERS, match_module_statement
from .statements import find_end_of_statement
from .tokens import Token, TokenKind

_PREFIXED_MODULE_RE = re.compile(r"(?:port|effect)\s+(?=module\b)")
_TYPE_ALIAS_RE = re.compile(r"type\s+alias\b")
_TYPE_RE = re.compile(r"type\b")
_ANNOTATION_RE = re.compile(r"([a-z_]\w*)\s*:(?!:)")
_FUNCTION_HEAD_RE = re.compile(r"([a-z_]\w*)\b[^=\n]*=(?!=)")


def scan_declarations(content: str) -> list[Token]:
    """Return one token per top-level declaration, in source order."""
    tokens: list[Token] = []
    offset = 0
    length = len(content)

    while offset < length:
        if content[offset].isspace():
            offset += 1
            continue

        for matcher in MATCHERS:
            match = matcher(content, offset)
            if match is not None:
                token, offset = match
                tokens.append(token)
                break
        else:
            token, offset = _match_declaration(content, offset)
            tokens.append(token)

    return tokens


def _match_declaration(content: str, offset: int) -> tuple[Token, int]:
    prefixed = _PREFIXED_MODULE_RE.match(content, offset)
    if prefixed is not None:
        module_match = match_module_statement(content, prefixed.end())
        if module_match is not None:
            token, end = module_match
            # Widen the token to cover the port/effect prefix
            return Token(content[offset:end], token.kind, offset, end, token.payload), end

    end = find_end_of_statement(content, offset)
    value = content[offset:end]

    if _TYPE_ALIAS_RE.match(value):
        return Token(value, TokenKind.TYPE_ALIAS, offset, end), end
    if _TYPE_RE.match(value):
        return Token(value, TokenKind.TYPE_ENUM, offset, end), end

    annotation = _ANNOTATION_RE.match(value)
    if annotation is not None:
        name = annotation.group(1)
        body_start = end + 1
        if body_start < len(content):
            head = _FUNCTION_HEAD_RE.match(content, body_start)
            if head is not None and head.group(1) == name:
                end = find_end_of_statement(content, body_start)
                value = content[offset:end]
        return Token(value, TokenKind.FUNCTION, offset, end), end

    if _FUNCTION_HEAD_RE.match(value):
        return Token(value, TokenKind.FUNCTION, offset, end), end

    return Token(value, TokenKind.NONE, offset, end), end

