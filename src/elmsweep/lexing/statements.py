"""Parsers for ``module`` and ``import`` statements.

Both parsers start just past their keyword and decide where the statement
ends with the same heuristic: the first newline immediately followed by a
letter. A line starting with a letter at column zero begins the next
top-level declaration, so indented continuation lines stay inside the
statement.

Example:
    >>> stmt, end = ImportStatement.parse(6, "import Foo.Bar as FB exposing (a, b)")
    >>> str(stmt)
    'import Foo.Bar as FB exposing (a, b)'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .comments import strip_comments

_DOTTED_NAME_RE = re.compile(r"[A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*")
_ALIAS_RE = re.compile(r"\s+as\s+([A-Za-z_]\w*)")
_EXPOSING_RE = re.compile(r"\bexposing\s*\(")


def find_end_of_statement(content: str, offset: int) -> int:
    """Return the offset of the newline that ends the statement at ``offset``.

    Falls back to ``len(content)`` when no later line starts with a letter.
    """
    for i in range(offset, len(content) - 1):
        if content[i] == "\n" and content[i + 1].isalpha():
            return i
    return len(content)


def _normalize(span: str) -> str:
    """Drop comments and collapse all whitespace runs to single spaces."""
    return " ".join(strip_comments(span).split())


def _exposing_list(text: str) -> tuple[str, ...]:
    """Split the parenthesized ``exposing (...)`` list on top-level commas.

    Nested parentheses stay inside their entry, so ``Msg(..)`` is one entry.
    Order and duplicates are kept as written.
    """
    match = _EXPOSING_RE.search(text)
    if match is None:
        return ()

    entries: list[str] = []
    current: list[str] = []
    depth = 1
    for ch in text[match.end() :]:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                break
        if ch == "," and depth == 1:
            entries.append("".join(current))
            current = []
            continue
        current.append(ch)
    entries.append("".join(current))

    return tuple(entry.strip() for entry in entries if entry.strip())


@dataclass(frozen=True)
class ModuleStatement:
    """A file's own ``module`` declaration.

    ``dotted_name`` is empty when the statement is malformed; callers then
    derive the module name from the file path.
    """

    dotted_name: str
    exposing: tuple[str, ...] = ()

    @classmethod
    def parse(cls, offset: int, content: str) -> tuple[ModuleStatement, int]:
        end = find_end_of_statement(content, offset)
        text = _normalize(content[offset:end])

        match = _DOTTED_NAME_RE.match(text)
        name = match.group(0) if match else ""

        return cls(dotted_name=name, exposing=_exposing_list(text)), end

    def __str__(self) -> str:
        exposing = f" exposing ({', '.join(self.exposing)})" if self.exposing else ""
        return f"module {self.dotted_name}{exposing}"


@dataclass(frozen=True)
class ImportStatement:
    """An ``import`` declaration.

    Attributes:
        dotted_name: Imported module (e.g. "Foo.Bar")
        alias: Name given with ``as``, if any
        exposing: Exposed identifiers in source order, duplicates kept
    """

    dotted_name: str
    alias: Optional[str] = None
    exposing: tuple[str, ...] = ()

    @classmethod
    def parse(cls, offset: int, content: str) -> tuple[ImportStatement, int]:
        end = find_end_of_statement(content, offset)
        text = _normalize(content[offset:end])

        match = _DOTTED_NAME_RE.match(text)
        if match is None:
            return cls(dotted_name=""), end

        name = match.group(0)
        rest = text[match.end() :]

        alias = None
        alias_match = _ALIAS_RE.match(rest)
        if alias_match is not None:
            alias = alias_match.group(1)
            rest = rest[alias_match.end() :]

        return cls(dotted_name=name, alias=alias, exposing=_exposing_list(rest)), end

    def __str__(self) -> str:
        exposing = f" exposing ({', '.join(self.exposing)})" if self.exposing else ""
        if self.alias:
            return f"import {self.dotted_name} as {self.alias}{exposing}"
        return f"import {self.dotted_name}{exposing}"
