"""Comment scanning: line comments and nesting-aware block comments."""

LINE_COMMENT = "--"
BLOCK_OPEN = "{-"
BLOCK_CLOSE = "-}"


def find_line_comment_end(content: str, offset: int) -> int:
    """Return the offset of the newline ending a line comment, or len(content)."""
    end = content.find("\n", offset)
    if end == -1:
        return len(content)
    return end


def find_block_comment_end(content: str, offset: int) -> int:
    """Return the offset just past the block comment opened at ``offset``.

    Every ``{-`` bumps the open count and every ``-}`` the close count; the
    comment ends right after the closer that makes the counts equal, so
    inner closers never end it early. An unterminated comment runs to the
    end of content.
    """
    opened = 0
    closed = 0
    i = offset
    length = len(content)

    while i < length - 1:
        pair = content[i : i + 2]
        if pair == BLOCK_OPEN:
            opened += 1
            i += 2
        elif pair == BLOCK_CLOSE:
            closed += 1
            i += 2
            if opened == closed:
                return i
        else:
            i += 1

    return length


def strip_comments(text: str) -> str:
    """Remove line and block comments from a statement span.

    Block comments are replaced by a single space so the tokens around them
    stay separated.
    """
    out: list[str] = []
    i = 0
    length = len(text)

    while i < length:
        if text.startswith(LINE_COMMENT, i):
            i = find_line_comment_end(text, i)
        elif text.startswith(BLOCK_OPEN, i):
            i = find_block_comment_end(text, i)
            out.append(" ")
        else:
            out.append(text[i])
            i += 1

    return "".join(out)
