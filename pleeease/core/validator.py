"""Core CSS syntax checks."""

from typing import List, Optional

from ..utils.error import CssSyntaxError


def check_syntax(css: str, source: Optional[str] = None) -> None:
    """Check that blocks, strings and comments are closed.

    Braces inside strings and comments are ignored.

    Args:
        css: Stylesheet text
        source: File name reported in errors

    Raises:
        CssSyntaxError: On the first structural error found
    """
    blocks: List[int] = []
    line = 1
    quote = None
    quote_line = 0
    comment_line = 0
    in_comment = False
    i = 0
    length = len(css)

    while i < length:
        char = css[i]
        if char == '\n':
            line += 1

        if in_comment:
            if char == '*' and css.startswith('/', i + 1):
                in_comment = False
                i += 1
        elif quote:
            if char == '\\':
                i += 1
                if css.startswith('\n', i):
                    line += 1
            elif char == quote:
                quote = None
            elif char == '\n':
                raise CssSyntaxError('Unclosed string', quote_line, source)
        elif char == '/' and css.startswith('*', i + 1):
            in_comment = True
            comment_line = line
            i += 1
        elif char in ('"', "'"):
            quote = char
            quote_line = line
        elif char == '{':
            blocks.append(line)
        elif char == '}':
            if not blocks:
                raise CssSyntaxError('Unexpected }', line, source)
            blocks.pop()
        i += 1

    if in_comment:
        raise CssSyntaxError('Unclosed comment', comment_line, source)
    if quote:
        raise CssSyntaxError('Unclosed string', quote_line, source)
    if blocks:
        raise CssSyntaxError('Unclosed block', blocks[-1], source)


__all__ = ['check_syntax']
