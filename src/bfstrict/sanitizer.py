import logging
import re

from typing import List, Tuple

from .errors import make_syntax_error

logger = logging.getLogger(__name__)

LINE_COMMENT = '//'
BLOCK_OPEN = '/*'
BLOCK_CLOSE = '*/'

_LINE_COMMENT_RE = re.compile(re.escape(LINE_COMMENT) + r'.*')
_WHITESPACE_RE = re.compile(r'[ \t\r\n]')
# Newlines are gone by the time block comments are stripped, so no DOTALL.
_BLOCK_COMMENT_RE = re.compile(re.escape(BLOCK_OPEN) + r'.*?' + re.escape(BLOCK_CLOSE))

# Stripped text plus, for every surviving character, its offset in the raw source.
_Tracked = Tuple[str, List[int]]


def _remove(tracked: _Tracked, pattern: re.Pattern) -> _Tracked:
    text, offsets = tracked
    kept_text: List[str] = []
    kept_offsets: List[int] = []
    last = 0
    for m in pattern.finditer(text):
        kept_text.append(text[last:m.start()])
        kept_offsets.extend(offsets[last:m.start()])
        last = m.end()
    kept_text.append(text[last:])
    kept_offsets.extend(offsets[last:])
    return ''.join(kept_text), kept_offsets


def _strip(source: str) -> _Tracked:
    tracked: _Tracked = (source, list(range(len(source))))
    tracked = _remove(tracked, _LINE_COMMENT_RE)
    tracked = _remove(tracked, _WHITESPACE_RE)
    return _remove(tracked, _BLOCK_COMMENT_RE)


def strip_comments(source: str) -> str:
    """Remove comments and whitespace without validating what is left."""
    return _strip(source)[0]


def _check_comment_markers(source: str, tracked: _Tracked) -> None:
    text, offsets = tracked

    pos = text.find(BLOCK_OPEN)
    if pos >= 0:
        raise make_syntax_error(
            message=f'cannot import code with unterminated multi-line comments. ("{BLOCK_OPEN}" was found in the code.)',
            source=source,
            position=offsets[pos],
        )

    pos = text.find(BLOCK_CLOSE)
    if pos >= 0:
        raise make_syntax_error(
            message=f'cannot import code with stray comment characters. ("{BLOCK_CLOSE}" was found in the code.)',
            source=source,
            position=offsets[pos],
        )


def _check_loop_balance(source: str, tracked: _Tracked) -> None:
    # Counts only: "][" passes here and is caught by the interpreter.
    text, offsets = tracked
    starts = text.count('[')
    ends = text.count(']')

    if starts > ends:
        raise make_syntax_error(
            message='cannot import code with unterminated while loops. (Unmatched "[" was found in the code.)',
            source=source,
            position=offsets[text.find('[')],
        )

    if starts < ends:
        raise make_syntax_error(
            message='cannot import code with trailing while loop characters. (Unmatched "]" was found in the code.)',
            source=source,
            position=offsets[text.rfind(']')],
        )


def sanitize(source: str) -> str:
    """
    Turn raw source into an instruction stream.

    Steps:
    1. Strip // comments up to the end of the line
    2. Strip all whitespace
    3. Strip /* ... */ comments
    4. Reject leftover comment markers
    5. Reject unbalanced loop brackets

    Error positions are offsets into ``source``.

    Raises:
        BFSyntaxError: on a dangling comment marker or unbalanced brackets
    """
    tracked = _strip(source)
    _check_comment_markers(source, tracked)
    _check_loop_balance(source, tracked)

    code = tracked[0]
    logger.debug("sanitized %d source chars into %d instructions", len(source), len(code))
    return code
