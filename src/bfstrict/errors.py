from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Optional, Tuple

_WINDOW = 32


def _line_col(source: str, position: int) -> Tuple[int, int]:
    # 1-based line, 0-based column
    before = source[:position]
    line_no = before.count('\n') + 1
    col = position - (before.rfind('\n') + 1)
    return line_no, col


def _build_context(lines: List[str], line_no_1: int, col: int, *, context: int = 2) -> str:
    idx = max(1, min(line_no_1, len(lines)))
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx:
            out.append(f"       | {' ' * col}^")
    return "\n".join(out)


def _hint_for(message: str, *, kind: str) -> Optional[str]:
    msg = message.lower()
    if kind == 'SyntaxError':
        if 'multi-line comment' in msg or 'stray comment' in msg:
            return 'Block comments must be closed: /* like this */. Use // for a comment that runs to the end of the line.'
        if 'unterminated while loop' in msg:
            return 'Every "[" needs a matching "]".'
        if 'trailing while loop' in msg:
            return 'Remove the extra "]" or add the "[" it was meant to close.'
        if 'unrecognised character' in msg:
            return 'Precede the line with // to make it a comment, or enclose text in /* and */.'
        return None
    if kind == 'OutOfBoundsError':
        return 'The tape holds cells 0 to 29999 and does not wrap.'
    if kind == 'OverflowError':
        return 'Cells hold values 0 to 255 and do not wrap.'
    if kind == 'SubZeroError':
        return 'Cells hold values 0 to 255 and do not wrap.'
    return None


@dataclass
class BFError(Exception):
    message: str
    position: Optional[int] = None
    context: str = ''
    hint: Optional[str] = None

    kind: ClassVar[str] = 'Error'

    def __str__(self) -> str:
        if self.position is None:
            return f"{self.kind}: {self.message}"
        return f"{self.kind}: at position {self.position} - {self.message}"

    def describe(self) -> str:
        """Full diagnostic: headline, source excerpt and hint."""
        parts = [str(self)]
        if self.context:
            parts.append(self.context)
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        return "\n".join(parts)


@dataclass
class BFSyntaxError(BFError):
    kind: ClassVar[str] = 'SyntaxError'


@dataclass
class OutOfBoundsError(BFError):
    kind: ClassVar[str] = 'OutOfBoundsError'


@dataclass
class BFOverflowError(BFError):
    kind: ClassVar[str] = 'OverflowError'


@dataclass
class SubZeroError(BFError):
    kind: ClassVar[str] = 'SubZeroError'


@dataclass
class LoopStackError(BFError):
    kind: ClassVar[str] = 'InternalError'


@dataclass
class FileLoadError(BFError):
    kind: ClassVar[str] = 'FileLoadError'


@dataclass
class ArgumentError(BFError):
    kind: ClassVar[str] = 'ArgumentError'


def make_syntax_error(*, message: str, source: str, position: int) -> BFSyntaxError:
    line_no, col = _line_col(source, position)
    ctx = _build_context(source.split('\n'), line_no, col)
    return BFSyntaxError(
        message=message,
        position=position,
        context=ctx,
        hint=_hint_for(message, kind=BFSyntaxError.kind),
    )


def make_runtime_error(cls, *, message: str, code: str, position: int) -> BFError:
    # Engine positions index the sanitized stream, which is a single line.
    start = max(0, position - _WINDOW)
    excerpt = code[start:position + _WINDOW]
    ctx = _build_context([excerpt], 1, position - start) if excerpt else ''
    return cls(
        message=message,
        position=position,
        context=ctx,
        hint=_hint_for(message, kind=cls.kind),
    )
