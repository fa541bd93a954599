from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .state import MachineState

NO_OUTPUT_NOTICE = "No output provided."


class Colors:
    RED = '\033[31m'
    GREEN = '\033[32m'
    CYAN = '\033[38;2;145;231;255m'
    ENDC = '\033[0m'


def paint(text: str, color: str, *, enabled: bool = True) -> str:
    if not enabled:
        return text
    return f"{color}{text}{Colors.ENDC}"


@dataclass(frozen=True)
class MemoryReport:
    cells: Tuple[Tuple[int, int], ...]
    pointer: int

    @classmethod
    def from_state(cls, state: MachineState) -> "MemoryReport":
        """Non-zero cells from 0 through the furthest pointer reached, in order."""
        window = state.memory[:state.furthest_ptr + 1]
        cells = tuple((int(i), int(window[i])) for i in window.nonzero()[0])
        return cls(cells=cells, pointer=state.pointer)


@dataclass(frozen=True)
class RunResult:
    output: str
    produced_output: bool
    notice: Optional[str]
    memory: Optional[MemoryReport]
    steps: int


def format_report(report: MemoryReport, *, color: bool = True) -> str:
    lines = [" Memory Breakdown", "------------------"]
    for pos, value in report.cells:
        lines.append(
            f"{paint(f'{pos:>7}', Colors.CYAN, enabled=color)} - "
            f"{paint(f'[{value}]', Colors.GREEN, enabled=color)}"
        )
    lines.append("")
    lines.append(f"    ptr => {paint(str(report.pointer), Colors.CYAN, enabled=color)}")
    return "\n".join(lines)
