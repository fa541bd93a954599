from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import numpy as np

TAPE_SIZE = 30000
CELL_MAX = 255


def _new_tape() -> np.ndarray:
    return np.zeros(TAPE_SIZE, dtype=np.uint8)


@dataclass
class MachineState:
    memory: np.ndarray = field(default_factory=_new_tape)
    pointer: int = 0
    furthest_ptr: int = 0
    pc: int = 0
    loop_stack: List[int] = field(default_factory=list)
    has_output: bool = False
    steps: int = 0

    def reset(self) -> None:
        self.memory = _new_tape()
        self.pointer = 0
        self.furthest_ptr = 0
        self.pc = 0
        self.loop_stack.clear()
        self.has_output = False
        self.steps = 0

    @property
    def cell(self) -> int:
        return int(self.memory[self.pointer])
