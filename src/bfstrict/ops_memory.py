from __future__ import annotations

from .errors import BFOverflowError, OutOfBoundsError, SubZeroError
from .state import CELL_MAX, TAPE_SIZE


class MemoryOpsMixin:
    def _move_right(self):
        st = self.state
        if st.pointer == TAPE_SIZE - 1:
            raise self._fault(OutOfBoundsError, "cannot move pointer outside of rightward bounds.")
        st.pointer += 1
        if st.pointer > st.furthest_ptr:
            st.furthest_ptr = st.pointer

    def _move_left(self):
        st = self.state
        if st.pointer == 0:
            raise self._fault(OutOfBoundsError, "cannot move pointer outside of leftward bounds.")
        st.pointer -= 1

    def _increment(self):
        st = self.state
        value = st.cell
        if value == CELL_MAX:
            raise self._fault(BFOverflowError, f"cannot increment memory block past integer limit of {CELL_MAX}.")
        st.memory[st.pointer] = value + 1

    def _decrement(self):
        st = self.state
        value = st.cell
        if value == 0:
            raise self._fault(SubZeroError, "cannot decrement memory block below 0.")
        st.memory[st.pointer] = value - 1
