from __future__ import annotations

from .errors import LoopStackError


class ControlOpsMixin:
    # No jump on "[": the body always runs once and "]" decides whether to repeat.

    def _loop_enter(self):
        self.state.loop_stack.append(self.state.pc)

    def _loop_exit(self):
        st = self.state
        if not st.loop_stack:
            raise self._fault(
                LoopStackError,
                'the while loop start index stack was empty when "]" was reached.',
            )
        if st.cell > 0:
            # pc is advanced past the "[" after dispatch, so it is not pushed twice.
            st.pc = st.loop_stack[-1]
        else:
            st.loop_stack.pop()
