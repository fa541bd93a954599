from __future__ import annotations

from .errors import BFOverflowError
from .state import CELL_MAX


class IOMixin:
    def _output(self):
        st = self.state
        # Every value 0..255 is a valid code point (U+0000..U+00FF).
        ch = chr(st.cell)
        if self.stdout is None:
            self.output.append(ch)
        else:
            self.stdout.write(ch)
            self.stdout.flush()
        st.has_output = True

    def _input(self):
        st = self.state
        ch = self.stdin.read(1)
        if not ch:
            # EOF
            st.memory[st.pointer] = 0
            return
        code = ord(ch)
        if code > CELL_MAX:
            raise self._fault(BFOverflowError, f"inputted character exceeds value of {CELL_MAX}.")
        st.memory[st.pointer] = code
