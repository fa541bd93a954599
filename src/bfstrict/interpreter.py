import logging
import sys

from .errors import BFSyntaxError, make_runtime_error
from .ops_control import ControlOpsMixin
from .ops_io import IOMixin
from .ops_memory import MemoryOpsMixin
from .report import NO_OUTPUT_NOTICE, MemoryReport, RunResult
from .state import MachineState

logger = logging.getLogger(__name__)


class Interpreter(MemoryOpsMixin, ControlOpsMixin, IOMixin):
    """
    Strict tape interpreter.

    Memory Model:
    - 30,000 byte cells, all starting at 0
    - Cells never wrap: leaving 0..255 is an error
    - The pointer never wraps: leaving 0..29999 is an error

    Control Flow:
    - The instruction stream is walked left to right
    - "[" pushes its own index, "]" jumps back to the top index while the
      current cell is non-zero and pops it otherwise
    - No bracket table or tree is built up front

    Args:
        stdin: text stream read one character per ",". Defaults to sys.stdin
            at read time.
        stdout: text stream each "." is written to. When None, output is
            collected into the result instead; with a stream, the result's
            output is empty.
    """

    _DISPATCH = {
        '>': '_move_right',
        '<': '_move_left',
        '+': '_increment',
        '-': '_decrement',
        '[': '_loop_enter',
        ']': '_loop_exit',
        '.': '_output',
        ',': '_input',
    }

    def __init__(self, stdin=None, stdout=None):
        self._stdin = stdin
        self.stdout = stdout
        self.state = MachineState()
        self.output = []
        self.code = ''

    @property
    def stdin(self):
        return sys.stdin if self._stdin is None else self._stdin

    def _fault(self, cls, message):
        return make_runtime_error(cls, message=message, code=self.code, position=self.state.pc)

    def run(self, code, *, show_memory=False):
        """
        Execute a sanitized instruction stream.

        Args:
            code: output of sanitize()
            show_memory: attach a MemoryReport to the result

        Returns:
            RunResult

        Raises:
            BFError: on the first fault; nothing after it runs
        """
        self.state.reset()
        self.output = []
        self.code = code

        handlers = {ch: getattr(self, name) for ch, name in self._DISPATCH.items()}
        st = self.state
        length = len(code)
        logger.debug("running %d instructions", length)

        while st.pc < length:
            handler = handlers.get(code[st.pc])
            if handler is None:
                raise self._fault(BFSyntaxError, f"unrecognised character '{code[st.pc]}' found in code.")
            handler()
            st.pc += 1
            st.steps += 1

        logger.debug("finished after %d steps, pointer=%d furthest=%d", st.steps, st.pointer, st.furthest_ptr)

        return RunResult(
            output=''.join(self.output),
            produced_output=st.has_output,
            notice=None if st.has_output else NO_OUTPUT_NOTICE,
            memory=MemoryReport.from_state(st) if show_memory else None,
            steps=st.steps,
        )
