import logging

from .api import RunOptions, load_source, run_file, run_string
from .errors import (
    ArgumentError,
    BFError,
    BFOverflowError,
    BFSyntaxError,
    FileLoadError,
    LoopStackError,
    OutOfBoundsError,
    SubZeroError,
)
from .interpreter import Interpreter
from .report import MemoryReport, RunResult, format_report
from .sanitizer import sanitize, strip_comments
from .state import CELL_MAX, TAPE_SIZE, MachineState

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Interpreter',
    'MachineState',
    'sanitize',
    'strip_comments',
    'RunOptions',
    'RunResult',
    'MemoryReport',
    'format_report',
    'run_string',
    'run_file',
    'load_source',
    'BFError',
    'BFSyntaxError',
    'OutOfBoundsError',
    'BFOverflowError',
    'SubZeroError',
    'LoopStackError',
    'FileLoadError',
    'ArgumentError',
    'TAPE_SIZE',
    'CELL_MAX',
]
