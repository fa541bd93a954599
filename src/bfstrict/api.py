from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

from .errors import FileLoadError
from .interpreter import Interpreter
from .report import RunResult
from .sanitizer import sanitize

SOURCE_SUFFIX = ".bf"


@dataclass(frozen=True)
class RunOptions:
    show_memory: bool = False


def run_string(
    source: str,
    *,
    options: Optional[RunOptions] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> RunResult:
    show_memory = False if options is None else options.show_memory
    code = sanitize(source)
    return Interpreter(stdin=stdin, stdout=stdout).run(code, show_memory=show_memory)


def load_source(path: str | Path, *, encoding: str = "utf-8") -> str:
    p = Path(path)
    if p.suffix != SOURCE_SUFFIX:
        raise FileLoadError(message=f"cannot run code from a file that does not have the extension {SOURCE_SUFFIX}")
    if not p.is_file():
        raise FileLoadError(message=f"file path does not exist: {p}")
    try:
        source = p.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise FileLoadError(message=f"file is not valid {encoding} text: {e.reason} at byte {e.start}.") from e
    except OSError as e:
        raise FileLoadError(message=f"cannot read file: {e.strerror or e}") from e
    if not source:
        raise FileLoadError(message="file does not contain any code to execute.")
    return source


def run_file(
    path: str | Path,
    *,
    options: Optional[RunOptions] = None,
    encoding: str = "utf-8",
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> RunResult:
    return run_string(load_source(path, encoding=encoding), options=options, stdin=stdin, stdout=stdout)
