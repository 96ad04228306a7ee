"""
Shell session entities: the append-only output log and the per-session cursor.
"""

import threading
from typing import Iterable, Iterator, Optional

from portfolio_shell.entities.OutputLine import OutputLine

ROOT = "/"


class SessionLog:
    """
    Append-only, ordered sequence of OutputLine.

    The only bulk operation is full truncation, used by ``clear``.
    """

    def __init__(self, lines: Optional[Iterable[OutputLine]] = None):
        self._lines: list[OutputLine] = list(lines or [])

    def append(self, line: OutputLine) -> None:
        self._lines.append(line)

    def extend(self, lines: Iterable[OutputLine]) -> None:
        self._lines.extend(lines)

    def clear(self) -> None:
        self._lines.clear()

    def snapshot(self) -> tuple[OutputLine, ...]:
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[OutputLine]:
        return iter(self.snapshot())


class ShellSession:
    """
    State owned by one terminal session.

    The cursor is the only mutable navigation state. Callers are expected to
    validate the target before calling ``move_to``; see NavigateToPathUseCase.
    """

    def __init__(
        self,
        session_id: str,
        cwd: str = ROOT,
        log: Optional[SessionLog] = None,
    ):
        self.id = session_id
        self._cwd = cwd
        self.log = log if log is not None else SessionLog()
        # Commands of one session are processed one at a time.
        self.lock = threading.Lock()

    @property
    def cwd(self) -> str:
        return self._cwd

    def move_to(self, path: str) -> None:
        self._cwd = path

    def __repr__(self) -> str:
        return f"ShellSession(id='{self.id}', cwd='{self._cwd}')"
