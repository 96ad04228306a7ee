"""
Use case for submitting a command line to a shell session.
"""

import logging
from typing import Optional

from portfolio_shell.entities.Command import CommandResult, EffectKind, EffectRequest
from portfolio_shell.entities.OutputLine import OutputLine
from portfolio_shell.entities.Session import ShellSession
from portfolio_shell.exceptions import NavigationError, WindowManagerError
from portfolio_shell.ports.desktop.window_manager_port import WindowManagerPort
from portfolio_shell.use_cases.sessions.navigate_to_path import NavigateToPathUseCase
from portfolio_shell.use_cases.shell.interpreter import CommandInterpreter


class SubmitCommandUseCase:
    """
    The shell's sole entry point: one call is one complete transaction.

    The interpreter computes the result; this use case writes the cursor,
    updates the session log and hands effect requests to the window manager.
    """

    def __init__(
        self,
        interpreter: CommandInterpreter,
        navigator: NavigateToPathUseCase,
        window_manager: WindowManagerPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            interpreter: Command interpreter
            navigator: Validated writer of session cursors
            window_manager: Receiver of fire-and-forget desktop requests
            logger: Logger instance to use for logging
        """
        self._interpreter = interpreter
        self._navigator = navigator
        self._window_manager = window_manager
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: ShellSession, raw: str) -> list[OutputLine]:
        """
        Run a command line in a session.

        Args:
            session: Session whose cursor and log are used
            raw: The command line as typed

        Returns:
            The lines appended to the session log by this command
        """
        with session.lock:
            self._logger.info(f"Session {session.id} at {session.cwd}: '{raw}'")
            result = self._interpreter.interpret(raw, session.cwd)

            if result.cursor is not None:
                try:
                    self._navigator.execute(session, result.cursor)
                except NavigationError as e:
                    # Handlers validate targets first, so this is a bug; fail the whole command.
                    self._logger.error(f"Cursor update rejected: {e}")
                    result = CommandResult(lines=(OutputLine.error(str(e)),))

            if result.clear_log:
                session.log.clear()

            appended: list[OutputLine] = []
            if not result.bypass_log:
                appended = [OutputLine.echo(raw), *result.lines]
                session.log.extend(appended)

            for effect in result.effects:
                self._deliver(session.id, effect)

            return appended

    def _deliver(self, session_id: str, effect: EffectRequest) -> None:
        try:
            if effect.kind is EffectKind.OPEN_FILE_MANAGER:
                self._window_manager.open_file_manager(session_id, effect.target or "/")
            elif effect.kind is EffectKind.OPEN_EXTERNAL_URL:
                self._window_manager.open_external_url(session_id, effect.target or "")
            elif effect.kind is EffectKind.OPEN_FILE_VIEWER:
                self._window_manager.open_file_viewer(session_id, effect.target or "/")
            elif effect.kind is EffectKind.START_MATRIX_EFFECT:
                self._window_manager.start_matrix_effect(session_id)
            elif effect.kind is EffectKind.CLOSE_TERMINAL:
                self._window_manager.close_terminal(session_id)
        except WindowManagerError as e:
            # Requests are fire-and-forget; the command already succeeded.
            self._logger.warning(f"Window manager request {effect.kind.value} failed: {e}")
