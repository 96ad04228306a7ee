"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class ContentError(BaseAppError):
    """Exception raised when the static content tree cannot be loaded."""

    pass


class FileTreeError(BaseAppError):
    """Exception raised for virtual file tree errors."""

    pass


class NavigationError(BaseAppError):
    """Exception raised when a cursor write targets something other than a folder."""

    pass


class SessionNotFoundError(BaseAppError):
    """Exception raised when a shell session id is unknown."""

    pass


class WindowManagerError(BaseAppError):
    """Exception raised when a window manager request cannot be delivered."""

    pass


class ShellCommandError(BaseAppError):
    """
    Base class for errors reported by a shell command.

    These never escape the interpreter: the message is rendered verbatim as a
    single error line in the session log.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ShellCommandError):
    """The resolved path has no matching node."""

    pass


class WrongTypeError(ShellCommandError):
    """The node exists but is the wrong kind for the operation."""

    pass


class MissingArgumentError(ShellCommandError):
    """A required argument token is absent."""

    pass


class UnrecognizedCommandError(ShellCommandError):
    """The command name is not in the dispatch table."""

    pass
