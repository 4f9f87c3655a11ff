"""Error taxonomy for devjournal commands."""


class JournalError(Exception):
    """Base class for failures reported to the user."""

    exit_code = 1


class ConfigurationError(JournalError):
    """Invalid caller-supplied value, such as an unknown category."""

    exit_code = 2


class StateError(JournalError):
    """The command needs an active session and there is none today."""

    exit_code = 3


class StorageError(JournalError):
    """Directory or file creation, or an append, failed."""

    exit_code = 4
