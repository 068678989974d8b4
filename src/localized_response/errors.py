from __future__ import annotations


class ResponseConfigError(RuntimeError):
    """Base error type for localized-response failures."""


class ConfigLoadError(ResponseConfigError):
    """Raised when a configuration document cannot be fetched or parsed."""


class AlreadyRunningError(ResponseConfigError):
    """Raised when starting a manager that is already running."""


class ConfigNotLoadedError(ResponseConfigError):
    """Raised when an operation needs a snapshot and none is installed yet."""


class ResponseBuildError(ResponseConfigError):
    pass
