"""Error hierarchy for the pgconf loader."""

from __future__ import annotations

from typing import Any

__all__ = [
    "ConfigFileError",
    "ConfigNotFoundError",
    "ConfigError",
    "BlankLocationError",
    "IncludeDepthExceededError",
    "IncludeRecursionError",
    "ConfigFileOpenError",
    "ConfigSyntaxError",
    "TooManySyntaxErrorsError",
    "DirectoryOpenError",
    "DirectoryStatError",
    "ScannerFaultError",
    "InvalidConfigItemError",
    "ErrorCodes",
]


class ConfigFileError(Exception):
    """Base error for all pgconf errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(ConfigFileError):
    """Raised when a loader settings file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(ConfigFileError):
    """Raised when loader settings are invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class BlankLocationError(ConfigFileError):
    """Raised for an empty or whitespace-only file or directory name."""

    def __init__(self, location: str, kind: str = "file", **kwargs: Any) -> None:
        super().__init__(
            code="BLANK_LOCATION",
            message=f'empty configuration {kind} name: "{location}"',
            details={"location": location, "kind": kind},
            **kwargs,
        )


class IncludeDepthExceededError(ConfigFileError):
    """Raised when include nesting goes past the depth cap."""

    def __init__(self, location: str, depth: int, max_depth: int, **kwargs: Any) -> None:
        super().__init__(
            code="INCLUDE_DEPTH_EXCEEDED",
            message=f'could not open configuration file "{location}": maximum nesting depth exceeded',
            details={"location": location, "depth": depth, "max_depth": max_depth},
            **kwargs,
        )

    @property
    def depth(self) -> int:
        """The depth at which the include was attempted."""
        return self.details["depth"]

    @property
    def max_depth(self) -> int:
        """The configured maximum nesting depth."""
        return self.details["max_depth"]


class IncludeRecursionError(ConfigFileError):
    """Raised when a file includes itself directly."""

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(
            code="INCLUDE_RECURSION",
            message=f'configuration file recursion in "{path}"',
            details={"path": path},
            **kwargs,
        )


class ConfigFileOpenError(ConfigFileError):
    """Raised when a configuration file cannot be opened."""

    def __init__(self, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="FILE_OPEN_FAILED",
            message=f'could not open configuration file "{path}": {reason}',
            details={"path": path, "reason": reason},
            **kwargs,
        )


class ConfigSyntaxError(ConfigFileError):
    """Raised for a malformed line; the driver resyncs and continues."""

    def __init__(self, path: str, line: int, near: str | None, **kwargs: Any) -> None:
        if near is None:
            message = f'syntax error in file "{path}" line {line}, near end of line'
        else:
            message = f'syntax error in file "{path}" line {line}, near token "{near}"'
        super().__init__(
            code="SYNTAX_ERROR",
            message=message,
            details={"path": path, "line": line, "near": near},
            **kwargs,
        )

    @property
    def line(self) -> int:
        """The line number the error was reported on."""
        return self.details["line"]


class TooManySyntaxErrorsError(ConfigFileError):
    """Raised when a file reaches the syntax error cap."""

    def __init__(self, path: str, count: int, **kwargs: Any) -> None:
        super().__init__(
            code="TOO_MANY_SYNTAX_ERRORS",
            message=f'too many syntax errors found, abandoning file "{path}"',
            details={"path": path, "count": count},
            **kwargs,
        )


class DirectoryOpenError(ConfigFileError):
    """Raised when an include directory cannot be listed."""

    def __init__(self, directory: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="DIRECTORY_OPEN_FAILED",
            message=f'could not open configuration directory "{directory}": {reason}',
            details={"directory": directory, "reason": reason},
            **kwargs,
        )


class DirectoryStatError(ConfigFileError):
    """Raised when a directory entry cannot be inspected; aborts the scan."""

    def __init__(self, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="DIRECTORY_STAT_FAILED",
            message=f'could not stat file "{path}": {reason}',
            details={"path": path, "reason": reason},
            **kwargs,
        )


class ScannerFaultError(ConfigFileError):
    """Raised by the tokenizer when it cannot continue with the current file.

    The per-file frame catches it, so only that file is abandoned.
    """

    def __init__(self, reason: str, path: str | None = None, line: int | None = None, **kwargs: Any) -> None:
        if path is None:
            message = reason
        else:
            message = f'{reason} at file "{path}" line {line}'
        super().__init__(
            code="SCANNER_FAULT",
            message=message,
            details={"reason": reason, "path": path, "line": line},
            **kwargs,
        )

    @property
    def reason(self) -> str:
        """The fault description without location."""
        return self.details["reason"]

    def at(self, path: str, line: int) -> ScannerFaultError:
        """Return a copy of this fault tagged with a file and line."""
        return ScannerFaultError(self.reason, path=path, line=line, cause=self.cause)


class InvalidConfigItemError(ConfigFileError):
    """Raised by an item handler that rejects a parsed name/value pair."""

    def __init__(self, name: str, value: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_CONFIG_ITEM",
            message=f'invalid value for parameter "{name}": "{value}": {reason}',
            details={"name": name, "value": value, "reason": reason},
            **kwargs,
        )


class ErrorCodes:
    """All pgconf error codes as constants.

    Example:
        if error.code == ErrorCodes.INCLUDE_DEPTH_EXCEEDED:
            handle_depth()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    BLANK_LOCATION = "BLANK_LOCATION"
    INCLUDE_DEPTH_EXCEEDED = "INCLUDE_DEPTH_EXCEEDED"
    INCLUDE_RECURSION = "INCLUDE_RECURSION"
    FILE_OPEN_FAILED = "FILE_OPEN_FAILED"
    SYNTAX_ERROR = "SYNTAX_ERROR"
    TOO_MANY_SYNTAX_ERRORS = "TOO_MANY_SYNTAX_ERRORS"
    DIRECTORY_OPEN_FAILED = "DIRECTORY_OPEN_FAILED"
    DIRECTORY_STAT_FAILED = "DIRECTORY_STAT_FAILED"
    SCANNER_FAULT = "SCANNER_FAULT"
    INVALID_CONFIG_ITEM = "INVALID_CONFIG_ITEM"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
