"""
Shell Exceptions

Base exception for every error raised inside jshell, plus configuration
errors raised while the shell starts up.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class ShellException(Exception):
    """
    Base exception for all jshell errors.
    
    Every subsystem (parser, dispatcher, launchers, configuration) derives
    its own errors from this class so the REPL loop can catch them at a
    single boundary.
    
    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
        recoverable: Whether the loop may continue after this error
        context: Additional context about the error
    
    Example:
        >>> raise ShellException("Something went wrong", error_code=1000)
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        recoverable: bool = True,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 1000
        self.recoverable = recoverable
        self.context = dict(context or {})
    
    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({context_str})"
        return base
    
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code}, "
            f"recoverable={self.recoverable})"
        )


class ConfigError(ShellException):
    """
    Invalid or unreadable configuration.
    
    Raised by the configuration loader when the file is missing,
    is not valid JSON, or holds a value of the wrong type, and when a
    runtime update names an unknown key or has the wrong type.
    
    Example:
        >>> raise ConfigError("Configuration file not found: jshell.json")
    """
    
    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        if key is not None:
            ctx["key"] = key
        super().__init__(
            message=message,
            error_code=1001,
            recoverable=False,
            context=ctx
        )
        self.key = key
