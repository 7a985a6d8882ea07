"""
IPC Exceptions

Exceptions related to the byte channel connecting two pipeline stages.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any

from .shell_exceptions import ShellException


class IPCException(ShellException):
    """
    Base exception for all IPC-related errors.
    
    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code=error_code or 6000, context=context)
    
    def __str__(self) -> str:
        return f"[Error {self.error_code}] {self.message}"


class ChannelError(IPCException):
    """
    The pipe backing a channel could not be created or is already closed.
    
    Example:
        >>> raise ChannelError("Pipe could not be initialized.", errno=24)
    """
    
    def __init__(
        self,
        message: str,
        errno: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        if errno is not None:
            ctx["errno"] = errno
        super().__init__(
            message=message,
            error_code=6001,
            context=ctx
        )
        self.errno = errno
