"""
Process Exceptions

Exceptions related to creating external processes.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any

from .shell_exceptions import ShellException


class ProcessException(ShellException):
    """
    Base exception for all process-related errors.
    
    Attributes:
        message: Human-readable error description
        pid: Process ID associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
    """
    
    def __init__(
        self,
        message: str,
        pid: Optional[int] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        if pid is not None:
            ctx["pid"] = pid
        super().__init__(message, error_code=error_code or 2000, context=ctx)
        self.pid = pid
    
    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.pid is not None:
            base = f"{base} (pid={self.pid})"
        return base


class SpawnError(ProcessException):
    """
    The operating system refused to create a new process.
    
    Raised when fork() fails, typically because of a process limit or
    memory pressure. The command is abandoned; the shell keeps running.
    
    Example:
        >>> raise SpawnError("ls", errno=11, strerror="Resource temporarily unavailable")
    """
    
    def __init__(
        self,
        program: str,
        errno: Optional[int] = None,
        strerror: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        ctx["program"] = program
        if errno is not None:
            ctx["errno"] = errno
        super().__init__(
            message=f"Fork failed for '{program}': {strerror or 'unknown error'}.",
            error_code=2001,
            context=ctx
        )
        self.program = program
        self.errno = errno
        self.strerror = strerror
