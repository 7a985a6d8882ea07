"""
Process Handle Module

A spawned child's pid and, once reaped, its raw wait status.

Author: YSNRFD
Version: 1.0.0
"""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from .states import ProcessState


@dataclass
class ProcessHandle:
    """
    A child process owned by the launcher that spawned it.
    
    Attributes:
        pid: OS process identifier
        argv: Argument vector the child was asked to execute
        status: Raw status from waitpid, None until reaped
        state: Where the child is in its lifecycle
    """
    pid: int
    argv: Tuple[str, ...]
    status: Optional[int] = None
    state: ProcessState = ProcessState.RUNNING
    
    @property
    def program(self) -> str:
        return self.argv[0] if self.argv else ''
    
    @property
    def reaped(self) -> bool:
        return self.state != ProcessState.RUNNING
    
    @property
    def exit_code(self) -> Optional[int]:
        """Exit code for a normally terminated child, else None."""
        if self.state == ProcessState.EXITED and self.status is not None:
            return os.WEXITSTATUS(self.status)
        return None
    
    @property
    def term_signal(self) -> Optional[int]:
        """Signal number that killed the child, else None."""
        if self.state == ProcessState.SIGNALED and self.status is not None:
            return os.WTERMSIG(self.status)
        return None
    
    def record_status(self, status: int) -> bool:
        """
        Record a waitpid status.
        
        Returns:
            True if the status is terminal (exit or signal). Stop and
            continue notifications leave the handle RUNNING.
        """
        if os.WIFEXITED(status):
            self.state = ProcessState.EXITED
        elif os.WIFSIGNALED(status):
            self.state = ProcessState.SIGNALED
        else:
            return False
        self.status = status
        return True
    
    def mark_lost(self) -> None:
        self.state = ProcessState.LOST
    
    def describe(self) -> str:
        """Short human-readable summary used in log records."""
        if self.state == ProcessState.EXITED:
            return f"{self.program} exited with status {self.exit_code}"
        if self.state == ProcessState.SIGNALED:
            return f"{self.program} killed by signal {self.term_signal}"
        if self.state == ProcessState.LOST:
            return f"{self.program} was reaped elsewhere"
        return f"{self.program} is running"
