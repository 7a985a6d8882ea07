"""
Process States Module

Status values passed between the launchers, the dispatcher and the
REPL loop.

Author: YSNRFD
Version: 1.0.0
"""

from enum import Enum, auto


class LoopSignal(Enum):
    """
    Tells the REPL loop what to do after a line has been handled.
    
    Builtins return one of these directly; only ``exit`` yields EXIT.
    """
    
    CONTINUE = auto()
    """Read the next line."""
    
    EXIT = auto()
    """Leave the loop."""


class ExecutionResult(Enum):
    """
    Outcome of a launcher call.
    
    SUCCESS means every spawned child has been reaped; it says nothing
    about the children's exit codes. FAILURE means the command was
    abandoned before (or while) starting its processes.
    """
    
    SUCCESS = auto()
    FAILURE = auto()


class ProcessState(Enum):
    """
    Lifecycle of a spawned child as seen by its launcher.
    
    State transitions:
        RUNNING -> EXITED: waitpid reported a normal exit
        RUNNING -> SIGNALED: waitpid reported termination by a signal
        RUNNING -> LOST: the child was reaped by someone else
    """
    
    RUNNING = auto()
    """Spawned and not yet reaped."""
    
    EXITED = auto()
    """Terminated normally; exit code available."""
    
    SIGNALED = auto()
    """Terminated by a signal."""
    
    LOST = auto()
    """No status could be collected (ECHILD)."""
