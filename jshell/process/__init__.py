"""
jshell Process Management Module

Provides external command execution:
- Process handles and lifecycle states
- Single-command launcher
- Two-stage pipeline launcher
"""

from .states import LoopSignal, ExecutionResult, ProcessState
from .handle import ProcessHandle
from .launcher import ProcessLauncher, spawn, wait_for
from .pipeline import PipelineLauncher

__all__ = [
    # States
    'LoopSignal',
    'ExecutionResult',
    'ProcessState',
    # Handle
    'ProcessHandle',
    # Launchers
    'ProcessLauncher',
    'PipelineLauncher',
    'spawn',
    'wait_for',
]
