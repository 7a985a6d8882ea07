"""
jshell - A small interactive command interpreter

Reads a line, splits it into words honoring double quotes, and runs it
as a builtin, a single external program, or a two-stage pipeline.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

from .shell.shell import Shell
from .shell.dispatcher import CommandDispatcher
from .shell.parser import tokenize, split_pipeline
from .process.states import LoopSignal, ExecutionResult

__all__ = [
    'Shell',
    'CommandDispatcher',
    'tokenize',
    'split_pipeline',
    'LoopSignal',
    'ExecutionResult',
]
