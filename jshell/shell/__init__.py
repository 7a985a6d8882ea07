"""
jshell Shell Module

Provides the interactive command-line shell:
- Tokenizer and pipeline splitter
- Built-in commands
- Command dispatcher
- REPL loop
"""

from .parser import (
    DELIMITERS,
    PIPE,
    QUOTE,
    Pipeline,
    tokenize,
    split_pipeline,
    find_pipe_tokens,
)
from .builtins import BuiltinCommands
from .dispatcher import CommandDispatcher
from .shell import Shell

__all__ = [
    'DELIMITERS',
    'PIPE',
    'QUOTE',
    'Pipeline',
    'tokenize',
    'split_pipeline',
    'find_pipe_tokens',
    'BuiltinCommands',
    'CommandDispatcher',
    'Shell',
]
