"""
jshell Exception Hierarchy

All custom exceptions inherit from ShellException, with specific
sub-categories for each part of the shell.

Architecture:
    ShellException (Base)
    ├── ConfigError
    ├── ParseError
    │   ├── UnterminatedQuoteError
    │   └── ExpectedDelimiterAfterQuoteError
    ├── CommandSyntaxError
    │   ├── EmptySideError
    │   ├── MisplacedPipeError
    │   ├── MissingRightCommandError
    │   └── TooManyPipesError
    ├── ProcessException
    │   └── SpawnError
    └── IPCException
        └── ChannelError
"""

from .shell_exceptions import (
    ShellException,
    ConfigError,
)

from .parse_exceptions import (
    ParseError,
    UnterminatedQuoteError,
    ExpectedDelimiterAfterQuoteError,
    CommandSyntaxError,
    EmptySideError,
    MisplacedPipeError,
    MissingRightCommandError,
    TooManyPipesError,
)

from .process_exceptions import (
    ProcessException,
    SpawnError,
)

from .ipc_exceptions import (
    IPCException,
    ChannelError,
)

__all__ = [
    # Base
    "ShellException",
    "ConfigError",
    # Parse exceptions
    "ParseError",
    "UnterminatedQuoteError",
    "ExpectedDelimiterAfterQuoteError",
    "CommandSyntaxError",
    "EmptySideError",
    "MisplacedPipeError",
    "MissingRightCommandError",
    "TooManyPipesError",
    # Process exceptions
    "ProcessException",
    "SpawnError",
    # IPC exceptions
    "IPCException",
    "ChannelError",
]
