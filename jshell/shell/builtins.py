"""
Shell Built-in Commands

Implements the commands the shell runs itself instead of starting an
external program: cd, help and exit.

Author: YSNRFD
Version: 1.0.0
"""

import os
from types import MappingProxyType
from typing import Callable, List, Mapping, Sequence

from jshell.core.config_loader import get_config
from jshell.core.console import report_error
from jshell.logger import get_logger
from jshell.process.states import LoopSignal


BuiltinFunc = Callable[[Sequence[str]], LoopSignal]


class BuiltinCommands:
    """
    Registry of built-in commands.
    
    The name -> command mapping is built once when the registry is
    created and is read-only afterwards. Every command receives the
    full argument sequence (including its own name at position 0)
    and returns a LoopSignal.
    """
    
    def __init__(self):
        self._logger = get_logger('builtins')
        self._commands: Mapping[str, BuiltinFunc] = MappingProxyType({
            'cd': self.cmd_cd,
            'help': self.cmd_help,
            'exit': self.cmd_exit,
        })
    
    def get_commands(self) -> Mapping[str, BuiltinFunc]:
        """Get all built-in commands, in registration order."""
        return self._commands
    
    def is_builtin(self, name: str) -> bool:
        """Check if a command is built-in."""
        return name in self._commands
    
    def execute(self, args: Sequence[str]) -> LoopSignal:
        """
        Execute a built-in command.
        
        Args:
            args: Argument sequence; args[0] names the builtin
        
        Returns:
            The command's LoopSignal
        
        Raises:
            KeyError: If args[0] is not a builtin
        """
        command = self._commands[args[0]]
        self._logger.debug(f"Running builtin {args[0]}", context={'argc': len(args)})
        return command(args)
    
    # Command implementations
    
    def cmd_cd(self, args: Sequence[str]) -> LoopSignal:
        """Change the working directory."""
        if len(args) < 2:
            report_error('expected argument to "cd"')
            return LoopSignal.CONTINUE
        
        path = args[1]
        try:
            os.chdir(path)
        except OSError as e:
            self._logger.info("cd failed", context={'path': path, 'errno': e.errno})
            report_error(f"cd: {path}: {e.strerror}")
        
        return LoopSignal.CONTINUE
    
    def cmd_help(self, args: Sequence[str]) -> LoopSignal:
        """Display usage and the list of built-in commands."""
        name = get_config().shell.name
        lines: List[str] = [
            "",
            name,
            "",
            "--Simple piping can be done through '|' character.",
            "Usage: \"cmd1 arg0 arg1 ... | cmd2 arg0 arg1 ...\" "
            "(Support only for piping between 2 programs).",
            "",
            "--Double quotes can be used for arguments containing delimiters.",
            "A word that starts with '|' is read as a pipe even when quoted,\n"
            "so \"|x\" cannot be passed as an argument.",
            "",
            "The following commands are built in:",
        ]
        lines.extend(f"> {command}" for command in self._commands)
        lines.append("")
        
        print("\n".join(lines), flush=True)
        return LoopSignal.CONTINUE
    
    def cmd_exit(self, args: Sequence[str]) -> LoopSignal:
        """Exit the shell."""
        return LoopSignal.EXIT
