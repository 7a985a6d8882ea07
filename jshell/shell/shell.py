"""
jshell Shell Module

The interactive read-parse-dispatch loop.

Author: YSNRFD
Version: 1.0.0
"""

import getpass
import os
import socket
from typing import Callable, Optional

from jshell.core.config_loader import get_config
from jshell.core.console import report_error
from jshell.exceptions import ParseError, ShellException
from jshell.logger import get_logger
from jshell.process.states import LoopSignal
from .dispatcher import CommandDispatcher
from .parser import tokenize


LineReader = Callable[[str], str]


class Shell:
    """
    jshell Interactive Shell.
    
    Reads a line, splits it into words and hands the words to the
    dispatcher, until ``exit`` is entered or input ends. Bad quoting is
    reported and the next line is read; the shell never stops because
    of a line it could not parse.
    
    Example:
        >>> shell = Shell()
        >>> shell.run()
    """
    
    def __init__(
        self,
        dispatcher: Optional[CommandDispatcher] = None,
        read_line: Optional[LineReader] = None
    ):
        self._logger = get_logger('shell')
        self._dispatcher = dispatcher or CommandDispatcher()
        self._read_line = read_line or input
        self._running = False
    
    @property
    def dispatcher(self) -> CommandDispatcher:
        return self._dispatcher
    
    @property
    def running(self) -> bool:
        return self._running
    
    def run(self) -> int:
        """
        Run the interactive shell.
        
        This is the main REPL loop.
        
        Returns:
            Process exit status
        """
        self._running = True
        
        try:
            while self._running:
                try:
                    line = self._read_line(self._get_prompt())
                except EOFError:
                    print()
                    break
                except KeyboardInterrupt:
                    print("^C")
                    continue
                
                try:
                    signal = self.execute_line(line)
                except KeyboardInterrupt:
                    print("^C")
                    continue
                except MemoryError:
                    report_error("out of memory")
                    return 1
                except ShellException as e:
                    report_error(e.message)
                    if not e.recoverable:
                        self._logger.exception(f"Fatal shell error: {e.message}", exc=e, context=e.context)
                        return 1
                    self._logger.warning(e.message, context=e.context)
                    continue
                except Exception as e:
                    self._logger.exception(f"Shell error: {e}", exc=e)
                    report_error(f"error: {e}")
                    continue
                
                if signal is LoopSignal.EXIT:
                    break
        finally:
            self._running = False
        
        return 0
    
    def execute_line(self, line: str) -> LoopSignal:
        """
        Parse and run one input line.
        
        Args:
            line: Raw input line
        
        Returns:
            LoopSignal from the dispatcher; CONTINUE if the line could
            not be parsed
        """
        try:
            tokens = tokenize(line)
        except ParseError as e:
            self._logger.info(f"Parse error: {e.message}", context=e.context)
            report_error(e.message)
            return LoopSignal.CONTINUE
        
        return self._dispatcher.dispatch(tokens)
    
    def _get_prompt(self) -> str:
        """Generate the shell prompt."""
        config = get_config()
        
        if not config.shell.show_context:
            return config.shell.prompt
        
        try:
            cwd = os.getcwd()
        except OSError as e:
            self._logger.warning(f"getcwd() error: {e.strerror}")
            cwd = '?'
        
        return f"\n~{_current_user()}@{socket.gethostname()}:{cwd} {config.shell.prompt}"


def _current_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return str(os.getuid())
