"""
Command Dispatcher Module

Decides what a word sequence means: nothing, a pipeline, a builtin,
or an external program.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Sequence

from jshell.core.console import report_error
from jshell.exceptions import (
    CommandSyntaxError,
    MisplacedPipeError,
    MissingRightCommandError,
    TooManyPipesError,
)
from jshell.logger import get_logger
from jshell.process.launcher import ProcessLauncher
from jshell.process.pipeline import PipelineLauncher
from jshell.process.states import LoopSignal
from .builtins import BuiltinCommands
from .parser import PIPE, find_pipe_tokens, split_pipeline


class CommandDispatcher:
    """
    Routes one parsed line to the component that runs it.
    
    Order of checks:
    1. An empty line does nothing.
    2. A line containing a pipe word is validated and run as a
       two-stage pipeline. Syntax errors are reported, not raised.
    3. A first word naming a builtin runs that builtin.
    4. Anything else runs as an external program.
    
    Only the ``exit`` builtin ends the loop.
    """
    
    def __init__(
        self,
        builtins: Optional[BuiltinCommands] = None,
        launcher: Optional[ProcessLauncher] = None,
        pipeline_launcher: Optional[PipelineLauncher] = None
    ):
        self._logger = get_logger('dispatcher')
        self._builtins = builtins or BuiltinCommands()
        self._launcher = launcher or ProcessLauncher()
        self._pipeline_launcher = pipeline_launcher or PipelineLauncher()
    
    @property
    def builtins(self) -> BuiltinCommands:
        return self._builtins
    
    def dispatch(self, tokens: Sequence[str]) -> LoopSignal:
        """
        Run a parsed line.
        
        Args:
            tokens: Words of the line
        
        Returns:
            LoopSignal.EXIT if the shell should stop, else CONTINUE
        """
        if not tokens:
            return LoopSignal.CONTINUE
        
        if find_pipe_tokens(tokens):
            try:
                self._run_pipeline(tokens)
            except CommandSyntaxError as e:
                self._logger.info(f"Rejected line: {e.message}", context=e.context)
                report_error(e.message)
            return LoopSignal.CONTINUE
        
        if self._builtins.is_builtin(tokens[0]):
            return self._builtins.execute(tokens)
        
        self._launcher.run(tokens)
        return LoopSignal.CONTINUE
    
    def validate_pipe_placement(self, tokens: Sequence[str]) -> None:
        """
        Check that the line holds exactly one standalone, inner pipe word.
        
        Raises:
            MisplacedPipeError: Pipe first on the line, or glued to text
            TooManyPipesError: More than one pipe word
            MissingRightCommandError: Pipe last on the line
        """
        indices = find_pipe_tokens(tokens)
        if not indices:
            return
        
        for index in indices:
            if tokens[index] != PIPE or index == 0:
                raise MisplacedPipeError(index, list(tokens))
        
        if len(indices) > 1:
            raise TooManyPipesError(len(indices), list(tokens))
        
        if indices[0] == len(tokens) - 1:
            raise MissingRightCommandError(list(tokens))
    
    def _run_pipeline(self, tokens: Sequence[str]) -> None:
        self.validate_pipe_placement(tokens)
        pipeline = split_pipeline(tokens)
        self._pipeline_launcher.run_pipeline(pipeline.left, pipeline.right)
