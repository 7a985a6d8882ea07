"""
Pipeline Launcher Module

Runs two external commands connected by a channel: the left command's
standard output feeds the right command's standard input.

Author: YSNRFD
Version: 1.0.0
"""

from typing import List, Optional, Sequence, Tuple

from jshell.core.console import report_error
from jshell.exceptions import ChannelError, SpawnError
from jshell.ipc.pipe import Channel
from jshell.logger import get_logger
from .handle import ProcessHandle
from .launcher import spawn, wait_for
from .states import ExecutionResult


class PipelineLauncher:
    """
    Runs ``left | right``.
    
    Descriptor ownership:
    - the left child dups the write end onto stdout, then closes both
      inherited ends
    - the right child dups the read end onto stdin, then closes both
      inherited ends
    - the shell closes its own copies as soon as both children exist
    
    With no end left open in the shell, the right command sees end of
    input when the left one finishes, and the two children can be
    reaped in any order.
    
    Example:
        >>> PipelineLauncher().run_pipeline(['echo', 'hi'], ['wc', '-w'])
        <ExecutionResult.SUCCESS: 1>
    """
    
    def __init__(self):
        self._logger = get_logger('pipeline')
        self._last_handles: Tuple[ProcessHandle, ...] = ()
    
    @property
    def last_handles(self) -> Tuple[ProcessHandle, ...]:
        """Handles of the children reaped by the most recent call."""
        return self._last_handles
    
    def run_pipeline(
        self,
        left: Sequence[str],
        right: Sequence[str]
    ) -> ExecutionResult:
        """
        Execute a two-stage pipeline and wait for both stages.
        
        Args:
            left: Argument sequence of the producing command
            right: Argument sequence of the consuming command
        
        Returns:
            SUCCESS once both children are reaped. FAILURE if the channel
            or either child could not be created; any child that was
            already started is still reaped before returning.
        """
        try:
            channel = Channel.open()
        except ChannelError as e:
            self._logger.error(e.message, context=e.context)
            report_error(e.message)
            return ExecutionResult.FAILURE
        
        handles: List[ProcessHandle] = []
        failure: Optional[SpawnError] = None
        
        try:
            with channel:
                ends = (channel.read_fd, channel.write_fd)
                try:
                    handles.append(spawn(left, stdout_fd=channel.write_fd, close_fds=ends))
                    handles.append(spawn(right, stdin_fd=channel.read_fd, close_fds=ends))
                except SpawnError as e:
                    failure = e
            
            if failure is not None:
                self._logger.error(
                    failure.message,
                    context={**failure.context, 'started': len(handles)}
                )
                report_error(failure.message)
        finally:
            for handle in handles:
                wait_for(handle)
            self._last_handles = tuple(handles)
        
        if failure is not None:
            return ExecutionResult.FAILURE
        return ExecutionResult.SUCCESS
