"""
Process Launcher Module

Creates external processes with fork/exec and reaps them with waitpid.

The primitives here are shared by the single-command launcher below
and by the pipeline launcher:

    spawn()     fork a child, optionally rewire its stdin/stdout, exec
    wait_for()  block until a child exits or is killed by a signal

Author: YSNRFD
Version: 1.0.0
"""

import os
import signal
import sys
from typing import Iterable, List, Optional, Sequence

from jshell.core.config_loader import get_config
from jshell.core.console import report_error
from jshell.exceptions import SpawnError
from jshell.logger import get_logger
from .handle import ProcessHandle
from .states import ExecutionResult


STDIN_FILENO = 0
STDOUT_FILENO = 1
STDERR_FILENO = 2


def _flush_standard_streams() -> None:
    # Buffered output would otherwise be written twice, once by each process.
    for stream in (sys.stdout, sys.stderr):
        if stream is not None and not stream.closed:
            stream.flush()


def _exec_child(
    argv: List[str],
    stdin_fd: Optional[int],
    stdout_fd: Optional[int],
    close_fds: Iterable[int],
    failure_status: int
) -> None:
    """
    Runs in the forked child. Never returns.
    
    The standard streams are rewired first, the listed descriptors are
    closed, then the program is looked up on PATH and executed. If that
    fails the reason goes to standard error and the child exits with
    ``failure_status``.
    """
    try:
        # The interpreter ignores SIGPIPE; programs expect the default action.
        signal.signal(signal.SIGPIPE, signal.SIG_DFL)
        if stdout_fd is not None:
            os.dup2(stdout_fd, STDOUT_FILENO)
        if stdin_fd is not None:
            os.dup2(stdin_fd, STDIN_FILENO)
        for fd in close_fds:
            if fd > STDERR_FILENO:
                os.close(fd)
        os.execvp(argv[0], argv)
    except (OSError, ValueError) as e:
        reason = getattr(e, 'strerror', None) or str(e)
        name = get_config().shell.name
        os.write(STDERR_FILENO, f"{name}: {argv[0]}: {reason}\n".encode(errors='replace'))
    finally:
        try:
            os._exit(failure_status if isinstance(failure_status, int) else 1)
        finally:
            os._exit(1)


def spawn(
    args: Sequence[str],
    stdin_fd: Optional[int] = None,
    stdout_fd: Optional[int] = None,
    close_fds: Iterable[int] = ()
) -> ProcessHandle:
    """
    Start ``args[0]`` as a child process with ``args`` as its argv.
    
    Args:
        args: Argument sequence; position 0 is the program
        stdin_fd: Descriptor to install as the child's standard input
        stdout_fd: Descriptor to install as the child's standard output
        close_fds: Descriptors the child closes after rewiring
    
    Returns:
        Handle for the running child. The caller must wait_for() it.
    
    Raises:
        SpawnError: If fork() fails
    """
    if not args:
        raise ValueError("Cannot spawn an empty argument sequence")
    
    argv = list(args)
    close_fds = tuple(close_fds)
    failure_status = get_config().shell.exec_failure_status
    
    _flush_standard_streams()
    
    try:
        pid = os.fork()
    except OSError as e:
        raise SpawnError(argv[0], errno=e.errno, strerror=e.strerror) from e
    
    if pid == 0:
        _exec_child(argv, stdin_fd, stdout_fd, close_fds, failure_status)
    
    get_logger('launcher').debug(
        f"Spawned {argv[0]}",
        pid=pid,
        context={'argv': ' '.join(argv)}
    )
    return ProcessHandle(pid=pid, argv=tuple(argv))


def wait_for(handle: ProcessHandle) -> ProcessHandle:
    """
    Block until the child exits or is killed by a signal.
    
    Stop notifications are ignored and the wait is repeated, so a
    stopped child keeps the caller waiting until it is continued and
    terminates.
    """
    logger = get_logger('launcher')
    
    while not handle.reaped:
        try:
            _, status = os.waitpid(handle.pid, os.WUNTRACED)
        except ChildProcessError:
            handle.mark_lost()
            logger.warning("Child vanished before it could be reaped", pid=handle.pid)
            break
        except KeyboardInterrupt:
            # The child is in our process group and got the same SIGINT.
            continue
        handle.record_status(status)
    
    logger.debug(handle.describe(), pid=handle.pid)
    return handle


class ProcessLauncher:
    """
    Runs one external command in the foreground.
    
    The child inherits the shell's standard streams unchanged. Whatever
    the program does (including failing to start) is visible only through
    its own output; run() reports SUCCESS once the child has been reaped.
    
    Example:
        >>> launcher = ProcessLauncher()
        >>> launcher.run(['ls', '-l'])
        <ExecutionResult.SUCCESS: 1>
    """
    
    def __init__(self):
        self._logger = get_logger('launcher')
        self._last_handle: Optional[ProcessHandle] = None
    
    @property
    def last_handle(self) -> Optional[ProcessHandle]:
        """Handle of the most recently reaped child."""
        return self._last_handle
    
    def run(self, args: Sequence[str]) -> ExecutionResult:
        """
        Execute a single external command and wait for it.
        
        Args:
            args: Argument sequence; position 0 is the program
        
        Returns:
            SUCCESS once the child is reaped, FAILURE if it could not be
            created
        """
        try:
            handle = spawn(args)
        except SpawnError as e:
            self._logger.error(e.message, context=e.context)
            report_error(e.message)
            return ExecutionResult.FAILURE
        
        self._last_handle = wait_for(handle)
        return ExecutionResult.SUCCESS
