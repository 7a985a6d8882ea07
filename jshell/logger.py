"""
jshell Logger Module

Diagnostic logging for the shell:
- Subsystem-specific loggers (parser, dispatcher, launcher, ...)
- Structured context data attached to each record
- Optional file output

Diagnostics go to standard error or a file, never to standard output,
which belongs to the commands the shell runs.

Author: YSNRFD
Version: 1.0.0
"""

import logging
import sys
import threading
from enum import IntEnum
from pathlib import Path
from typing import Optional, Any


# Silent until Logger.initialize() installs real handlers.
logging.getLogger('jshell').addHandler(logging.NullHandler())


class LogLevel(IntEnum):
    """Log level enumeration with numeric values for comparison."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    
    @classmethod
    def from_name(cls, name: str) -> 'LogLevel':
        """Resolve a level name such as 'warning' to a LogLevel."""
        if not isinstance(name, str):
            raise ValueError(f"Log level must be a name, got {name!r}")
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {name}") from None


class LogFormatter(logging.Formatter):
    """
    Renders a shell record as one line:
        [2024-01-01 12:00:00.000] ERROR    [launcher] (pid=42) message {k=v}
    
    Colors are only used when the target stream is a terminal.
    """
    
    LEVEL_COLORS = {
        logging.DEBUG: 36,
        logging.INFO: 32,
        logging.WARNING: 33,
        logging.ERROR: 31,
    }
    
    def __init__(self, use_colors: bool = True, stream=None):
        super().__init__(datefmt='%Y-%m-%d %H:%M:%S')
        isatty = getattr(stream or sys.stderr, 'isatty', None)
        self.use_colors = bool(use_colors and isatty and isatty())
    
    def format(self, record: logging.LogRecord) -> str:
        level = f"{record.levelname:8s}"
        color = self.LEVEL_COLORS.get(record.levelno)
        if self.use_colors and color:
            level = f"\033[{color}m{level}\033[0m"
        
        parts = [f"[{self.formatTime(record)}.{int(record.msecs):03d}]", level]
        subsystem = getattr(record, 'subsystem', None)
        if subsystem:
            parts.append(f"[{subsystem}]")
        pid = getattr(record, 'pid', None)
        if pid is not None:
            parts.append(f"(pid={pid})")
        parts.append(record.getMessage())
        context = getattr(record, 'context', None)
        if context:
            parts.append("{" + " ".join(f"{k}={v}" for k, v in context.items()) + "}")
        
        line = " ".join(parts)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class Logger:
    """
    Main logging class for jshell.
    
    One instance exists per subsystem name; asking for the same name
    twice returns the same object. Every record carries the subsystem,
    an optional child pid and a context dict for the formatter.
    
    Example:
        >>> log = Logger('launcher')
        >>> log.debug("Spawned child", pid=4242, context={'argv': 'ls -l'})
    """
    
    _instances: dict[str, 'Logger'] = {}
    _lock = threading.Lock()
    _initialized = False
    
    def __new__(cls, subsystem: str = 'shell') -> 'Logger':
        with cls._lock:
            instance = cls._instances.get(subsystem)
            if instance is None:
                instance = super().__new__(cls)
                instance._subsystem = subsystem
                instance._logger = logging.getLogger(f'jshell.{subsystem}')
                cls._instances[subsystem] = instance
            return instance
    
    @classmethod
    def initialize(
        cls,
        level: int = LogLevel.WARNING,
        log_file: Optional[str] = None,
        console_output: bool = False,
        use_colors: bool = True
    ) -> None:
        """
        Install handlers on the 'jshell' logger.
        
        Only the first call has an effect. Console records go to standard
        error; standard output is left to the commands the shell runs.
        
        Args:
            level: Minimum level for every handler
            log_file: Append records to this file, creating its directory
            console_output: Echo records to standard error
            use_colors: Color the level name when standard error is a terminal
        """
        with cls._lock:
            if cls._initialized:
                return
            
            handlers = []
            if console_output:
                handlers.append((
                    logging.StreamHandler(sys.stderr),
                    LogFormatter(use_colors=use_colors, stream=sys.stderr)
                ))
            if log_file:
                Path(log_file).parent.mkdir(parents=True, exist_ok=True)
                handlers.append((
                    logging.FileHandler(log_file),
                    LogFormatter(use_colors=False)
                ))
            
            root_logger = logging.getLogger('jshell')
            root_logger.setLevel(level)
            root_logger.propagate = False
            for handler, formatter in handlers:
                handler.setLevel(level)
                handler.setFormatter(formatter)
                root_logger.addHandler(handler)
            
            cls._initialized = True
    
    def _log(
        self,
        level: int,
        message: str,
        pid: Optional[int] = None,
        context: Optional[dict[str, Any]] = None,
        exc_info: Any = None
    ) -> None:
        self._logger.log(
            level,
            message,
            exc_info=exc_info,
            extra={'subsystem': self._subsystem, 'pid': pid, 'context': context or {}}
        )
    
    def debug(self, message: str, pid: Optional[int] = None,
              context: Optional[dict[str, Any]] = None) -> None:
        self._log(LogLevel.DEBUG, message, pid, context)
    
    def info(self, message: str, pid: Optional[int] = None,
             context: Optional[dict[str, Any]] = None) -> None:
        self._log(LogLevel.INFO, message, pid, context)
    
    def warning(self, message: str, pid: Optional[int] = None,
                context: Optional[dict[str, Any]] = None) -> None:
        self._log(LogLevel.WARNING, message, pid, context)
    
    def error(self, message: str, pid: Optional[int] = None,
              context: Optional[dict[str, Any]] = None) -> None:
        self._log(LogLevel.ERROR, message, pid, context)
    
    def exception(
        self,
        message: str,
        exc: Optional[BaseException] = None,
        pid: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        """Log at ERROR with the traceback of exc, or of the exception being handled."""
        self._log(LogLevel.ERROR, message, pid, context, exc_info=exc if exc is not None else True)


def get_logger(subsystem: str) -> Logger:
    """Get the Logger for a subsystem such as 'parser' or 'launcher'."""
    return Logger(subsystem)
