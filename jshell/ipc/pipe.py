"""
IPC Channel Module

A unidirectional byte channel backed by an OS pipe. Each end is
closed at most once; closing an already closed end is a no-op so
callers on every error path can simply close everything.

Author: YSNRFD
Version: 1.0.0
"""

import os
from typing import Optional

from jshell.exceptions import ChannelError
from jshell.logger import get_logger


class Channel:
    """
    One OS pipe: bytes written to ``write_fd`` come out of ``read_fd``.
    
    Example:
        >>> with Channel.open() as channel:
        ...     os.write(channel.write_fd, b'hi')
    """
    
    def __init__(self, read_fd: int, write_fd: int):
        self._read_fd: Optional[int] = read_fd
        self._write_fd: Optional[int] = write_fd
    
    @classmethod
    def open(cls) -> 'Channel':
        """
        Create a new channel.
        
        Raises:
            ChannelError: If the OS refuses to create the pipe
        """
        try:
            read_fd, write_fd = os.pipe()
        except OSError as e:
            raise ChannelError(
                "Pipe could not be initialized.",
                errno=e.errno,
                context={'strerror': e.strerror}
            ) from e
        
        get_logger('ipc').debug(
            "Channel opened",
            context={'read_fd': read_fd, 'write_fd': write_fd}
        )
        return cls(read_fd, write_fd)
    
    @property
    def read_fd(self) -> int:
        if self._read_fd is None:
            raise ChannelError("Read end already closed.")
        return self._read_fd
    
    @property
    def write_fd(self) -> int:
        if self._write_fd is None:
            raise ChannelError("Write end already closed.")
        return self._write_fd
    
    @property
    def closed(self) -> bool:
        return self._read_fd is None and self._write_fd is None
    
    def close_read(self) -> None:
        if self._read_fd is not None:
            fd, self._read_fd = self._read_fd, None
            os.close(fd)
    
    def close_write(self) -> None:
        if self._write_fd is not None:
            fd, self._write_fd = self._write_fd, None
            os.close(fd)
    
    def close(self) -> None:
        """Close both ends held by this process."""
        self.close_read()
        self.close_write()
    
    def __enter__(self) -> 'Channel':
        return self
    
    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
