"""
jshell IPC Module

Provides the byte channel that connects two pipeline stages.
"""

from .pipe import Channel

__all__ = [
    'Channel',
]
