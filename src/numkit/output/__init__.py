"""
Logging for numkit.

- DebugLogger: structured in-memory log with text/JSON export
- get_logger: the shared instance used by the numkit modules
"""

from .debug_logger import (
    DebugLogger,
    LogLevel,
    LogEntry,
    get_logger,
)

__all__ = [
    'DebugLogger',
    'LogLevel',
    'LogEntry',
    'get_logger',
]
