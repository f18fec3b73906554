"""
Debug logging for numkit.

Collects structured log entries from the random source, the parser and
the configuration loader. Entries are kept in memory and can optionally
be echoed to a stream or exported as text or JSON.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any, TextIO, Callable
from enum import Enum
import json
import threading
import time


class LogLevel(Enum):
    """Log levels for filtering output."""
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    NONE = 5     # No logging


@dataclass
class LogEntry:
    """A single log entry."""
    timestamp: float
    level: LogLevel
    category: str
    message: str
    data: Dict[str, Any] = field(default_factory=dict)

    def format(self, include_data: bool = True) -> str:
        """Format entry as string."""
        level_str = self.level.name[:5].ljust(5)
        cat_str = self.category[:8].ljust(8)
        line = f"[{self.timestamp:10.4f}] {level_str} {cat_str} {self.message}"

        if include_data and self.data:
            data_str = ", ".join(f"{k}={v}" for k, v in self.data.items())
            line += f" ({data_str})"

        return line

    def to_dict(self) -> Dict[str, Any]:
        return {
            'timestamp': self.timestamp,
            'level': self.level.name,
            'category': self.category,
            'message': self.message,
            'data': self.data,
        }


class DebugLogger:
    """
    In-memory debug logger.

    Timestamps are seconds elapsed since the logger was created.

    Example:
        >>> logger = DebugLogger(level=LogLevel.DEBUG)
        >>> logger.debug("rng", "Reseeded", seed=1234)
        >>> logger.set_category_filter(["parse"])
        >>> logger.write_log("numkit.log")
    """

    LEVEL_COLORS = {
        LogLevel.TRACE: '\033[90m',   # Gray
        LogLevel.DEBUG: '\033[37m',   # White
        LogLevel.INFO: '\033[32m',    # Green
        LogLevel.WARNING: '\033[33m', # Yellow
        LogLevel.ERROR: '\033[31m',   # Red
    }
    RESET_COLOR = '\033[0m'

    def __init__(self,
                 level: LogLevel = LogLevel.WARNING,
                 output: Optional[TextIO] = None,
                 use_colors: bool = False,
                 max_entries: int = 10000):
        """
        Initialize the debug logger.

        Args:
            level: Minimum log level to record
            output: Output stream (None = no console output)
            use_colors: Use ANSI colors in output
            max_entries: Maximum entries to store
        """
        self.level = level
        self.output = output
        self.use_colors = use_colors
        self.max_entries = max_entries

        self._entries: List[LogEntry] = []
        self._category_filter: Optional[set] = None
        self._callbacks: List[Callable] = []
        self._created = time.perf_counter()

    def set_level(self, level: LogLevel) -> None:
        """Set the minimum log level."""
        self.level = level

    def set_category_filter(self, categories: Optional[List[str]]) -> None:
        """
        Set category filter (only log these categories).

        Args:
            categories: List of categories to log, or None to log all
        """
        if categories is None:
            self._category_filter = None
        else:
            self._category_filter = set(categories)

    def add_callback(self, callback: Callable) -> None:
        """Add a callback for log entries."""
        self._callbacks.append(callback)

    # =========================================================================
    # Logging Methods
    # =========================================================================

    def log(self, level: LogLevel, category: str, message: str,
            **data) -> Optional[LogEntry]:
        """
        Log a message.

        Args:
            level: Log level
            category: Category (e.g., "rng", "parse", "config")
            message: Log message
            **data: Additional structured data

        Returns:
            LogEntry if logged, None if filtered
        """
        if level.value < self.level.value:
            return None

        if self._category_filter and category not in self._category_filter:
            return None

        entry = LogEntry(
            timestamp=time.perf_counter() - self._created,
            level=level,
            category=category,
            message=message,
            data=data,
        )

        self._entries.append(entry)
        if len(self._entries) > self.max_entries:
            self._entries = self._entries[-self.max_entries:]

        if self.output:
            self._write_entry(entry)

        for callback in self._callbacks:
            callback(entry)

        return entry

    def trace(self, category: str, message: str, **data) -> Optional[LogEntry]:
        """Log at TRACE level."""
        return self.log(LogLevel.TRACE, category, message, **data)

    def debug(self, category: str, message: str, **data) -> Optional[LogEntry]:
        """Log at DEBUG level."""
        return self.log(LogLevel.DEBUG, category, message, **data)

    def info(self, category: str, message: str, **data) -> Optional[LogEntry]:
        """Log at INFO level."""
        return self.log(LogLevel.INFO, category, message, **data)

    def warning(self, category: str, message: str, **data) -> Optional[LogEntry]:
        """Log at WARNING level."""
        return self.log(LogLevel.WARNING, category, message, **data)

    def error(self, category: str, message: str, **data) -> Optional[LogEntry]:
        """Log at ERROR level."""
        return self.log(LogLevel.ERROR, category, message, **data)

    def _write_entry(self, entry: LogEntry) -> None:
        """Write entry to output stream."""
        line = entry.format()
        if self.use_colors:
            color = self.LEVEL_COLORS.get(entry.level, '')
            line = f"{color}{line}{self.RESET_COLOR}"

        self.output.write(line + "\n")
        self.output.flush()

    # =========================================================================
    # Specialized Logging
    # =========================================================================

    def log_reseed(self, name: str, seed: int, source: str) -> None:
        """Log a generator reseed."""
        self.debug("rng", f"Reseed {name}", seed=seed, source=source)

    def log_parse_fallback(self, text: str, type_name: str,
                           fallback: Any) -> None:
        """Log a lenient parse that could not extract a value."""
        self.warning("parse", f"No {type_name} in input", text=repr(text),
                     fallback=fallback)

    def log_config_loaded(self, path: str, **values) -> None:
        """Log a configuration file load."""
        self.info("config", f"Loaded {path}", **values)

    # =========================================================================
    # Query Methods
    # =========================================================================

    def get_entries(self, level: Optional[LogLevel] = None,
                    category: Optional[str] = None,
                    count: Optional[int] = None) -> List[LogEntry]:
        """
        Get log entries with optional filtering.

        Args:
            level: Filter by minimum level
            category: Filter by category
            count: Maximum entries to return (most recent)
        """
        entries = self._entries

        if level:
            entries = [e for e in entries if e.level.value >= level.value]

        if category:
            entries = [e for e in entries if e.category == category]

        if count:
            entries = entries[-count:]

        return entries

    def get_by_category(self, category: str) -> List[LogEntry]:
        """Get entries for a category."""
        return [e for e in self._entries if e.category == category]

    # =========================================================================
    # Export Methods
    # =========================================================================

    def to_text(self, include_data: bool = True) -> str:
        """Export log as plain text."""
        return "\n".join(e.format(include_data) for e in self._entries)

    def to_json(self, pretty: bool = False) -> str:
        """Export log as JSON."""
        data = [e.to_dict() for e in self._entries]
        if pretty:
            return json.dumps(data, indent=2, default=str)
        return json.dumps(data, default=str)

    def write_log(self, filepath: str, format: str = "text") -> int:
        """
        Write log to file.

        Args:
            filepath: Output file path
            format: "text" or "json"

        Returns:
            Number of entries written
        """
        with open(filepath, 'w', encoding='utf-8') as f:
            if format == "json":
                f.write(self.to_json(pretty=True))
            else:
                f.write(self.to_text())

        return len(self._entries)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def count(self) -> int:
        """Get number of stored entries."""
        return len(self._entries)

    def clear(self) -> None:
        """Clear all entries."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"DebugLogger(entries={len(self._entries)}, level={self.level.name})"


_logger: Optional[DebugLogger] = None
_logger_lock = threading.Lock()


def get_logger() -> DebugLogger:
    """Return the shared numkit logger, creating it on first use."""
    global _logger
    with _logger_lock:
        if _logger is None:
            _logger = DebugLogger()
        return _logger

