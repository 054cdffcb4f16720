"""
Logging for EmojiSense.

Provides structured, component-tagged logging for trigger decisions, table
builds and service traffic without cluttering the completion code.

Logs are organized in date-stamped folders with one file per level:
  logs/YYYY-MM-DD/debug.log
  logs/YYYY-MM-DD/info.log
  logs/YYYY-MM-DD/warning.log
  logs/YYYY-MM-DD/error.log

Nothing is ever written to stdout: the stdio service uses it for protocol
traffic.
"""

import logging
import json
import time
from pathlib import Path
from typing import Any, Dict, Optional
from datetime import datetime, timezone


class EmojiSenseLogger:
    """Centralized logger for completion decisions and service traffic."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.logger = logging.getLogger("emojisense")
            # Silent until configure() attaches file handlers
            self.logger.addHandler(logging.NullHandler())
            self.logger.propagate = False
            self.json_mode = False
            self.session_start = time.time()
            self.log_dir = None
            self._initialized = True

    def _get_default_log_dir(self) -> Path:
        """Get the default log directory path with today's date."""
        today = datetime.now().strftime("%Y-%m-%d")
        return Path("logs") / today

    def configure(
        self,
        level: str = "INFO",
        log_dir: Optional[str] = None,
        json_mode: bool = False,
        enable_logging: bool = True,
    ):
        """
        Configure logging output.

        Args:
            level: DEBUG, INFO, WARNING, ERROR (minimum level to log)
            log_dir: Optional directory for logs (default: logs/YYYY-MM-DD/)
            json_mode: Use JSON format for structured parsing
            enable_logging: Enable file logging (default: True)
        """
        if not enable_logging:
            return

        self.json_mode = json_mode
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers.clear()

        # Capture everything, handlers decide what is written
        self.logger.setLevel(logging.DEBUG)

        if log_dir:
            self.log_dir = Path(log_dir)
        else:
            self.log_dir = self._get_default_log_dir()

        self.log_dir.mkdir(parents=True, exist_ok=True)

        if json_mode:
            formatter = JsonFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s [%(component)-8s] %(message)s',
                datefmt='%H:%M:%S'
            )

        min_level = getattr(logging, level.upper(), logging.INFO)

        log_levels = [
            (logging.DEBUG, 'debug.log'),
            (logging.INFO, 'info.log'),
            (logging.WARNING, 'warning.log'),
            (logging.ERROR, 'error.log'),
        ]

        for log_level, filename in log_levels:
            if log_level >= min_level:
                log_path = self.log_dir / filename
                handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
                handler.setLevel(log_level)
                handler.setFormatter(formatter)

                # Exact level only, so each file holds one level
                handler.addFilter(lambda record, level=log_level: record.levelno == level)

                self.logger.addHandler(handler)

    def get_log_directory(self) -> Optional[Path]:
        """Get the current log directory path."""
        return self.log_dir

    def _log(self, level: str, component: str, msg: str, **data):
        """Core logging with structured data."""
        extra = {'component': component, **data}
        getattr(self.logger, level)(msg, extra=extra)

    # === CANDIDATE TABLE ===

    def table_built(self, size: int, categories: int, elapsed: float):
        self._log('info', 'TABLE', f"Built {size} candidates across {categories} categories "
                  f"in {elapsed * 1000:.1f}ms",
                  size=size, categories=categories, elapsed=elapsed)

    # === TRIGGER DECISIONS ===

    def trigger_rejected(self, gate: str, reason: str, cursor: int):
        self._log('debug', 'TRIGGER', f"Rejected at {cursor} by {gate}: {reason}",
                  gate=gate, reason=reason, cursor=cursor)

    def trigger_accepted(self, cursor: int, start: int, end: int):
        self._log('debug', 'TRIGGER', f"Participating at {cursor}, span [{start}, {end})",
                  cursor=cursor, start=start, end=end)

    # === SERVICE ===

    def service_start(self, **settings):
        settings_str = ', '.join(f'{k}={v!r}' for k, v in settings.items())
        self._log('info', 'SERVICE', f"Starting ({settings_str})", **settings)

    def service_stop(self, reason: str):
        self._log('info', 'SERVICE', f"Stopping: {reason}", reason=reason)

    def request(self, method: Optional[str], request_id: Any):
        self._log('debug', 'RPC', f"Request {method} (id={request_id})",
                  method=method, request_id=request_id)

    def response(self, method: Optional[str], request_id: Any, ok: bool):
        status = "OK" if ok else "ERROR"
        self._log('debug', 'RPC', f"[{status}] {method} (id={request_id})",
                  method=method, request_id=request_id, ok=ok)

    # === ERRORS & WARNINGS ===

    def error(self, component: str, message: str, exception: Optional[Exception] = None):
        import traceback

        error_details = message
        if exception:
            tb_str = ''.join(traceback.format_exception(type(exception), exception, exception.__traceback__))
            error_details = f"{message}\n{tb_str}"

        self._log('error', component.upper(), f"ERROR: {error_details}",
                  error=str(exception) if exception else message)

    def warning(self, component: str, message: str):
        self._log('warning', component.upper(), f"WARNING: {message}")


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter for machine parsing."""

    _RESERVED = {
        'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
        'filename', 'module', 'exc_info', 'exc_text', 'stack_info',
        'lineno', 'funcName', 'created', 'msecs', 'relativeCreated',
        'thread', 'threadName', 'processName', 'process', 'message',
        'component', 'asctime', 'taskName',
    }

    def format(self, record: logging.LogRecord) -> str:
        data: Dict[str, Any] = {
            'time': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'component': getattr(record, 'component', 'SYSTEM'),
            'message': record.getMessage(),
        }
        for k, v in record.__dict__.items():
            if k not in self._RESERVED:
                data[k] = v
        return json.dumps(data, default=str)


# Global instance
logger = EmojiSenseLogger()
