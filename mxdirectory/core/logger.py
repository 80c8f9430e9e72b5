"""Structured logging: console plus a JSON-lines event file."""

import json
import logging
import threading
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any

from mxdirectory.core.config import config

_LOG_KWARGS = {"exc_info", "stack_info", "stacklevel", "extra"}


@dataclass
class LogEvent:
    event_type: str
    timestamp: str
    data: dict[str, Any]

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)


class DirectoryLogger:
    def __init__(self):
        config.logs_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = config.logs_dir / "directory.log"
        self._file_lock = threading.Lock()
        self._log_file_handle = open(self.log_file, "a", encoding="utf-8")
        self._setup_console_logger()

    def _setup_console_logger(self):
        self.console = logging.getLogger("mxdirectory")
        self.console.setLevel(logging.DEBUG)
        self._console_formatter = logging.Formatter(
            "%(asctime)s │ %(levelname)-7s │ %(message)s", datefmt="%H:%M:%S"
        )
        if not self.console.handlers:
            handler = logging.StreamHandler()
            handler.setLevel(logging.INFO)
            handler.setFormatter(self._console_formatter)
            self.console.addHandler(handler)

    def log_event(self, event: LogEvent) -> None:
        with self._file_lock:
            if self._log_file_handle.closed:
                return
            self._log_file_handle.write(event.to_json() + "\n")
            self._log_file_handle.flush()

    def _timestamp(self) -> str:
        return datetime.now().isoformat()

    def _event(self, event_type: str, **data: Any) -> None:
        self.log_event(LogEvent(event_type=event_type, timestamp=self._timestamp(), data=data))

    def search_started(self, query: str, target: str):
        self._event("SEARCH_STARTED", query=query[:200], target=target)
        self.console.info("Performing search for '%s'", query)
        self.console.info("Original request URL: %s", target)

    def source_matched(self, source: str, mode: str, query: str, count: int, limited: bool):
        self._event(
            "SOURCE_MATCHED",
            source=source,
            mode=mode,
            query=query[:200],
            count=count,
            limited=limited,
        )
        self.console.info(
            "%s [%s]: found %d match(es) for '%s'%s",
            source,
            mode,
            count,
            query,
            " (limited)" if limited else "",
        )

    def search_done(self, query: str, total: int, limited: bool):
        self._event("SEARCH_DONE", query=query[:200], total=total, limited=limited)
        self.console.info("Total matches: %d - limited? %s", total, limited)

    def error(self, message: str, *args, exception: Exception | None = None, **kwargs):
        self._event(
            "ERROR",
            message=message % args if args else message,
            exception=str(exception) if exception else None,
        )
        log_kwargs = {k: v for k, v in kwargs.items() if k in _LOG_KWARGS}
        if exception and "exc_info" not in log_kwargs:
            log_kwargs["exc_info"] = exception
        self.console.error(message, *args, **log_kwargs)

    def info(self, message: str, *args, **kwargs):
        log_kwargs = {k: v for k, v in kwargs.items() if k in _LOG_KWARGS}
        self.console.info(message, *args, **log_kwargs)

    def warning(self, message: str, *args, **kwargs):
        self._event("WARNING", message=(message % args if args else message)[:500])
        log_kwargs = {k: v for k, v in kwargs.items() if k in _LOG_KWARGS}
        self.console.warning(message, *args, **log_kwargs)

    def exception(self, message: str, *args, **kwargs):
        self._event("ERROR", message=(message % args if args else message)[:500])
        self.console.exception(message, *args, **kwargs)

    def debug(self, message: str, *args, **kwargs):
        log_kwargs = {k: v for k, v in kwargs.items() if k in _LOG_KWARGS}
        self.console.debug(message, *args, **log_kwargs)

    def close(self) -> None:
        with self._file_lock:
            if not self._log_file_handle.closed:
                self._log_file_handle.close()


logger = DirectoryLogger()
