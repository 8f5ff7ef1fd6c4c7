"""
SecurePass Structured Logger
=============================

Provides :class:`SecurePassLogger`, a structured logging facade that
emits human-friendly Rich console output and, optionally, machine-parseable
JSON lines to a rotating log file.

Log records describe operations (lengths, flags, timings, outcomes).
Generated or evaluated passwords are never passed to the logger.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

if TYPE_CHECKING:
    from shared.config import SecurePassConfig

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
        "log.level.critical": "bold white on red",
    }
)

_ROOT_NAME = "securepass"


# ========================== JSON Formatter =================================


class _JSONFormatter(logging.Formatter):
    """Emit each log record as a single-line JSON object.

    Output fields::

        {
          "timestamp": "...",
          "level": "INFO",
          "logger": "securepass.engine",
          "message": "...",
          "component": "engine",
          "operation": "generate",
          "extra": { ... }
        }
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for attr in ("component", "operation"):
            val = getattr(record, attr, None)
            if val is not None:
                entry[attr] = val

        extra = getattr(record, "context", None)
        if extra is not None:
            entry["extra"] = extra

        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


class _ColorConsoleHandler(RichHandler):
    """:class:`rich.logging.RichHandler` bound to stderr with the log theme."""

    def __init__(self, **kwargs: Any) -> None:
        console = Console(theme=_LOG_THEME, stderr=True)
        super().__init__(
            console=console,
            show_path=False,
            show_time=True,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            markup=False,
            **kwargs,
        )


# ========================== SecurePassLogger ===============================


class SecurePassLogger:
    """Structured, context-aware logger for SecurePass components.

    Each instance is bound to a *component* name (e.g. ``"engine"``) and
    can carry a temporary *operation* context via a context manager.
    Handlers are attached once to the shared ``securepass`` root logger
    by :meth:`configure`; component loggers propagate to it.

    Usage::

        SecurePassLogger.configure(log_level="DEBUG", log_file="sp.log", json_logs=True)
        log = SecurePassLogger("engine")
        with log.operation("generate"):
            log.info("Generated password", length=16)

    Args:
        component: Identifying name of the emitting component.
    """

    def __init__(self, component: str) -> None:
        self._component = component
        self._operation: str | None = None
        self._logger = logging.getLogger(f"{_ROOT_NAME}.{component}")

    # ------------------------------------------------------------------ #
    #  Handler configuration
    # ------------------------------------------------------------------ #

    @staticmethod
    def configure(
        *,
        log_level: str = "WARNING",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> logging.Logger:
        """Attach handlers to the ``securepass`` root logger.

        Calling it again replaces the previous handlers, so the CLI can
        reconfigure after loading a config file.

        Args:
            log_level:      Minimum severity (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            log_file:       Path to a rotating log file. Falsy disables file logging.
            json_logs:      If ``True`` the file handler emits JSON lines.
            max_bytes:      Maximum log-file size before rotation.
            backup_count:   Number of rotated backup files to keep.
            console_output: If ``True`` attach a Rich console handler.

        Returns:
            The configured root :class:`logging.Logger`.
        """
        level = getattr(logging, log_level.upper(), logging.WARNING)
        root = logging.getLogger(_ROOT_NAME)
        root.setLevel(level)
        root.propagate = False

        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()

        if console_output:
            root.addHandler(_ColorConsoleHandler(level=level))

        if log_file:
            file_path = Path(log_file)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            fh = RotatingFileHandler(
                filename=str(file_path),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            fh.setLevel(level)
            if json_logs:
                fh.setFormatter(_JSONFormatter())
            else:
                fh.setFormatter(
                    logging.Formatter(
                        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                        datefmt="%Y-%m-%dT%H:%M:%S%z",
                    )
                )
            root.addHandler(fh)

        return root

    @classmethod
    def configure_from(
        cls, config: SecurePassConfig, *, console_output: bool = True
    ) -> logging.Logger:
        """Configure handlers from the ``[global]`` config section."""
        settings = config.global_settings
        level = "DEBUG" if settings.debug else settings.log_level
        return cls.configure(
            log_level=level,
            log_file=settings.log_file or None,
            json_logs=settings.log_json,
            console_output=console_output,
        )

    # ------------------------------------------------------------------ #
    #  Context management -- operation scope
    # ------------------------------------------------------------------ #

    class _OperationContext:
        """Context manager that temporarily binds an operation name."""

        def __init__(self, parent: SecurePassLogger, operation: str) -> None:
            self._parent = parent
            self._operation = operation
            self._prev: str | None = None

        def __enter__(self) -> SecurePassLogger:
            self._prev = self._parent._operation
            self._parent._operation = self._operation
            return self._parent

        def __exit__(self, *exc: Any) -> None:
            self._parent._operation = self._prev

    def operation(self, name: str) -> _OperationContext:
        """Return a context manager that sets the *operation* field."""
        return self._OperationContext(self, name)

    # ------------------------------------------------------------------ #
    #  Log methods
    # ------------------------------------------------------------------ #

    def _enrich(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        """Move non-standard keyword arguments into the record's context."""
        extra = kwargs.pop("extra", {}) or {}

        context: dict[str, Any] = {}
        standard_keys = {"exc_info", "stack_info", "stacklevel"}
        for key in list(kwargs):
            if key not in standard_keys:
                context[key] = kwargs.pop(key)

        extra["component"] = self._component
        extra["operation"] = self._operation
        if context:
            extra["context"] = context

        kwargs["extra"] = extra
        return kwargs

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(msg, *args, **self._enrich(kwargs))

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(msg, *args, **self._enrich(kwargs))

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(msg, *args, **self._enrich(kwargs))

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(msg, *args, **self._enrich(kwargs))

    # ------------------------------------------------------------------ #
    #  Timing helper
    # ------------------------------------------------------------------ #

    class _TimingContext:
        """Context manager for measuring and logging elapsed time."""

        def __init__(self, logger_inst: SecurePassLogger, label: str) -> None:
            self._logger = logger_inst
            self._label = label
            self._start: float = 0.0

        def __enter__(self) -> SecurePassLogger._TimingContext:
            self._start = time.perf_counter()
            self._logger.debug("Started: %s", self._label)
            return self

        def __exit__(self, *exc: Any) -> None:
            self._logger.debug(
                "Completed: %s (%.3f ms)", self._label, self.elapsed * 1000
            )

        @property
        def elapsed(self) -> float:
            """Seconds elapsed since entering the context."""
            return time.perf_counter() - self._start

    def timed(self, label: str) -> _TimingContext:
        """Context manager that logs start / finish and elapsed time.

        Usage::

            with log.timed("distribution audit"):
                audit = auditor.audit(alphabet)
        """
        return self._TimingContext(self, label)

    # ------------------------------------------------------------------ #
    #  Properties
    # ------------------------------------------------------------------ #

    @property
    def component(self) -> str:
        """Name of the component this logger is bound to."""
        return self._component

    @property
    def underlying(self) -> logging.Logger:
        """Direct access to the stdlib :class:`logging.Logger`."""
        return self._logger
