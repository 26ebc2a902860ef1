"""Logging setup for listkeeper.

Call configure_logging() once from each entry point (CLI, server) before doing
any real work.

Levels:
- DEBUG: per-request session details
- INFO: list and todo mutations, server lifecycle
- WARNING: malformed session entries, development secrets
- ERROR: anything that breaks a request

Store mutations log an event name (``list_created``, ``todo_deleted``) as the
message and attach ids as dotted ``extra`` fields such as ``list.id``.
"""

import json
import logging
import os
import re
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any, TextIO

LOG_LEVEL_ENV_VAR = "LISTKEEPER_LOG_LEVEL"
DEFAULT_LOG_RETENTION_DAYS = 7
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

DEFAULT_REDACT_PATTERNS: list[str] = [
    # SESSION_SECRET=value, secret_key: value
    r"\b[A-Za-z0-9_]*(?:KEY|TOKEN|SECRET|PASSWORD|PASSWD)\s*[=:]\s*([^\s\"']{8,})",
    # Signed cookie payloads: listkeeper_session=<data>.<timestamp>.<signature>
    r"\b[a-z_]*session=([A-Za-z0-9._\-+/=]{16,})",
    r"\bBearer\s+([A-Za-z0-9._\-+=]{20,})\b",
]

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RESERVED_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime", "component"}

# Third-party loggers held at WARNING
NOISY_LOGGERS = [
    "httpx",
    "httpcore",
    "uvicorn.access",
    "multipart",
]


def mask_secret(value: str) -> str:
    """Keep the first and last four characters of long values, hide short ones."""
    if len(value) < 12:
        return "***"
    return f"{value[:4]}...{value[-4:]}"


@dataclass
class SecretRedactor:
    """Masks secret values in log text.

    Each pattern captures the secret in group 1; the rest of the match (the
    key name, the cookie name) is kept so redacted lines stay searchable.
    """

    patterns: list[re.Pattern[str]] = field(default_factory=list)
    enabled: bool = True

    def __post_init__(self) -> None:
        if not self.patterns:
            self.patterns = [
                re.compile(p, re.IGNORECASE) for p in DEFAULT_REDACT_PATTERNS
            ]

    def redact(self, text: str) -> str:
        if not self.enabled or not text:
            return text
        for pattern in self.patterns:
            text = pattern.sub(self._substitute, text)
        return text

    @staticmethod
    def _substitute(match: re.Match[str]) -> str:
        whole = match.group(0)
        secret = match.group(1)
        if "..." in secret:
            return whole
        start, end = match.span(1)
        offset = match.start(0)
        return whole[: start - offset] + mask_secret(secret) + whole[end - offset :]


_redactor = SecretRedactor()


def prune_old_logs(
    logs_dir: Path,
    retention_days: int = DEFAULT_LOG_RETENTION_DAYS,
    suffix: str = ".jsonl",
) -> int:
    """Delete ``*<suffix>`` files in ``logs_dir`` not modified within the window.

    Returns the number of files removed.
    """
    if not logs_dir.is_dir():
        return 0

    cutoff = (datetime.now(UTC) - timedelta(days=retention_days)).timestamp()
    removed = 0
    for path in logs_dir.glob(f"*{suffix}"):
        try:
            if path.is_file() and path.stat().st_mtime < cutoff:
                path.unlink()
                removed += 1
        except OSError:
            continue  # Raced with another process; try again next rotation
    return removed


def _component(logger_name: str) -> str:
    """``listkeeper.lists.store`` -> ``lists``; ``uvicorn.error`` -> ``uvicorn``."""
    head, _, rest = logger_name.partition(".")
    if head == "listkeeper" and rest:
        return rest.split(".", 1)[0]
    return head


def record_extra(record: logging.LogRecord) -> dict[str, Any]:
    """Return the structured fields attached to a record via ``extra``."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_RECORD_ATTRS and not key.startswith("_")
    }


class JSONLHandler(logging.Handler):
    """Writes one JSON object per record to ``<logs_dir>/YYYY-MM-DD.jsonl``.

    A new file is opened when the UTC date changes; old files are pruned at
    that point.
    """

    def __init__(
        self,
        logs_dir: Path,
        retention_days: int = DEFAULT_LOG_RETENTION_DAYS,
    ):
        super().__init__()
        logs_dir.mkdir(parents=True, exist_ok=True)
        self._logs_dir = logs_dir
        self._retention_days = retention_days
        self._day: str | None = None
        self._stream: TextIO | None = None

    def _open_for_today(self) -> TextIO:
        today = datetime.now(UTC).date().isoformat()
        if self._stream is not None and self._day == today:
            return self._stream

        if self._stream is not None:
            self._stream.close()
        self._day = today
        self._stream = (self._logs_dir / f"{today}.jsonl").open("a", encoding="utf-8")
        prune_old_logs(self._logs_dir, self._retention_days)
        return self._stream

    def _entry(self, record: logging.LogRecord) -> dict[str, Any]:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "component": _component(record.name),
            "logger": record.name,
            "message": _redactor.redact(record.getMessage()),
        }
        if record.exc_info:
            formatter = self.formatter or logging.Formatter()
            entry["exception"] = _redactor.redact(
                formatter.formatException(record.exc_info)
            )
        if extra := record_extra(record):
            # Redact the serialized form so nested values are covered too.
            entry["extra"] = json.loads(
                _redactor.redact(json.dumps(extra, default=str))
            )
        return entry

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stream = self._open_for_today()
            stream.write(json.dumps(self._entry(record)) + "\n")
            stream.flush()
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None
        super().close()


class ComponentFormatter(logging.Formatter):
    """Exposes ``%(component)s``, the short subsystem name of the logger."""

    def format(self, record: logging.LogRecord) -> str:
        record.component = _component(record.name)
        return super().format(record)


def _resolve_level(level: str | None) -> int:
    name = (level or os.environ.get(LOG_LEVEL_ENV_VAR) or "INFO").upper()
    if name not in VALID_LEVELS:
        name = "INFO"
    return getattr(logging, name)


def _console_handler(use_rich: bool) -> logging.Handler:
    if use_rich:
        from rich.logging import RichHandler

        handler: logging.Handler = RichHandler(
            rich_tracebacks=False,
            show_path=False,
            show_time=True,
            markup=False,
        )
        handler.setFormatter(ComponentFormatter("%(component)s | %(message)s"))
        return handler

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    return handler


def configure_logging(
    level: str | None = None,
    use_rich: bool = False,
    log_to_file: bool = False,
) -> None:
    """Configure root logging for listkeeper.

    Args:
        level: DEBUG, INFO, WARNING or ERROR. Defaults to $LISTKEEPER_LOG_LEVEL,
            then INFO.
        use_rich: Log to the console through rich (server mode). uvicorn's
            own loggers are routed through the same handlers.
        log_to_file: Also write JSONL files under $LISTKEEPER_HOME/logs.
    """
    from listkeeper.config.paths import get_logs_path

    log_level = _resolve_level(level)
    handlers = [_console_handler(use_rich)]
    if log_to_file:
        file_handler = JSONLHandler(get_logs_path())
        file_handler.setLevel(log_level)
        handlers.append(file_handler)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if use_rich:
        for name in ("uvicorn", "uvicorn.error"):
            uvicorn_logger = logging.getLogger(name)
            uvicorn_logger.handlers = handlers
            uvicorn_logger.propagate = False
