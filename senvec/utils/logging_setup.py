"""Centralized logging configuration for senvec."""

import json
import logging
import logging.handlers
import re
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


class SensitiveDataFilter(logging.Filter):
    """Filter to redact key material from logs."""

    # key=..., secret: ..., password=...
    SECRET_PATTERN = re.compile(
        r'(key|secret|password|token|material)["\']?\s*[:=]\s*["\']?([^"\'\s,)]+)',
        re.IGNORECASE
    )
    # Bare hex runs long enough to be a 128-bit key; pure 0/1 hash codes are left alone
    HEX_PATTERN = re.compile(r'\b(?=[0-9a-fA-F]*[a-fA-F])[0-9a-fA-F]{32,}\b')

    def filter(self, record: logging.LogRecord) -> bool:
        """Redact secrets from the fully formatted message."""
        # Secrets usually arrive as lazy %-args, so redact after formatting
        record.msg = self._redact_message(record.getMessage())
        record.args = ()
        return True

    def _redact_message(self, message: str) -> str:
        message = self.SECRET_PATTERN.sub(r'\1=***REDACTED***', message)
        return self.HEX_PATTERN.sub('***REDACTED***', message)


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_obj = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
            'message': record.getMessage(),
        }

        if hasattr(record, 'extra_fields'):
            log_obj.update(record.extra_fields)

        if record.exc_info:
            log_obj['exception'] = self.formatException(record.exc_info)

        for key in ['operation', 'duration', 'path']:
            if hasattr(record, key):
                log_obj[key] = getattr(record, key)

        return json.dumps(log_obj, ensure_ascii=False, default=str)


class ConsoleFormatter(logging.Formatter):
    """Colored console formatter for development."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        """Format with colors for console output."""
        if not sys.stderr.isatty():
            return super().format(record)

        original = record.levelname
        if original in self.COLORS:
            record.levelname = f"{self.COLORS[original]}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def setup_logging(
    name: str = 'senvec',
    level: str = 'INFO',
    log_dir: Optional[Path] = None,
    console: bool = True,
    file: bool = False,
    json_format: bool = True,
    redact_sensitive: bool = True
) -> logging.Logger:
    """
    Setup centralized logging configuration.

    Args:
        name: Logger name
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files (default: logs/)
        console: Enable console output
        file: Enable file output
        json_format: Use JSON format for file logs
        redact_sensitive: Redact key material from logs

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()
    logger.propagate = False

    # Attached to handlers so records from child loggers are redacted too
    sensitive_filter = SensitiveDataFilter() if redact_sensitive else None

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, level.upper()))

        if sys.stderr.isatty():
            console_formatter = ConsoleFormatter(
                '%(asctime)s - %(levelname)s - [%(module)s:%(lineno)d] - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
        else:
            console_formatter = logging.Formatter(
                '%(asctime)s - %(levelname)s - [%(module)s] - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    if file:
        if log_dir is None:
            log_dir = Path.cwd() / 'logs'
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        date_str = datetime.now().strftime('%Y%m%d')
        suffix = 'jsonl' if json_format else 'log'
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / f'senvec_{date_str}.{suffix}',
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5
        )
        if json_format:
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    '%(asctime)s - %(levelname)s - [%(module)s:%(lineno)d] - %(message)s',
                    datefmt='%Y-%m-%d %H:%M:%S'
                )
            )

        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    if sensitive_filter is not None:
        for handler in logger.handlers:
            handler.addFilter(sensitive_filter)

    return logger


def get_logger(name: str, **kwargs) -> logging.Logger:
    """
    Get or create a logger with the standard configuration.

    Args:
        name: Logger name (usually __name__)
        **kwargs: Additional arguments for setup_logging

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        logger.propagate = False
        return logger

    return setup_logging(name, **kwargs)


def log_operation(logger: logging.Logger, operation: str, **context):
    """
    Log an operation with context.

    Args:
        logger: Logger instance
        operation: Operation name
        **context: Additional context to log
    """
    logger.info(f"Starting operation: {operation}", extra={'operation': operation, 'extra_fields': context})


def configure_from_config(config, **kwargs) -> logging.Logger:
    """Set up the ``senvec`` logger at the level named in a SenvecConfig."""
    return setup_logging('senvec', level=config.log_level, **kwargs)
