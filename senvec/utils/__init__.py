"""Utilities."""

from .logging_setup import configure_from_config, get_logger, setup_logging

__all__ = ['configure_from_config', 'get_logger', 'setup_logging']
