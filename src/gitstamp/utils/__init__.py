"""Utility module for gitstamp."""

from .cli_utils import exit_with_error, show_error, show_warning
from .config_loader import ConfigLoader
from .log_setup import console, display_error_summary, display_warning_summary, setup_logging

__all__ = [
	"ConfigLoader",
	"console",
	"display_error_summary",
	"display_warning_summary",
	"exit_with_error",
	"setup_logging",
	"show_error",
	"show_warning",
]
