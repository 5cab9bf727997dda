"""
Logging system for chartsync.

This module provides a centralized logging configuration with console and
rotating file output, and helper decorators for common logging patterns.
"""

from chartsync.logging.config import (
    configure_logging,
    get_component_log_levels,
    get_logger,
    is_debug_mode,
    set_component_log_level,
    set_debug_mode,
)
from chartsync.logging.helpers import log_entry_exit, log_performance

__all__ = [
    # Configuration
    "configure_logging",
    "get_logger",
    "set_debug_mode",
    "is_debug_mode",
    "set_component_log_level",
    "get_component_log_levels",
    # Helper methods
    "log_entry_exit",
    "log_performance",
]
