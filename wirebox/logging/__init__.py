"""
Centralized Logging Package

Provides unified logging configuration for wirebox containers and tools.
"""

from wirebox.logging.manager import LogManager, get_logger, setup_logging

__all__ = ['LogManager', 'get_logger', 'setup_logging']
