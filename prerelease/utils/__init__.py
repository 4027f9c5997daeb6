"""
Utility modules for the pre-release configurator.
"""

from .logging import setup_logger, get_logger, setup_root_logger

__all__ = ["setup_logger", "get_logger", "setup_root_logger"]
