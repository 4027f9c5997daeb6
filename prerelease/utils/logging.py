"""
Logging configuration and utilities.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional


CONSOLE_FORMAT = "[%(levelname)s] %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"


def _rotating_handler(log_file: Path, formatter: logging.Formatter) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5
    )
    handler.setFormatter(formatter)
    return handler


def setup_logger(name: str, 
                log_file: Optional[Path] = None,
                level: str = "INFO",
                format_string: Optional[str] = None) -> logging.Logger:
    """
    Set up a logger with console and optional file handlers.
    
    Args:
        name: Logger name
        log_file: Optional log file path
        level: Logging level
        format_string: Log format string
        
    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    
    # Avoid duplicate handlers
    if logger.handlers:
        return logger
    
    logger.setLevel(getattr(logging, level.upper()))
    
    formatter = logging.Formatter(format_string or CONSOLE_FORMAT)
    
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    
    if log_file:
        logger.addHandler(_rotating_handler(log_file, logging.Formatter(FILE_FORMAT)))
    
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)


def setup_root_logger(log_file: Optional[Path] = None, 
                     level: str = "INFO",
                     format_string: Optional[str] = None):
    """
    Set up the root logger for the application.
    
    Console output goes to stderr so stdout stays free for tool output.
    
    Args:
        log_file: Optional log file path
        level: Logging level
        format_string: Console format, defaults to "[LEVEL] message"
    """
    root_logger = logging.getLogger()
    
    # Clear any existing handlers
    root_logger.handlers.clear()
    
    root_logger.setLevel(getattr(logging, level.upper()))
    
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(format_string or CONSOLE_FORMAT))
    root_logger.addHandler(console_handler)
    
    if log_file:
        root_logger.addHandler(_rotating_handler(log_file, logging.Formatter(FILE_FORMAT)))
    
    # Set levels for third-party loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
