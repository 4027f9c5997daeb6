"""
Core modules for the pre-release configurator.
"""

from .downloader import Downloader
from .provisioner import ToolProvisioner
from .retry import RetryingInvoker
from .runner import CommandRunner, SubprocessRunner

__all__ = [
    "Downloader",
    "ToolProvisioner",
    "RetryingInvoker",
    "CommandRunner",
    "SubprocessRunner"
]
