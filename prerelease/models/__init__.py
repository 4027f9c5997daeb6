"""
Data models for the pre-release catalog configurator.
"""

from .tool import ToolSpec, ProvisionResult
from .execution import ExecutionContext, RetryPolicy, CommandResult

__all__ = [
    "ToolSpec",
    "ProvisionResult",
    "ExecutionContext",
    "RetryPolicy",
    "CommandResult"
]
