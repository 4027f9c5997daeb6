"""
External integrations for the pre-release configurator.
"""

from .subscription import SubscriptionConfigurator, CommonScriptConfigurator

__all__ = ["SubscriptionConfigurator", "CommonScriptConfigurator"]
