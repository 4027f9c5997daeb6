"""
Delegation to the companion configure_subscription step.
"""

import logging
from pathlib import Path

from ..core.errors import SubscriptionConfigError
from ..core.runner import CommandRunner, SubprocessRunner
from ..models.execution import ExecutionContext


REQUIRED_VARIABLES = ("SUBSCRIPTION", "CHANNEL", "SOURCE")


class SubscriptionConfigurator:
    """Applies subscription variables to the installer configuration."""
    
    def validate(self) -> None:
        """Check prerequisites before any other step runs."""
        pass
    
    def configure(self, context: ExecutionContext) -> None:
        raise NotImplementedError


class CommonScriptConfigurator(SubscriptionConfigurator):
    """
    Sources the shared pre-release shell library and calls its
    configure_subscription function.
    
    The function reads SUBSCRIPTION, CHANNEL and SOURCE from its environment
    and updates the installer values for the subscription.
    """
    
    FUNCTION_NAME = "configure_subscription"
    
    def __init__(self, common_script: Path, runner: CommandRunner = None):
        self.logger = logging.getLogger(__name__)
        self.common_script = Path(common_script)
        self.runner = runner or SubprocessRunner()
    
    def validate(self) -> None:
        if not self.common_script.is_file():
            raise SubscriptionConfigError(
                f"Common pre-release script not found: {self.common_script}"
            )
    
    def configure(self, context: ExecutionContext) -> None:
        missing = [name for name in REQUIRED_VARIABLES if not context.variables.get(name)]
        if missing:
            raise SubscriptionConfigError(
                f"Missing subscription variables: {', '.join(missing)}"
            )
        
        self.validate()
        
        self.logger.info(
            f"Updating subscription {context.variables['SUBSCRIPTION']} "
            f"(channel={context.variables['CHANNEL']}, source={context.variables['SOURCE']})"
        )
        command = [
            "bash", "-c",
            f'source "$1" && {self.FUNCTION_NAME}',
            "bash", str(self.common_script)
        ]
        result = self.runner.run(command, context)
        if not result.succeeded:
            raise SubscriptionConfigError(
                f"{self.FUNCTION_NAME} failed with exit code {result.returncode}"
            )
