"""
Bounded retry around an external installer command.
"""

import logging
import time
from pathlib import Path
from typing import Callable, List, Optional

from ..models.execution import ExecutionContext, RetryPolicy
from .errors import InstallerFailed
from .runner import CommandRunner


class RetryingInvoker:
    """Runs a command until it succeeds or the retry policy is exhausted."""
    
    def __init__(self,
                 runner: CommandRunner,
                 sleeper: Callable[[float], None] = time.sleep,
                 description: str = "Install script"):
        self.logger = logging.getLogger(__name__)
        self.runner = runner
        self.sleeper = sleeper
        self.description = description
    
    def run_with_retry(self,
                       command: List[str],
                       policy: RetryPolicy,
                       context: ExecutionContext,
                       cwd: Optional[Path] = None) -> int:
        """
        Run command, waiting policy.wait_seconds between failed attempts.
        
        Returns:
            The attempt number that succeeded
            
        Raises:
            InstallerFailed: after policy.max_attempts failures
        """
        attempt = 1
        while True:
            result = self.runner.run(command, context, cwd=cwd)
            if result.succeeded:
                if attempt > 1:
                    self.logger.info(f"{self.description} succeeded on attempt {attempt}/{policy.max_attempts}")
                return attempt
            
            if attempt >= policy.max_attempts:
                error = InstallerFailed(policy.max_attempts, self.description)
                self.logger.error(str(error))
                raise error
            
            self.logger.warning(
                f"{self.description} failed (attempt {attempt}/{policy.max_attempts}, "
                f"exit code {result.returncode}). Waiting {policy.wait_seconds}s before retry..."
            )
            self.sleeper(policy.wait_seconds)
            attempt += 1
