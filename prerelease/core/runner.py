"""
External command execution.
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from ..models.execution import CommandResult, ExecutionContext


class CommandRunner:
    """Runs external commands and reports a structured result."""
    
    def run(self,
            command: List[str],
            context: ExecutionContext,
            cwd: Optional[Path] = None,
            capture: bool = False) -> CommandResult:
        raise NotImplementedError


class SubprocessRunner(CommandRunner):
    """Runs commands with subprocess using the context environment."""
    
    def __init__(self):
        self.logger = logging.getLogger(__name__)
    
    def run(self,
            command: List[str],
            context: ExecutionContext,
            cwd: Optional[Path] = None,
            capture: bool = False) -> CommandResult:
        """
        Run a command to completion.
        
        Args:
            command: Argument vector
            context: Supplies the child environment
            cwd: Working directory for the child
            capture: Capture stdout/stderr instead of streaming them
            
        Returns:
            Command result; spawn failures are reported as exit code 127
        """
        self.logger.debug(f"Running: {' '.join(command)} (cwd={cwd or '.'})")
        try:
            result = subprocess.run(
                command,
                cwd=str(cwd) if cwd else None,
                env=context.to_environ(),
                capture_output=capture,
                text=True
            )
        except OSError as e:
            self.logger.debug(f"Failed to start {command[0]}: {e}")
            return CommandResult(command=command, returncode=127, stderr=str(e))
        
        return CommandResult(
            command=command,
            returncode=result.returncode,
            stdout=result.stdout if capture else None,
            stderr=result.stderr if capture else None
        )
