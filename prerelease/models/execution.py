"""
Execution context, retry policy and command result models.
"""

import os
from typing import Dict, List, Optional, Mapping
from pydantic import BaseModel, Field


class ExecutionContext(BaseModel):
    """
    Environment threaded through provisioning and orchestration.
    
    Holds the search path and the variables later steps must see, instead of
    mutating os.environ in place.
    """
    search_path: List[str] = Field(default_factory=list, description="Ordered PATH entries")
    variables: Dict[str, str] = Field(default_factory=dict, description="Variables exported to child steps")
    inherited: Dict[str, str] = Field(default_factory=dict, description="Base environment for child processes")
    
    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "ExecutionContext":
        """Snapshot a process environment."""
        env = dict(os.environ if environ is None else environ)
        path = env.pop("PATH", "")
        return cls(
            search_path=[p for p in path.split(os.pathsep) if p],
            inherited=env
        )
    
    @property
    def path_string(self) -> str:
        return os.pathsep.join(self.search_path)
    
    def prepend_path(self, directory: str) -> None:
        """Put a directory first on the search path."""
        self.search_path.insert(0, str(directory))
    
    def set_variable(self, name: str, value: str) -> None:
        self.variables[name] = value
    
    def to_environ(self) -> Dict[str, str]:
        """Render the environment for a child process."""
        env = dict(self.inherited)
        env.update(self.variables)
        env["PATH"] = self.path_string
        return env


class RetryPolicy(BaseModel):
    """Bounded retry with a fixed wait between attempts."""
    max_attempts: int = Field(default=3, ge=1, description="Total attempts including the first")
    wait_seconds: int = Field(default=120, ge=0, description="Delay between attempts")


class CommandResult(BaseModel):
    """Result of running an external command."""
    command: List[str] = Field(..., description="Command line that was run")
    returncode: int = Field(..., description="Process exit code")
    stdout: Optional[str] = Field(None, description="Captured stdout, if captured")
    stderr: Optional[str] = Field(None, description="Captured stderr, if captured")
    
    @property
    def succeeded(self) -> bool:
        return self.returncode == 0
