"""
Executable lookup against an execution context's search path.
"""

import logging
import shutil
from typing import Dict, Optional

from ..models.execution import ExecutionContext


class ToolLocator:
    """Resolves executable names to paths."""
    
    def locate(self, name: str, context: ExecutionContext) -> Optional[str]:
        raise NotImplementedError


class SystemToolLocator(ToolLocator):
    """Looks executables up on the context's search path."""
    
    def __init__(self):
        self.logger = logging.getLogger(__name__)
    
    def locate(self, name: str, context: ExecutionContext) -> Optional[str]:
        found = shutil.which(name, path=context.path_string)
        self.logger.debug(f"Lookup {name} -> {found}")
        return found


class StaticToolLocator(ToolLocator):
    """Locator backed by a fixed name-to-path map, for tests and dry runs."""
    
    def __init__(self, known: Optional[Dict[str, str]] = None):
        self.known = dict(known or {})
        self.lookups = []
    
    def locate(self, name: str, context: ExecutionContext) -> Optional[str]:
        self.lookups.append(name)
        return self.known.get(name)
