"""
Tool provisioning: use an installed binary or fetch a prebuilt one.
"""

import logging
import platform
import shutil
import tempfile
from pathlib import Path
from typing import Callable, Optional, Tuple

from ..models.execution import ExecutionContext
from ..models.tool import ToolSpec, ProvisionResult
from .downloader import Downloader
from .errors import DownloadFailed
from .locator import ToolLocator, SystemToolLocator
from .platform import detect_platform


def _host_platform() -> Tuple[str, str]:
    return platform.system(), platform.machine()


class ToolProvisioner:
    """Makes tools available on an execution context's search path."""
    
    def __init__(self,
                 downloader: Downloader,
                 locator: Optional[ToolLocator] = None,
                 platform_probe: Callable[[], Tuple[str, str]] = _host_platform):
        """
        Initialize the provisioner.
        
        Args:
            downloader: Used to fetch prebuilt binaries
            locator: Resolves already installed tools
            platform_probe: Returns the raw (kernel name, machine) pair
        """
        self.logger = logging.getLogger(__name__)
        self.downloader = downloader
        self.locator = locator or SystemToolLocator()
        self.platform_probe = platform_probe
    
    def ensure_tool(self, spec: ToolSpec, context: ExecutionContext) -> ProvisionResult:
        """
        Ensure spec.name resolves on context.search_path.
        
        Args:
            spec: Tool to provision
            context: Execution context; its search path gains the download
                directory when a binary is fetched
            
        Returns:
            Where the tool lives and whether it was downloaded
            
        Raises:
            UnsupportedArchitecture: no prebuilt binary for this machine
            DownloadFailed: the release asset could not be fetched
        """
        existing = self.locator.locate(spec.name, context)
        if existing:
            self.logger.info(f"Using existing {spec.name}: {existing}")
            return ProvisionResult(name=spec.name, path=Path(existing))
        
        system, machine = self.platform_probe()
        host = detect_platform(system, machine, tool_name=spec.name)
        url = spec.resolve_url(host.os, host.arch)
        
        tmpdir = tempfile.mkdtemp(prefix=f"{spec.name}-")
        self.logger.info(f"Downloading {spec.name} {spec.version} prebuilt into {tmpdir}...")
        binary = Path(tmpdir) / spec.name
        try:
            self.downloader.fetch(url, binary)
        except DownloadFailed:
            shutil.rmtree(tmpdir, ignore_errors=True)
            raise
        
        binary.chmod(0o755)
        context.prepend_path(tmpdir)
        self.logger.info(f"{spec.name} is now available on PATH (from {tmpdir})")
        
        return ProvisionResult(name=spec.name, path=binary, downloaded=True)
