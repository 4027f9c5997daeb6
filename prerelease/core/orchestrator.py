"""
Orchestrates RHDH catalog source setup for pre-release testing.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Any

from config.settings import Settings
from ..integrations.subscription import SubscriptionConfigurator
from ..models.execution import ExecutionContext
from .downloader import Downloader
from .provisioner import ToolProvisioner
from .retry import RetryingInvoker


class PreReleaseOrchestrator:
    """Provisions helper tools, installs the catalog source and updates the subscription."""
    
    def __init__(self,
                 settings: Settings,
                 context: ExecutionContext,
                 provisioner: ToolProvisioner,
                 downloader: Downloader,
                 invoker: RetryingInvoker,
                 configurator: SubscriptionConfigurator):
        """
        Initialize the orchestrator.
        
        Args:
            settings: Tool pins, installer and subscription settings
            context: Execution context shared by every step
            provisioner: Makes umoci and opm available
            downloader: Fetches the installer script
            invoker: Runs the installer with retries
            configurator: Applies the subscription values
        """
        self.logger = logging.getLogger(__name__)
        self.settings = settings
        self.context = context
        self.provisioner = provisioner
        self.downloader = downloader
        self.invoker = invoker
        self.configurator = configurator
    
    def run(self) -> Dict[str, Any]:
        """
        Run every step in order, stopping at the first failure.
        
        Returns:
            Summary of the run
        """
        start_time = datetime.now(timezone.utc)
        self.logger.info("Configuring RHDH (Red Hat Developer Hub) Operator for pre-release testing")
        self.configurator.validate()
        
        tools = {}
        for spec in (self.settings.umoci, self.settings.opm):
            result = self.provisioner.ensure_tool(spec, self.context)
            tools[result.name] = str(result.path)
        
        script = self._fetch_installer()
        
        installer = self.settings.installer
        self.logger.info(f"Running RHDH install script with {' '.join(installer.args)}...")
        attempts = self.invoker.run_with_retry(
            [str(script), *installer.args],
            installer.retry,
            self.context,
            cwd=installer.work_dir
        )
        
        variables = self.settings.subscription.as_variables()
        for name, value in variables.items():
            self.context.set_variable(name, value)
        self.configurator.configure(self.context)
        
        summary = {
            "tools": tools,
            "installer_attempts": attempts,
            "subscription": variables,
            "duration_seconds": (datetime.now(timezone.utc) - start_time).total_seconds()
        }
        self.logger.debug(f"Run summary: {summary}")
        return summary
    
    def _fetch_installer(self) -> Path:
        """Download the installer script into the work directory."""
        installer = self.settings.installer
        installer.work_dir.mkdir(parents=True, exist_ok=True)
        script = installer.work_dir.resolve() / installer.script_name
        
        self.logger.info("Downloading RHDH install script...")
        self.downloader.fetch(installer.script_url, script)
        script.chmod(0o755)
        return script
