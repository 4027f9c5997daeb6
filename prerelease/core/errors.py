"""
Error types raised by the pre-release configurator.
"""

from typing import Optional


class PrereleaseError(Exception):
    """Base class for failures that abort a run."""
    pass


class UsageError(PrereleaseError):
    """Bad or unknown command line argument."""
    pass


class UnsupportedArchitecture(PrereleaseError):
    """No prebuilt binary exists for this machine architecture."""
    
    def __init__(self, tool_name: str, machine: str):
        self.tool_name = tool_name
        self.machine = machine
        super().__init__(
            f"Unsupported architecture for {tool_name} prebuilt: {machine} "
            f"(only amd64 and arm64 are supported)"
        )


class DownloadFailed(PrereleaseError):
    """HTTP or network failure while fetching an artifact."""
    
    def __init__(self, url: str, reason: Optional[str] = None):
        self.url = url
        self.reason = reason
        message = f"Failed to download {url}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InstallerFailed(PrereleaseError):
    """Installer script still failing after every allowed attempt."""
    
    def __init__(self, attempts: int, description: str = "Install script"):
        self.attempts = attempts
        super().__init__(
            f"{description} failed after {attempts} attempts "
            f"(e.g. registry 500). Try again later."
        )


class SubscriptionConfigError(PrereleaseError):
    """The subscription configuration step could not be completed."""
    pass
