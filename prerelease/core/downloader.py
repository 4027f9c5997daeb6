"""
Strict HTTP downloads for release assets and scripts.
"""

import logging
import shutil
import urllib.error
import urllib.request
from pathlib import Path
from typing import Optional

from .errors import DownloadFailed


class Downloader:
    """Fetches URLs to files, failing on any HTTP error or network error."""
    
    def __init__(self, timeout: Optional[float] = None, user_agent: str = "rhdh-prerelease"):
        """
        Initialize downloader.
        
        Args:
            timeout: Socket timeout in seconds, None to block indefinitely
            user_agent: User-Agent header sent with each request
        """
        self.logger = logging.getLogger(__name__)
        self.timeout = timeout
        self.user_agent = user_agent
    
    def fetch(self, url: str, destination: Path) -> Path:
        """
        Download url into destination.
        
        Args:
            url: Artifact URL (redirects are followed)
            destination: File to write
            
        Returns:
            The destination path
            
        Raises:
            DownloadFailed: on HTTP error status or network failure; no
                partial file is left behind
        """
        destination = Path(destination)
        request = urllib.request.Request(url)
        request.add_header("User-Agent", self.user_agent)
        
        self.logger.debug(f"GET {url} -> {destination}")
        try:
            if self.timeout is None:
                response = urllib.request.urlopen(request)
            else:
                response = urllib.request.urlopen(request, timeout=self.timeout)
            with response, open(destination, "wb") as out:
                shutil.copyfileobj(response, out)
        except urllib.error.HTTPError as e:
            destination.unlink(missing_ok=True)
            raise DownloadFailed(url, f"HTTP {e.code}") from e
        except (urllib.error.URLError, OSError) as e:
            destination.unlink(missing_ok=True)
            raise DownloadFailed(url, str(getattr(e, "reason", e))) from e
        
        return destination
