"""
Tool-related data models.
"""

from pathlib import Path
from pydantic import BaseModel, Field


class ToolSpec(BaseModel):
    """Specification for a prebuilt tool that can be provisioned."""
    name: str = Field(..., description="Executable name")
    version: str = Field(..., description="Pinned release version")
    url_template: str = Field(
        ...,
        description="Release asset URL with {version}, {os} and {arch} placeholders"
    )
    
    class Config:
        json_schema_extra = {
            "example": {
                "name": "umoci",
                "version": "0.6.0",
                "url_template": (
                    "https://github.com/opencontainers/umoci/releases/download/"
                    "v{version}/umoci.{os}.{arch}"
                )
            }
        }
    
    def resolve_url(self, os_name: str, arch: str) -> str:
        """Build the download URL for a normalized os/arch pair."""
        return self.url_template.format(version=self.version, os=os_name, arch=arch)


class ProvisionResult(BaseModel):
    """Outcome of making a tool available."""
    name: str = Field(..., description="Tool name")
    path: Path = Field(..., description="Resolved executable path")
    downloaded: bool = Field(default=False, description="True if a prebuilt binary was fetched")
