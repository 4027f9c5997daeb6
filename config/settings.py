"""
Configuration settings for the RHDH pre-release configurator.
"""

from typing import Optional, List
from pathlib import Path
from pydantic import BaseModel, Field, validator
from pydantic_settings import BaseSettings

from prerelease.models.execution import RetryPolicy
from prerelease.models.tool import ToolSpec


RHDH_INSTALL_SCRIPT = (
    "https://raw.githubusercontent.com/redhat-developer/rhdh-operator/main/"
    ".rhdh/scripts/install-rhdh-catalog-source.sh"
)


def default_umoci() -> ToolSpec:
    return ToolSpec(
        name="umoci",
        version="0.6.0",
        url_template="https://github.com/opencontainers/umoci/releases/download/v{version}/umoci.{os}.{arch}"
    )


def default_opm() -> ToolSpec:
    return ToolSpec(
        name="opm",
        version="1.63.0",
        url_template=(
            "https://github.com/operator-framework/operator-registry/releases/download/"
            "v{version}/{os}-{arch}-opm"
        )
    )


class InstallerConfig(BaseModel):
    """Catalog source installer script configuration."""
    script_url: str = Field(default=RHDH_INSTALL_SCRIPT, description="Installer script URL")
    args: List[str] = Field(default_factory=lambda: ["--latest"], description="Installer arguments")
    retry: RetryPolicy = Field(
        default_factory=lambda: RetryPolicy(max_attempts=3, wait_seconds=120),
        description="Retry policy for transient installer failures"
    )
    work_dir: Path = Field(default=Path("."), description="Directory the script is downloaded to and run from")
    download_timeout: Optional[float] = Field(None, description="HTTP timeout in seconds, none by default")

    @property
    def script_name(self) -> str:
        return self.script_url.rstrip("/").rsplit("/", 1)[-1]


class SubscriptionConfig(BaseModel):
    """OLM subscription values for RHDH."""
    name: str = Field(default="developerHub", description="Subscription name (SUBSCRIPTION)")
    channel: str = Field(default="fast-1.9", description="Subscription channel (CHANNEL)")
    source: str = Field(default="rhdh-fast", description="Catalog source (SOURCE)")
    common_script: Path = Field(
        default=Path("hack/pre-release/pre-release-common.sh"),
        description="Shell library defining configure_subscription"
    )

    def as_variables(self) -> dict:
        return {
            "SUBSCRIPTION": self.name,
            "CHANNEL": self.channel,
            "SOURCE": self.source
        }


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field(default="INFO", description="Logging level")
    format: str = Field(default="[%(levelname)s] %(message)s", description="Console log format")
    file_path: Optional[Path] = Field(default=None, description="Optional rotating log file")

    @validator('level')
    def validate_level(cls, v):
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(f"Invalid logging level: {v}")
        return v


class Settings(BaseSettings):
    """Main application settings."""
    umoci: ToolSpec = Field(default_factory=default_umoci)
    opm: ToolSpec = Field(default_factory=default_opm)
    installer: InstallerConfig = Field(default_factory=InstallerConfig)
    subscription: SubscriptionConfig = Field(default_factory=SubscriptionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    class Config:
        env_prefix = "PRERELEASE_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_nested_delimiter = "__"
        extra = "ignore"  # Ignore extra fields from environment
