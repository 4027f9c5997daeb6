"""
Platform detection for picking prebuilt release assets.
"""

import platform
from dataclasses import dataclass
from typing import Optional

from .errors import UnsupportedArchitecture


ARCH_MAP = {
    "x86_64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
}


@dataclass(frozen=True)
class PlatformInfo:
    """Normalized os/arch pair as used in release asset names."""
    os: str
    arch: str


def normalize_os(system: str) -> str:
    return system.lower()


def normalize_arch(machine: str, tool_name: str = "tool") -> str:
    """
    Map a raw machine string to a release arch token.
    
    Raises:
        UnsupportedArchitecture: for anything other than x86_64/aarch64/arm64
    """
    arch = ARCH_MAP.get(machine)
    if arch is None:
        raise UnsupportedArchitecture(tool_name, machine)
    return arch


def detect_platform(system: Optional[str] = None,
                    machine: Optional[str] = None,
                    tool_name: str = "tool") -> PlatformInfo:
    """Detect the current platform, or normalize the given raw values."""
    system = system if system is not None else platform.system()
    machine = machine if machine is not None else platform.machine()
    return PlatformInfo(
        os=normalize_os(system),
        arch=normalize_arch(machine, tool_name)
    )
