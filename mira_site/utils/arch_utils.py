"""Architecture utilities for host platform detection.

This module provides utilities for:
- Detecting the host CPU architecture
- Mapping the host operating system to a download platform tag
"""

import platform

from mira_site.logger import get_logger

logger = get_logger(__name__)


def get_current_arch() -> str:
    """Get current system CPU architecture.

    Detects and normalizes the current system's CPU architecture name.

    Returns:
        str: Normalized CPU architecture identifier (e.g., "x86_64", "arm64")

    Example:
        >>> get_current_arch()
        'x86_64'
    """
    machine = platform.machine().lower()

    # Map common architecture names to standardized ones
    arch_map = {
        "x86_64": "x86_64",
        "amd64": "x86_64",
        "arm64": "arm64",
        "aarch64": "arm64",
    }

    return arch_map.get(machine, machine)


def detect_host_platform() -> str:
    """Map the running system to a download platform tag.

    Returns:
        str: One of "windows", "mac-arm64", "mac-x64", "linux" or "other"

    """
    system = platform.system().lower()

    if system == "windows":
        host = "windows"
    elif system == "darwin":
        host = "mac-arm64" if get_current_arch() == "arm64" else "mac-x64"
    elif system == "linux":
        host = "linux"
    else:
        host = "other"

    logger.debug("Detected host platform %s (system=%s)", host, system)
    return host
