"""Top-level package for mira-site.

Release downloads and roadmap presentation for the Mira browser.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("mira-site")
    # Handle None return in Python 3.13+ for uninstalled packages
    if __version__ is None:
        __version__ = "dev"
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
