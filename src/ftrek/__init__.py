"""Directory tree printing utilities.

This package walks a directory and renders it as a Unicode box-drawing tree,
optionally honoring gitignore-style rules and coloring entries by kind.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("ftrek")
except PackageNotFoundError:
    __version__ = "unknown"
