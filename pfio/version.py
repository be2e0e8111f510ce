"""Central version declaration for playlist-file-io.

Update this file when cutting a new release tag. Keep semantic versioning.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
