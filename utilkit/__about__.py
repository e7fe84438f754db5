"""Package version and metadata.

This module centralizes the package version and other lightweight metadata.
"""

__all__ = ["__title__", "__version__"]

#: Distribution and console-script name.
__title__ = "utilkit"

#: Semantic version of the package.
__version__ = "0.1.0"
