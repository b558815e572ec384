"""Version file - managed by setuptools-scm.

This file serves as a placeholder for development and is overwritten during builds.
The values below match fallback_version in pyproject.toml.
"""

from typing import Tuple

__version__ = "0.0.0+unknown"
__version_tuple__: Tuple[int, int, int] = (0, 0, 0)
