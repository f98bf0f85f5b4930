"""
NAO Pos: keyframe parsing for NAO robot motion ("pos") files.

This library turns the line-oriented pos format into validated, immutable
keyframes whose joint targets and stiffnesses are stored in JAX arrays.
"""

import jax
jax.config.update("jax_enable_x64", True)

# Import core modules
from . import core
from . import io
from .config import ParserConfig
from .errors import PosParseError

__version__ = "0.1.0"
__all__ = ["core", "io", "ParserConfig", "PosParseError"]
