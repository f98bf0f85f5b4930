"""I/O utilities for loading motions and joint sets from files.

This module provides the pos file parser and a URDF reader for building
joint sets of robots other than NAO.
"""

from .pos_parser import load_pos_file, parse
from .urdf_joints import load_joint_set

__all__ = ["load_pos_file", "parse", "load_joint_set"]
