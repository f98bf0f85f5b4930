"""Core data structures for NAO Pos.

This module provides the joint enumeration and the immutable keyframe
structures produced by the pos file parser.
"""

from .joints import JointSet, NAO_JOINTS
from .keyframe import KeyFrame, ParseResult, SparseJointVector

__all__ = ["JointSet", "NAO_JOINTS", "KeyFrame", "ParseResult", "SparseJointVector"]
