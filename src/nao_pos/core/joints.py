"""Joint enumeration shared by the parser and its consumers."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class JointSet:
    """Fixed, ordered set of joint names.

    A joint's identity is its integer position in ``names``.
    """
    names: Tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "names", tuple(self.names))
        if len(set(self.names)) != len(self.names):
            raise ValueError(f"Duplicate joint names in joint set: {self.names}")

    def __len__(self) -> int:
        return len(self.names)

    def index(self, name: str) -> int:
        try:
            return self.names.index(name)
        except ValueError:
            raise ValueError(f"Joint '{name}' not found in joint set")

    def name(self, index: int) -> str:
        if not 0 <= index < len(self.names):
            raise IndexError(f"Joint index {index} out of range for {len(self.names)} joints")
        return self.names[index]


# Ordering of the NAO low-level joint command interface
NAO_JOINTS = JointSet((
    "HeadYaw",
    "HeadPitch",
    "LShoulderPitch",
    "LShoulderRoll",
    "LElbowYaw",
    "LElbowRoll",
    "LWristYaw",
    "LHipYawPitch",
    "LHipRoll",
    "LHipPitch",
    "LKneePitch",
    "LAnklePitch",
    "LAnkleRoll",
    "RHipRoll",
    "RHipPitch",
    "RKneePitch",
    "RAnklePitch",
    "RAnkleRoll",
    "RShoulderPitch",
    "RShoulderRoll",
    "RElbowYaw",
    "RElbowRoll",
    "RWristYaw",
    "LHand",
    "RHand",
))
