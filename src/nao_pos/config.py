# src/nao_pos/config.py

import os
from dataclasses import dataclass, field

from nao_pos.core.joints import JointSet, NAO_JOINTS


def _default_stiffness_from_env() -> float:
    return float(os.getenv("NAO_POS_DEFAULT_STIFFNESS", "1.0"))


@dataclass(frozen=True)
class ParserConfig:
    """Pos file parser configuration.

    Values can be overridden via environment variables:
    - NAO_POS_DEFAULT_STIFFNESS
    """

    joint_set: JointSet = NAO_JOINTS
    # Applied to every positioned joint when no stiffness line precedes a frame
    default_stiffness: float = field(default_factory=_default_stiffness_from_env)
    stiffness_marker: str = "$"
    position_marker: str = "!"
    skip_token: str = "-"

    @property
    def num_joints(self) -> int:
        return len(self.joint_set)

    @property
    def stiffness_line_size(self) -> int:
        # marker + one value per joint
        return self.num_joints + 1

    @property
    def position_line_size(self) -> int:
        # marker + one value per joint + duration
        return self.num_joints + 2
