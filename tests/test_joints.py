"""Tests for joint sets and URDF joint loading."""

from pathlib import Path

import pytest

from nao_pos.core import JointSet, NAO_JOINTS
from nao_pos.io import load_joint_set


def test_nao_joint_set():
    """Test the default NAO joint ordering."""
    assert len(NAO_JOINTS) == 25
    assert NAO_JOINTS.name(0) == "HeadYaw"
    assert NAO_JOINTS.index("LHipYawPitch") == 7
    assert NAO_JOINTS.index("RShoulderPitch") == 18
    assert NAO_JOINTS.name(24) == "RHand"


def test_joint_set_lookup_errors():
    joints = JointSet(("a", "b"))
    with pytest.raises(ValueError):
        joints.index("c")
    with pytest.raises(IndexError):
        joints.name(2)
    with pytest.raises(IndexError):
        joints.name(-1)


def test_joint_set_rejects_duplicates():
    with pytest.raises(ValueError):
        JointSet(("a", "b", "a"))


def test_joint_set_accepts_list():
    joints = JointSet(["a", "b"])
    assert joints.names == ("a", "b")
    assert hash(joints) == hash(JointSet(("a", "b")))


def test_load_joint_set_from_urdf():
    """Test that only actuated joints are collected, in document order."""
    urdf_path = Path(__file__).parent / "fixtures" / "three_joint_arm.urdf"
    joints = load_joint_set(str(urdf_path))

    assert isinstance(joints, JointSet)
    assert joints.names == ("shoulder", "elbow", "wrist")
    assert "tool_mount" not in joints.names


def test_load_joint_set_without_actuated_joints(tmp_path):
    urdf_path = tmp_path / "fixed_only.urdf"
    urdf_path.write_text(
        '<robot name="r"><link name="a"/><link name="b"/>'
        '<joint name="j" type="fixed"><parent link="a"/><child link="b"/></joint>'
        '</robot>'
    )
    with pytest.raises(ValueError):
        load_joint_set(str(urdf_path))
