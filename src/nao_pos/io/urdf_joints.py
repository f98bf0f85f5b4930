"""URDF reader for building joint sets.

This module extracts the actuated joints of a URDF file so that pos files
written for robots other than NAO can be parsed against the right joint
ordering.
"""

from lxml import etree

from nao_pos.core.joints import JointSet


def load_joint_set(urdf_path: str) -> JointSet:
    """Load the actuated joints of a URDF file as a JointSet.

    Args:
        urdf_path: Path to the URDF file to load.

    Returns:
        JointSet: Non-fixed joints in document order.
    """
    tree = etree.parse(str(urdf_path))
    root = tree.getroot()

    actuated_joint_names = []
    for joint in root.findall('.//joint'):
        joint_name = joint.get('name')
        joint_type = joint.get('type')

        if joint_name is None:
            raise ValueError(f"Joint without a name in {urdf_path}")
        if joint_type not in ['fixed']:
            actuated_joint_names.append(joint_name)

    if not actuated_joint_names:
        raise ValueError(f"No actuated joints found in {urdf_path}")

    return JointSet(tuple(actuated_joint_names))
