"""Error kinds raised while parsing pos files."""

from typing import Optional, Sequence


class PosParseError(ValueError):
    """Base class for every pos file parse failure."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        super().__init__(message)

    def __str__(self):
        message = super().__str__()
        if self.line_number is None:
            return message
        return f"line {self.line_number}: {message}"


class MalformedLineError(PosParseError):
    def __init__(self, expected: int, actual: int, line_number: Optional[int] = None):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"pos file line has {actual} elements, but expected {expected}", line_number
        )


class InvalidStiffnessValueError(PosParseError):
    def __init__(self, token: str, joint_index: int, line_number: Optional[int] = None):
        self.token = token
        self.joint_index = joint_index
        super().__init__(
            f"stiffness value '{token}' for joint {joint_index} is not a valid "
            f"stiffness value (cannot be converted to float)",
            line_number,
        )


class InvalidPositionValueError(PosParseError):
    def __init__(self, token: str, joint_index: int, line_number: Optional[int] = None):
        self.token = token
        self.joint_index = joint_index
        super().__init__(
            f"joint value '{token}' for joint {joint_index} is not a valid "
            f"joint value (cannot be converted to float)",
            line_number,
        )


class InvalidDurationError(PosParseError):
    def __init__(self, token: str, line_number: Optional[int] = None):
        self.token = token
        super().__init__(
            f"duration '{token}' is not a valid duration value "
            f"(must be a non-negative integer)",
            line_number,
        )


class InconsistentJointSetError(PosParseError):
    """Position line names a different joint set than the previous one."""

    def __init__(
        self,
        expected: Sequence[int],
        actual: Sequence[int],
        line_number: Optional[int] = None,
    ):
        self.expected = tuple(expected)
        self.actual = tuple(actual)
        super().__init__(
            f"joint positions {list(self.actual)} differ from the previous "
            f"position line {list(self.expected)}",
            line_number,
        )


class StiffnessPositionMismatchError(PosParseError):
    """Custom stiffnesses do not cover exactly the positioned joints."""

    def __init__(
        self,
        position_indexes: Sequence[int],
        stiffness_indexes: Sequence[int],
        line_number: Optional[int] = None,
    ):
        self.position_indexes = tuple(position_indexes)
        self.stiffness_indexes = tuple(stiffness_indexes)
        super().__init__(
            f"joint stiffness indexes {list(self.stiffness_indexes)} do not match "
            f"joint position indexes {list(self.position_indexes)}",
            line_number,
        )
