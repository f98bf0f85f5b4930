"""Pos file parser producing validated keyframe sequences.

A pos file is line oriented. Lines starting with ``$`` set stiffnesses for the
next pose, lines starting with ``!`` describe a pose (angles in degrees) and
its duration, and every other line is ignored.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from nao_pos.config import ParserConfig
from nao_pos.core.keyframe import KeyFrame, ParseResult, SparseJointVector
from nao_pos.errors import (
    InconsistentJointSetError,
    InvalidDurationError,
    InvalidPositionValueError,
    InvalidStiffnessValueError,
    MalformedLineError,
    PosParseError,
    StiffnessPositionMismatchError,
)

logger = logging.getLogger(__name__)


class LineKind(Enum):
    STIFFNESS = "stiffness"
    POSITION = "position"
    IGNORED = "ignored"


@dataclass
class ParseState:
    """Accumulator threaded through the handlers for a single parse call."""
    time: int = 0
    pending_stiffnesses: List[Tuple[int, float]] = field(default_factory=list)
    custom_stiffnesses: bool = False
    previous_position_indexes: Tuple[int, ...] = ()
    first_position_line: bool = True
    line_number: Optional[int] = None


def tokenize(line: str) -> List[str]:
    return line.split()


def classify(line: str, config: ParserConfig) -> LineKind:
    """Classify a raw line by its first character."""
    if line.startswith(config.stiffness_marker):
        return LineKind.STIFFNESS
    if line.startswith(config.position_marker):
        return LineKind.POSITION
    return LineKind.IGNORED


def _to_float(token: str) -> float:
    # float() also accepts "_" digit separators, which pos files never use
    if "_" in token:
        raise ValueError(f"invalid float literal: '{token}'")
    return float(token)


def _to_int(token: str) -> int:
    if "_" in token:
        raise ValueError(f"invalid int literal: '{token}'")
    return int(token)


def handle_stiffness_line(tokens: List[str], state: ParseState, config: ParserConfig) -> None:
    """Buffer the stiffnesses of a ``$`` line for the next position line.

    Args:
        tokens: Tokenized line, marker included.
        state: Parse state; its stiffness buffer is extended only when the
            whole line is valid.
        config: Parser configuration.

    Raises:
        MalformedLineError: If the token count is not N+1.
        InvalidStiffnessValueError: If a value is neither ``-`` nor a float.
    """
    if len(tokens) != config.stiffness_line_size:
        raise MalformedLineError(config.stiffness_line_size, len(tokens), state.line_number)

    stiffnesses: List[Tuple[int, float]] = []
    for joint_index, token in enumerate(tokens[1:config.num_joints + 1]):
        if token == config.skip_token:
            continue
        try:
            stiffness = _to_float(token)
        except ValueError:
            raise InvalidStiffnessValueError(token, joint_index, state.line_number)
        stiffnesses.append((joint_index, stiffness))

    state.pending_stiffnesses.extend(stiffnesses)
    state.custom_stiffnesses = True


def handle_position_line(tokens: List[str], state: ParseState, config: ParserConfig) -> KeyFrame:
    """Build the keyframe described by a ``!`` line.

    Angles are converted from degrees to radians. Without a preceding
    stiffness line every positioned joint gets the default stiffness.

    Args:
        tokens: Tokenized line, marker included.
        state: Parse state; updated in place on success, untouched when an
            error is raised.
        config: Parser configuration.

    Returns:
        KeyFrame stamped with the cumulative time at the end of this frame.

    Raises:
        MalformedLineError: If the token count is not N+2.
        InvalidPositionValueError: If an angle is neither ``-`` nor a float.
        InconsistentJointSetError: If the positioned joints differ from the
            previous position line.
        InvalidDurationError: If the duration is not a non-negative integer.
        StiffnessPositionMismatchError: If custom stiffnesses do not name
            exactly the positioned joints.
    """
    if len(tokens) != config.position_line_size:
        raise MalformedLineError(config.position_line_size, len(tokens), state.line_number)

    positions: List[Tuple[int, float]] = []
    if state.custom_stiffnesses:
        stiffnesses = list(state.pending_stiffnesses)
    else:
        stiffnesses = []

    for joint_index, token in enumerate(tokens[1:config.num_joints + 1]):
        if token == config.skip_token:
            continue
        try:
            degrees = _to_float(token)
        except ValueError:
            raise InvalidPositionValueError(token, joint_index, state.line_number)
        positions.append((joint_index, degrees * math.pi / 180))
        if not state.custom_stiffnesses:
            stiffnesses.append((joint_index, config.default_stiffness))

    position_indexes = tuple(index for index, _ in positions)
    if not state.first_position_line and position_indexes != state.previous_position_indexes:
        raise InconsistentJointSetError(
            state.previous_position_indexes, position_indexes, state.line_number
        )

    duration_token = tokens[-1]
    try:
        duration = _to_int(duration_token)
    except ValueError:
        raise InvalidDurationError(duration_token, state.line_number)
    if duration < 0:
        raise InvalidDurationError(duration_token, state.line_number)
    time = state.time + duration

    if state.custom_stiffnesses:
        stiffness_indexes = tuple(index for index, _ in stiffnesses)
        if stiffness_indexes != position_indexes:
            raise StiffnessPositionMismatchError(
                position_indexes, stiffness_indexes, state.line_number
            )

    keyframe = KeyFrame(
        time=time,
        positions=SparseJointVector.from_pairs(positions),
        stiffnesses=SparseJointVector.from_pairs(stiffnesses),
    )
    logger.info("jointPositions indexes: %s", list(keyframe.positions.indexes))
    logger.info("jointPositions size: %d", len(keyframe.positions))
    logger.info("jointStiffnesses indexes: %s", list(keyframe.stiffnesses.indexes))
    logger.info("jointStiffnesses size: %d", len(keyframe.stiffnesses))

    state.time = time
    state.previous_position_indexes = position_indexes
    state.pending_stiffnesses = []
    state.custom_stiffnesses = False
    state.first_position_line = False
    return keyframe


def parse(lines: Iterable[str], config: Optional[ParserConfig] = None) -> ParseResult:
    """Parse pos file lines into keyframes.

    Parsing stops at the first invalid line; the returned result then has
    ``successful`` set to False and carries the error.

    Args:
        lines: Lines of the pos file, in order.
        config: Parser configuration. Defaults to the NAO joint set.

    Returns:
        ParseResult with the keyframes in file order.
    """
    if config is None:
        config = ParserConfig()

    state = ParseState()
    keyframes: List[KeyFrame] = []

    try:
        for line_number, line in enumerate(lines, start=1):
            state.line_number = line_number
            kind = classify(line, config)

            if kind is LineKind.STIFFNESS:
                logger.debug("Stiffness: %s", line)
                handle_stiffness_line(tokenize(line), state, config)
            elif kind is LineKind.POSITION:
                logger.debug("Position: %s", line)
                keyframes.append(handle_position_line(tokenize(line), state, config))
            else:
                logger.debug("Ignoring: %s", line)
    except PosParseError as error:
        logger.error("%s", error)
        return ParseResult(successful=False, keyframes=tuple(keyframes), error=error)

    return ParseResult(successful=True, keyframes=tuple(keyframes))


def load_pos_file(path: Union[str, Path], config: Optional[ParserConfig] = None) -> ParseResult:
    """Read a pos file from disk and parse it.

    Args:
        path: Path to the pos file.
        config: Parser configuration. Defaults to the NAO joint set.

    Returns:
        ParseResult with the keyframes in file order.
    """
    text = Path(path).read_text(encoding="utf-8")
    # Only "\n" ends a line; other separators are whitespace to the tokenizer
    lines = [line.rstrip("\r") for line in text.split("\n")]
    return parse(lines, config)
