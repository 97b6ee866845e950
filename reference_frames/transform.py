"""transform.py - Multi-Hop Transforms Between Reference Frames"""
from __future__ import annotations

import logging
import typing as typ

import numpy.typing as npt
import numpy as np

from reference_frames.frame import ReferenceFrame
from reference_frames.geometry import as_vector, as_quaternion
from reference_frames.hierarchy import hops
from reference_frames.kinematics import (
    shift_position, shift_velocity, shift_acceleration, shift_quaternion, shift_direction)

__all__ = ['transform_value', 'transform_position', 'transform_velocity',
           'transform_acceleration', 'transform_quaternion', 'transform_direction']

logger = logging.getLogger(__name__)

T = typ.TypeVar('T')
Step = typ.Callable[[T, ReferenceFrame, float, str], T]

def transform_value(value: T, frame1: ReferenceFrame, frame2: ReferenceFrame,
                    t: float, step: Step) -> T:
    """Transforms a value between two frames hop by hop: fully up from
    `frame1` to the common ancestor, then fully down to `frame2`

    :param value: Quantity expressed in `frame1`
    :type value: T

    :param frame1: Source frame
    :type frame1: ReferenceFrame

    :param frame2: Target frame
    :type frame2: ReferenceFrame

    :param t: Time
    :type t: float

    :param step: Single-hop transform :code:`step(value, frame, t, direction)`
    :type step: Callable

    :raises DisjointHierarchyError: If the frames share no common ancestor

    :return: Quantity expressed in `frame2`
    :rtype: T
    """
    plan = hops(frame1, frame2)
    logger.debug("Transforming with %s over %d hops", getattr(step, '__name__', step), len(plan))

    for frame, direction in plan:
        value = step(value, frame, t, direction)

    return value

def transform_position(pos: npt.ArrayLike, frame1: ReferenceFrame,
                       frame2: ReferenceFrame, t: float) -> np.ndarray:
    """Transforms a position vector from `frame1` to `frame2` at time `t`"""
    return transform_value(as_vector(pos), frame1, frame2, t, shift_position)

def transform_velocity(state: tuple[npt.ArrayLike, npt.ArrayLike], frame1: ReferenceFrame,
                       frame2: ReferenceFrame, t: float) -> tuple[np.ndarray, np.ndarray]:
    """Transforms a (position, velocity) pair from `frame1` to `frame2` at time `t`"""
    pos, vel = state
    return transform_value((as_vector(pos), as_vector(vel)), frame1, frame2, t, shift_velocity)

def transform_acceleration(state: tuple[npt.ArrayLike, npt.ArrayLike, npt.ArrayLike],
                           frame1: ReferenceFrame, frame2: ReferenceFrame,
                           t: float) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Transforms a (position, velocity, acceleration) triple from `frame1` to
    `frame2` at time `t`. The returned position and velocity are the ones used
    in the Coriolis and centripetal terms."""
    pos, vel, acc = state
    return transform_value((as_vector(pos), as_vector(vel), as_vector(acc)),
                           frame1, frame2, t, shift_acceleration)

def transform_quaternion(quat: npt.ArrayLike, frame1: ReferenceFrame,
                         frame2: ReferenceFrame, t: float) -> np.ndarray:
    """Transforms an orientation quaternion relative to `frame1` into one
    relative to `frame2` at time `t`"""
    return transform_value(as_quaternion(quat), frame1, frame2, t, shift_quaternion)

def transform_direction(vec: npt.ArrayLike, frame1: ReferenceFrame,
                        frame2: ReferenceFrame, t: float) -> np.ndarray:
    """Rotates a direction vector from `frame1` axes into `frame2` axes at time
    `t`; unlike :func:`transform_position`, no translation is applied"""
    return transform_value(as_vector(vec), frame1, frame2, t, shift_direction)
