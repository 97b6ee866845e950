r"""kinematics.py - Single-Hop Kinematic Transforms

Each step moves a quantity across one edge of the frame tree. Ascending takes a
quantity from a frame's coordinates into its parent's; descending is the exact
inverse. With the frame origin :math:`r_0, v_0, a_0`, rotation :math:`R(q)`,
angular velocity :math:`\omega` and angular acceleration :math:`\alpha` (all in
parent coordinates), the ascending transport equations are

.. math::

    p' &= r_0 + R p \\
    v' &= v_0 + R v + \omega \times R p \\
    a' &= a_0 + R a + 2 \omega \times R v + \omega \times (\omega \times R p)
          + \alpha \times R p
"""
from __future__ import annotations

import numpy as np

from reference_frames.frame import ReferenceFrame
from reference_frames.geometry import (
    as_vector, as_quaternion, cross, hamilton_product, quaternion_conjugate, rotate)
from reference_frames.hierarchy import ASCEND, DESCEND

__all__ = ['shift_position', 'shift_velocity', 'shift_acceleration',
           'shift_quaternion', 'shift_direction']

Vector = np.ndarray

def _ascending(direction: str) -> bool:
    """Parses transform direction

    :raises ValueError: If `direction` is not recognized
    """
    if direction in ['a', 'up', ASCEND]:
        return True
    elif direction in ['d', 'down', DESCEND]:
        return False
    else:
        raise ValueError('Transform direction argument not valid')

def _relative(pos: Vector, vel: Vector, frame: ReferenceFrame, t: float) -> tuple[Vector, Vector]:
    """Position and velocity relative to the frame origin, in parent axes"""
    pos_rel = pos - frame.position(t)
    vel_rel = vel - frame.velocity(t) - cross(frame.omega(t), pos_rel)
    return pos_rel, vel_rel

# %% Translational
def shift_position(pos: Vector, frame: ReferenceFrame, t: float, direction: str) -> Vector:
    """Transforms a position vector across one frame hop

    :param pos: Position vector
    :type pos: numpy.ndarray

    :param frame: Frame on the hop
    :type frame: ReferenceFrame

    :param t: Time
    :type t: float

    :param direction: 'ascend' into the parent or 'descend' out of it
    :type direction: str

    :return: Position vector in new frame
    :rtype: numpy.ndarray
    """
    pos = as_vector(pos)
    if _ascending(direction):
        return frame.position(t) + rotate(frame.quaternion(t), pos)

    return rotate(frame.quaternion(t), pos - frame.position(t), inverse=True)

def shift_velocity(state: tuple[Vector, Vector], frame: ReferenceFrame,
                   t: float, direction: str) -> tuple[Vector, Vector]:
    """Transforms a velocity vector across one frame hop. Requires position,
    which is transformed alongside.

    :param state: Position and velocity vectors
    :type state: tuple[numpy.ndarray, numpy.ndarray]

    :return: Position and velocity vectors in new frame
    :rtype: tuple[numpy.ndarray, numpy.ndarray]
    """
    pos, vel = map(as_vector, state)
    q = frame.quaternion(t)
    pos_new = shift_position(pos, frame, t, direction)

    if _ascending(direction):
        vel_new = frame.velocity(t) + rotate(q, vel) + cross(frame.omega(t), rotate(q, pos))
    else:
        _, vel_rel = _relative(pos, vel, frame, t)
        vel_new = rotate(q, vel_rel, inverse=True)

    return pos_new, vel_new

def shift_acceleration(state: tuple[Vector, Vector, Vector], frame: ReferenceFrame,
                       t: float, direction: str) -> tuple[Vector, Vector, Vector]:
    """Transforms an acceleration vector across one frame hop. Requires
    position and velocity, which are transformed alongside by
    :func:`shift_velocity`.

    :param state: Position, velocity, and acceleration vectors
    :type state: tuple[numpy.ndarray, numpy.ndarray, numpy.ndarray]

    :return: Position, velocity, and acceleration vectors in new frame
    :rtype: tuple[numpy.ndarray, numpy.ndarray, numpy.ndarray]
    """
    pos, vel, acc = map(as_vector, state)
    q = frame.quaternion(t)
    omega = frame.omega(t)
    alpha = frame.alpha(t)
    pos_new, vel_new = shift_velocity((pos, vel), frame, t, direction)

    if _ascending(direction):
        pos_r = rotate(q, pos)
        vel_r = rotate(q, vel)
        acc_new = frame.acceleration(t) + rotate(q, acc) + 2*cross(omega, vel_r) \
            + cross(omega, cross(omega, pos_r)) + cross(alpha, pos_r)
    else:
        # Coriolis, centripetal, and Euler terms in parent axes, then rotate
        pos_rel, vel_rel = _relative(pos, vel, frame, t)
        acc_rel = acc - frame.acceleration(t) - 2*cross(omega, vel_rel) \
            - cross(omega, cross(omega, pos_rel)) - cross(alpha, pos_rel)
        acc_new = rotate(q, acc_rel, inverse=True)

    return pos_new, vel_new, acc_new

# %% Rotational
def shift_quaternion(quat: np.ndarray, frame: ReferenceFrame, t: float, direction: str) -> np.ndarray:
    """Transforms an orientation quaternion across one frame hop

    :param quat: Orientation quaternion :math:`[w, x, y, z]`
    :type quat: numpy.ndarray

    :return: Orientation quaternion relative to new frame
    :rtype: numpy.ndarray
    """
    quat = as_quaternion(quat)
    q = frame.quaternion(t)
    if _ascending(direction):
        return hamilton_product(q, quat)

    return hamilton_product(quaternion_conjugate(q), quat)

def shift_direction(vec: Vector, frame: ReferenceFrame, t: float, direction: str) -> Vector:
    """Transforms a direction vector across one frame hop. Rotates without
    translating by conjugating the pure quaternion :math:`(0, v)`, so the
    result equals :math:`R(q) v` ascending and :math:`R(q)^{-1} v` descending.

    :param vec: Direction vector
    :type vec: numpy.ndarray

    :return: Direction vector in new frame
    :rtype: numpy.ndarray
    """
    pure = np.concatenate(([0.], as_vector(vec)))
    q = frame.quaternion(t)
    right = quaternion_conjugate(q) if _ascending(direction) else q
    return hamilton_product(shift_quaternion(pure, frame, t, direction), right)[1:]
