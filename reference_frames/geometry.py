r"""geometry.py - Vector and Quaternion Utility Functions

Quaternions are stored as scalar-first :code:`numpy` arrays :math:`[w, x, y, z]`.
A unit quaternion :math:`q` rotates a vector :math:`v` actively through
:math:`q \otimes (0, v) \otimes q^*`.
"""
from __future__ import annotations

import numpy.typing as npt

import numpy as np

import scipy.spatial.transform as sptl

from reference_frames.utilities import sequence_to_index

__all__ = ['IDENTITY_QUATERNION',                           # constants
           'as_vector', 'as_quaternion',                    # conversions
           'hamilton_product', 'quaternion_conjugate',
           'quaternion_inverse',                            # quaternion algebra
           'rotate', 'cross',                               # vector operations
           'axis_angle_quaternion', 'rotation_vector_quaternion',
           'euler_quaternion']                              # constructors

IDENTITY_QUATERNION = np.array([1., 0., 0., 0.])
IDENTITY_QUATERNION.setflags(write=False)

# %% Conversions
def as_vector(value: npt.ArrayLike) -> np.ndarray:
    """Converts input to a 3-vector with double datatype

    :param value: Vector-like input
    :type value: numpy.typing.ArrayLike

    :raises ValueError: If `value` does not have shape :math:`(3,)`

    :return: Vector
    :rtype: numpy.ndarray
    """
    vector = np.array(value, dtype=np.double)
    if vector.shape != (3,):
        raise ValueError(f"Expected a 3-vector, received shape {vector.shape}")

    return vector

def as_quaternion(value: npt.ArrayLike) -> np.ndarray:
    """Converts input to a scalar-first quaternion with double datatype

    :param value: Quaternion-like input :math:`[w, x, y, z]`
    :type value: numpy.typing.ArrayLike

    :raises ValueError: If `value` does not have shape :math:`(4,)`

    :return: Quaternion
    :rtype: numpy.ndarray
    """
    quaternion = np.array(value, dtype=np.double)
    if quaternion.shape != (4,):
        raise ValueError(f"Expected a quaternion, received shape {quaternion.shape}")

    return quaternion

def _to_rotation(q: np.ndarray) -> sptl.Rotation:
    """Wraps a scalar-first quaternion in a scipy rotation (scalar-last)"""
    return sptl.Rotation.from_quat(np.roll(q, -1))

def _from_rotation(rotation: sptl.Rotation) -> np.ndarray:
    """Unwraps a scipy rotation into a scalar-first quaternion"""
    return np.roll(rotation.as_quat(), 1)

# %% Quaternion Algebra
def hamilton_product(q1: npt.ArrayLike, q2: npt.ArrayLike) -> np.ndarray:
    r"""Quaternion product :math:`q_1 \otimes q_2`

    Operands need not be unit quaternions, so pure quaternions
    :math:`(0, v)` may be composed as well.

    :param q1: Left quaternion
    :type q1: numpy.typing.ArrayLike

    :param q2: Right quaternion
    :type q2: numpy.typing.ArrayLike

    :return: Hamilton product
    :rtype: numpy.ndarray
    """
    w1, x1, y1, z1 = q1
    w2, x2, y2, z2 = q2
    return np.array([w1*w2 - x1*x2 - y1*y2 - z1*z2,
                     w1*x2 + x1*w2 + y1*z2 - z1*y2,
                     w1*y2 - x1*z2 + y1*w2 + z1*x2,
                     w1*z2 + x1*y2 - y1*x2 + z1*w2], dtype=np.double)

def quaternion_conjugate(q: npt.ArrayLike) -> np.ndarray:
    """Quaternion conjugate :math:`(w, -x, -y, -z)`"""
    q = np.asarray(q, dtype=np.double)
    return np.array([q[0], -q[1], -q[2], -q[3]])

def quaternion_inverse(q: npt.ArrayLike) -> np.ndarray:
    """Quaternion inverse, equal to the conjugate for unit quaternions

    :param q: Nonzero quaternion
    :type q: numpy.typing.ArrayLike

    :return: Inverse quaternion
    :rtype: numpy.ndarray
    """
    q = np.asarray(q, dtype=np.double)
    return quaternion_conjugate(q) / np.dot(q, q)

# %% Vector Operations
def rotate(q: npt.ArrayLike, vector: npt.ArrayLike, inverse: bool = False) -> np.ndarray:
    """Rotates a vector by a unit quaternion

    :param q: Unit quaternion :math:`[w, x, y, z]`
    :type q: numpy.typing.ArrayLike

    :param vector: Vector to rotate
    :type vector: numpy.typing.ArrayLike

    :param inverse: Apply the inverse rotation, defaults to False
    :type inverse: bool, optional

    :return: Rotated vector
    :rtype: numpy.ndarray
    """
    return _to_rotation(np.asarray(q, dtype=np.double)).apply(vector, inverse=inverse)

def cross(a: npt.ArrayLike, b: npt.ArrayLike) -> np.ndarray:
    """3-vector cross product :math:`a \\times b`"""
    return np.cross(a, b)

# %% Constructors
def axis_angle_quaternion(axis: npt.ArrayLike, angle: float, degrees: bool = False) -> np.ndarray:
    """Unit quaternion for a rotation about an axis

    :param axis: Rotation axis, normalized internally
    :type axis: numpy.typing.ArrayLike

    :param angle: Rotation angle
    :type angle: float

    :param degrees: Flag to denote if angle is supplied in degrees, defaults to False
    :type degrees: bool, optional

    :raises ValueError: If `axis` is the zero vector

    :return: Unit quaternion
    :rtype: numpy.ndarray
    """
    axis = as_vector(axis)
    norm = np.linalg.norm(axis)
    if norm == 0:
        raise ValueError('Rotation axis must be nonzero')

    angle = np.deg2rad(angle) if degrees else angle
    return rotation_vector_quaternion(axis / norm * angle)

def rotation_vector_quaternion(rotation_vector: npt.ArrayLike) -> np.ndarray:
    """Unit quaternion for a rotation vector (axis scaled by angle in radians)"""
    return _from_rotation(sptl.Rotation.from_rotvec(as_vector(rotation_vector)))

def euler_quaternion(angle: npt.ArrayLike, sequence: str = 'ZYX',
                     degrees: bool = True) -> np.ndarray:
    """Unit quaternion for Euler / Tait-Bryan angles

    :param angle: Rotation angles about [X, Y, Z]; applied in `sequence` order
    :type angle: numpy.typing.ArrayLike

    :param sequence: Rotation angle sequence, defaults to 'ZYX' (intrinsic)
    :type sequence: str, optional

    :param degrees: Unit of rotation angles, defaults to True
    :type degrees: bool, optional

    :return: Unit quaternion
    :rtype: numpy.ndarray
    """
    angle = as_vector(angle)
    rotation = sptl.Rotation.from_euler(sequence, angle[sequence_to_index(sequence)], degrees)
    return _from_rotation(rotation)
