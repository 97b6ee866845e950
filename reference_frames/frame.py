"""frame.py - Reference Frames and Frame Hierarchy

Every frame reports the kinematics of its own origin and axes relative to its
parent as pure functions of time:

- position, velocity, acceleration of the frame origin, in parent coordinates
- quaternion rotating a vector from frame coordinates into parent coordinates
- angular velocity and angular acceleration, in **parent** coordinates
"""
from __future__ import annotations

import logging
import typing as typ
from abc import ABC, abstractmethod

import operator as op

import numpy.typing as npt
import numpy as np

from reference_frames.errors import InvalidHierarchyError
from reference_frames.geometry import (
    IDENTITY_QUATERNION, as_vector, as_quaternion, hamilton_product,
    rotation_vector_quaternion)
from reference_frames.utilities import hash_id

__all__ = ['MAX_HIERARCHY_DEPTH', 'ID_DIGITS',
           'ReferenceFrame', 'AbstractInertialFrame',
           'OriginFrame', 'InertialFrame',                  # base kinds
           'KinematicFrame', 'RotatingFrame',               # general kinds
           'parent', 'ancestors', 'is_inertial',
           'make_origin', 'make_inertial']

logger = logging.getLogger(__name__)

MAX_HIERARCHY_DEPTH = 4096
ID_DIGITS = 4

_ZERO = np.zeros(3)
_ZERO.setflags(write=False)

def _frozen(array: np.ndarray) -> np.ndarray:
    """Marks an array read-only and returns it"""
    array.setflags(write=False)
    return array

# %% Frame Model
class ReferenceFrame(ABC):
    """Node in a tree of reference frames

    :param name: Display label, not necessarily unique
    :type name: str

    :param parent: Frame this frame is referenced to
    :type parent: ReferenceFrame

    :raises InvalidHierarchyError: If `parent` is not a ReferenceFrame
    """
    inertial: bool = False

    def __init__(self, name: str, parent: ReferenceFrame):
        """Initialize ReferenceFrame"""
        self._name = str(name)
        if not isinstance(parent, ReferenceFrame):
            raise InvalidHierarchyError(self, f"parent {parent!r} is not a reference frame")
        self._parent = parent

    name: str = property(op.attrgetter('_name'))
    parent: ReferenceFrame = property(op.attrgetter('_parent'))

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.name})"

    def __repr__(self) -> str:
        return str(self)

    # Kinematics relative to parent
    @abstractmethod
    def position(self, t: float) -> np.ndarray:
        """Frame origin position in parent coordinates at time `t`"""

    @abstractmethod
    def velocity(self, t: float) -> np.ndarray:
        """Frame origin velocity in parent coordinates at time `t`"""

    @abstractmethod
    def acceleration(self, t: float) -> np.ndarray:
        """Frame origin acceleration in parent coordinates at time `t`"""

    @abstractmethod
    def quaternion(self, t: float) -> np.ndarray:
        """Unit quaternion rotating frame coordinates into parent coordinates at time `t`"""

    @abstractmethod
    def omega(self, t: float) -> np.ndarray:
        """Angular velocity in parent coordinates at time `t`"""

    @abstractmethod
    def alpha(self, t: float) -> np.ndarray:
        """Angular acceleration in parent coordinates at time `t`"""

    # Hierarchy
    def ancestors(self) -> list[ReferenceFrame]:
        """Returns the frame followed by its parents, those parents' parents,
        and so on, until an :class:`OriginFrame` is reached. For frame A, a
        child of B, a child of origin C, this is :code:`[A, B, C]`.

        :raises InvalidHierarchyError: If a parent is missing, a cycle is
            found, or the chain exceeds :data:`MAX_HIERARCHY_DEPTH`

        :return: Ancestor chain, nearest first
        :rtype: list[ReferenceFrame]
        """
        chain = [self]
        seen = {id(self)}
        while not isinstance(chain[-1], OriginFrame):
            frame = chain[-1]
            base = getattr(frame, 'parent', None)
            if not isinstance(base, ReferenceFrame):
                raise InvalidHierarchyError(frame, 'missing parent')
            if id(base) in seen:
                raise InvalidHierarchyError(frame, f"cycle through {base}")
            if len(chain) >= MAX_HIERARCHY_DEPTH:
                raise InvalidHierarchyError(frame, f"deeper than {MAX_HIERARCHY_DEPTH} frames")

            seen.add(id(base))
            chain.append(base)

        return chain

    def is_inertial(self) -> bool:
        """Checks if the frame is a true inertial frame, i.e. it and all of
        its ancestors are of an inertial kind"""
        return all(frame.inertial for frame in self.ancestors())

class AbstractInertialFrame(ReferenceFrame):
    """Reference frame that neither accelerates nor rotates"""
    inertial = True

    def acceleration(self, t: float) -> np.ndarray:
        return _ZERO

    def omega(self, t: float) -> np.ndarray:
        return _ZERO

    def alpha(self, t: float) -> np.ndarray:
        return _ZERO

# %% Base Kinds
class OriginFrame(AbstractInertialFrame):
    """Root of a frame hierarchy. Every frame descends from exactly one
    origin; unrelated hierarchies each need their own. An origin is its own
    parent and all of its kinematics are zero or identity.

    :param name: Display label
    :type name: str
    """
    def __init__(self, name: str = 'origin'):
        """Initialize OriginFrame"""
        self._name = str(name)
        self._parent = self

    def position(self, t: float) -> np.ndarray:
        return _ZERO

    def velocity(self, t: float) -> np.ndarray:
        return _ZERO

    def quaternion(self, t: float) -> np.ndarray:
        return IDENTITY_QUATERNION

    def ancestors(self) -> list[ReferenceFrame]:
        return [self]

class InertialFrame(AbstractInertialFrame):
    """Non-rotating frame translating at constant velocity. This is a *true*
    inertial frame only when its whole ancestry is inertial.

    :param parent: Parent frame
    :type parent: ReferenceFrame

    :param quaternion: Constant rotation from this frame to its parent, defaults to identity
    :type quaternion: numpy.typing.ArrayLike | None, optional

    :param position: Origin position in parent at :math:`t=0`, defaults to :code:`numpy.zeros(3)`
    :type position: numpy.typing.ArrayLike | None, optional

    :param velocity: Origin velocity in parent, defaults to :code:`numpy.zeros(3)`
    :type velocity: numpy.typing.ArrayLike | None, optional

    :param name: Display label, defaults to a digest of the other parameters
    :type name: str | None, optional
    """
    def __init__(self,
                 parent: ReferenceFrame,
                 quaternion: npt.ArrayLike | None = None,
                 position  : npt.ArrayLike | None = None,
                 velocity  : npt.ArrayLike | None = None,
                 name: str | None = None):
        """Initialize InertialFrame"""
        self._q  = _frozen(as_quaternion(quaternion if quaternion is not None else IDENTITY_QUATERNION))
        self._r0 = _frozen(as_vector(position if position is not None else _ZERO))
        self._v  = _frozen(as_vector(velocity if velocity is not None else _ZERO))

        if name is None:
            name = hash_id(ID_DIGITS, str(parent),
                           self._q.tolist(), self._r0.tolist(), self._v.tolist())

        super().__init__(name, parent)

    def position(self, t: float) -> np.ndarray:
        return self._r0 + self._v * t

    def velocity(self, t: float) -> np.ndarray:
        return self._v

    def quaternion(self, t: float) -> np.ndarray:
        return self._q

# %% General Kinds
Trajectory = typ.Callable[[float], npt.ArrayLike]

class KinematicFrame(ReferenceFrame):
    """Frame with arbitrary time-varying kinematics supplied as callables of
    time. Omitted callables default to zero vectors or the identity quaternion.
    The callables must be mutually consistent (velocity is the derivative of
    position, and so on); this is not checked.

    :param parent: Parent frame
    :type parent: ReferenceFrame

    :param name: Display label, defaults to a digest of the other parameters
    :type name: str | None, optional
    """
    def __init__(self,
                 parent: ReferenceFrame,
                 position    : Trajectory | None = None,
                 velocity    : Trajectory | None = None,
                 acceleration: Trajectory | None = None,
                 quaternion  : Trajectory | None = None,
                 omega       : Trajectory | None = None,
                 alpha       : Trajectory | None = None,
                 name: str | None = None):
        """Initialize KinematicFrame"""
        self._trajectory = {
            'position': position, 'velocity': velocity, 'acceleration': acceleration,
            'quaternion': quaternion, 'omega': omega, 'alpha': alpha}

        if name is None:
            name = hash_id(ID_DIGITS, str(parent),
                           *(getattr(fn, '__qualname__', repr(fn)) for fn in self._trajectory.values()))

        super().__init__(name, parent)

    def _vector(self, key: str, t: float) -> np.ndarray:
        fn = self._trajectory[key]
        return _ZERO if fn is None else as_vector(fn(t))

    def position(self, t: float) -> np.ndarray:
        return self._vector('position', t)

    def velocity(self, t: float) -> np.ndarray:
        return self._vector('velocity', t)

    def acceleration(self, t: float) -> np.ndarray:
        return self._vector('acceleration', t)

    def quaternion(self, t: float) -> np.ndarray:
        fn = self._trajectory['quaternion']
        return IDENTITY_QUATERNION if fn is None else as_quaternion(fn(t))

    def omega(self, t: float) -> np.ndarray:
        return self._vector('omega', t)

    def alpha(self, t: float) -> np.ndarray:
        return self._vector('alpha', t)

class RotatingFrame(ReferenceFrame):
    r"""Frame with a fixed origin spinning at constant angular velocity, e.g.
    a body-fixed frame under a non-rotating body-centered frame. The
    orientation at time :math:`t` is :math:`\exp(\omega t / 2) \otimes q_0`.

    :param parent: Parent frame
    :type parent: ReferenceFrame

    :param omega: Angular velocity in parent coordinates [rad/s]
    :type omega: numpy.typing.ArrayLike

    :param quaternion: Orientation at :math:`t=0`, defaults to identity
    :type quaternion: numpy.typing.ArrayLike | None, optional

    :param position: Fixed origin position in parent, defaults to :code:`numpy.zeros(3)`
    :type position: numpy.typing.ArrayLike | None, optional

    :param name: Display label, defaults to a digest of the other parameters
    :type name: str | None, optional
    """
    def __init__(self,
                 parent: ReferenceFrame,
                 omega: npt.ArrayLike,
                 quaternion: npt.ArrayLike | None = None,
                 position  : npt.ArrayLike | None = None,
                 name: str | None = None):
        """Initialize RotatingFrame"""
        self._omega = _frozen(as_vector(omega))
        self._q0 = _frozen(as_quaternion(quaternion if quaternion is not None else IDENTITY_QUATERNION))
        self._r0 = _frozen(as_vector(position if position is not None else _ZERO))

        if name is None:
            name = hash_id(ID_DIGITS, str(parent),
                           self._omega.tolist(), self._q0.tolist(), self._r0.tolist())

        super().__init__(name, parent)

    def position(self, t: float) -> np.ndarray:
        return self._r0

    def velocity(self, t: float) -> np.ndarray:
        return _ZERO

    def acceleration(self, t: float) -> np.ndarray:
        return _ZERO

    def quaternion(self, t: float) -> np.ndarray:
        return hamilton_product(rotation_vector_quaternion(self._omega * t), self._q0)

    def omega(self, t: float) -> np.ndarray:
        return self._omega

    def alpha(self, t: float) -> np.ndarray:
        return _ZERO

# %% Functional Interface
def parent(frame: ReferenceFrame) -> ReferenceFrame:
    """Returns the parent of a frame; an origin is its own parent"""
    return frame.parent

def ancestors(frame: ReferenceFrame) -> list[ReferenceFrame]:
    """Returns the ancestor chain of a frame, see :meth:`ReferenceFrame.ancestors`"""
    return frame.ancestors()

def is_inertial(frame: ReferenceFrame) -> bool:
    """Checks if a frame is a true inertial frame"""
    return frame.is_inertial()

def make_origin(name: str = 'origin') -> OriginFrame:
    """Creates a new hierarchy root"""
    return OriginFrame(name)

def make_inertial(parent: ReferenceFrame,
                  quaternion: npt.ArrayLike | None = None,
                  position  : npt.ArrayLike | None = None,
                  velocity  : npt.ArrayLike | None = None,
                  name: str | None = None) -> InertialFrame:
    """Creates an inertial frame, see :class:`InertialFrame`"""
    frame = InertialFrame(parent, quaternion, position, velocity, name)
    logger.debug("Created %s under %s", frame, parent)
    return frame
