"""Frame module tests"""
import pytest

import numpy as np

from reference_frames.errors import InvalidHierarchyError
from reference_frames.frame import (
    MAX_HIERARCHY_DEPTH, OriginFrame, InertialFrame, KinematicFrame, RotatingFrame,
    parent, ancestors, is_inertial, make_origin, make_inertial)
from reference_frames.geometry import IDENTITY_QUATERNION, axis_angle_quaternion, hamilton_product

from testing_utilities import random_uniform, random_quaternion, assert_same_rotation

__all__ = ['TestOriginFrame', 'TestInertialFrame', 'TestHierarchy']

NUM_TIMES = 5

class TestOriginFrame():
    def test_fixed_point(self):
        origin = make_origin('O')

        assert parent(origin) is origin
        assert ancestors(origin) == [origin]
        assert is_inertial(origin)

    @pytest.mark.parametrize('t', random_uniform(100, NUM_TIMES))
    def test_kinematics(self, t: float):
        origin = OriginFrame()

        for accessor in (origin.position, origin.velocity, origin.acceleration,
                         origin.omega, origin.alpha):
            np.testing.assert_array_equal(accessor(t), np.zeros(3))
        np.testing.assert_array_equal(origin.quaternion(t), IDENTITY_QUATERNION)

    def test_display(self):
        assert str(OriginFrame('sun')) == 'OriginFrame(sun)'

class TestInertialFrame():
    @pytest.mark.parametrize('t', random_uniform(100, NUM_TIMES))
    def test_rectilinear_motion(self, t: float):
        r0, v, q = random_uniform(10,3), random_uniform(1,3), random_quaternion()
        frame = make_inertial(OriginFrame(), q, r0, v, name='I')

        np.testing.assert_array_equal(frame.position(t), r0 + v*t)
        np.testing.assert_array_equal(frame.velocity(t), v)
        np.testing.assert_array_equal(frame.quaternion(t), q)
        for accessor in (frame.acceleration, frame.omega, frame.alpha):
            np.testing.assert_array_equal(accessor(t), np.zeros(3))

    def test_defaults(self):
        frame = InertialFrame(OriginFrame())

        np.testing.assert_array_equal(frame.position(3.), np.zeros(3))
        np.testing.assert_array_equal(frame.quaternion(3.), IDENTITY_QUATERNION)

    def test_immutable(self):
        frame = InertialFrame(OriginFrame(), position=[1, 2, 3])

        with pytest.raises(AttributeError):
            frame.parent = OriginFrame()
        with pytest.raises(ValueError):
            frame.velocity(0.)[0] = 1.

    def test_generated_label(self):
        origin = OriginFrame('O')
        a = InertialFrame(origin, position=[1, 2, 3], velocity=[0, 1, 0])
        b = InertialFrame(origin, position=[1, 2, 3], velocity=[0, 1, 0])

        assert a.name == b.name
        assert len(a.name) == 4 and a.name.isdigit()
        assert str(a) == f"InertialFrame({a.name})"

    def test_invalid_parent(self):
        with pytest.raises(InvalidHierarchyError):
            InertialFrame(None, name='orphan')

class TestHierarchy():
    def _chain(self):
        O = OriginFrame('O')
        A = InertialFrame(O, name='A')
        B = InertialFrame(A, name='B')
        R = RotatingFrame(B, [0, 0, 1], name='R')
        C = InertialFrame(R, name='C')
        return O, A, B, R, C

    def test_ancestors(self):
        O, A, B, R, C = self._chain()

        assert ancestors(C) == [C, R, B, A, O]
        assert ancestors(A) == [A, O]

    def test_inertial_classification(self):
        O, A, B, R, C = self._chain()

        assert is_inertial(A) and is_inertial(B)
        assert not is_inertial(R)
        assert not is_inertial(C)

    def test_cycle_detection(self):
        O, A, B, R, C = self._chain()
        A._parent = C

        with pytest.raises(InvalidHierarchyError) as exc_info:
            ancestors(C)
        assert 'cycle' in str(exc_info.value)

    def test_self_parent_detection(self):
        O, A, B, R, C = self._chain()
        B._parent = B

        with pytest.raises(InvalidHierarchyError):
            ancestors(C)

    def test_missing_parent_detection(self):
        O, A, B, R, C = self._chain()
        A._parent = None

        with pytest.raises(InvalidHierarchyError) as exc_info:
            ancestors(C)
        assert exc_info.value.frame is A

    def test_depth_limit(self):
        origin = OriginFrame('O')
        chain = [origin]
        for i in range(MAX_HIERARCHY_DEPTH):
            chain.append(InertialFrame(chain[-1], name=f"L{i}"))

        assert len(ancestors(chain[-2])) == MAX_HIERARCHY_DEPTH

        with pytest.raises(InvalidHierarchyError) as exc_info:
            ancestors(chain[-1])
        assert str(MAX_HIERARCHY_DEPTH) in str(exc_info.value)

class TestGeneralFrames():
    @pytest.mark.parametrize('t', random_uniform(10, NUM_TIMES))
    def test_rotating_frame(self, t: float):
        omega, q0 = random_uniform(1,3), random_quaternion()
        frame = RotatingFrame(OriginFrame(), omega, q0, position=[1, 0, 0])

        expected = axis_angle_quaternion(omega, np.linalg.norm(omega)*t)
        np.testing.assert_allclose(np.linalg.norm(frame.quaternion(t)), 1.)
        assert_same_rotation(frame.quaternion(t), hamilton_product(expected, q0))
        np.testing.assert_array_equal(frame.omega(t), omega)
        np.testing.assert_array_equal(frame.position(t), [1, 0, 0])
        np.testing.assert_array_equal(frame.alpha(t), np.zeros(3))

    def test_kinematic_frame_defaults(self):
        frame = KinematicFrame(OriginFrame(), position=lambda t: [t, 0, 0], name='K')

        np.testing.assert_array_equal(frame.position(2.), [2, 0, 0])
        np.testing.assert_array_equal(frame.velocity(2.), np.zeros(3))
        np.testing.assert_array_equal(frame.quaternion(2.), IDENTITY_QUATERNION)
        assert not frame.is_inertial()
