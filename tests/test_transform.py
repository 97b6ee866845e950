"""Transform module tests"""
import pytest

import itertools as itl

import numpy as np

from reference_frames.errors import DisjointHierarchyError
from reference_frames.frame import OriginFrame, InertialFrame, RotatingFrame
from reference_frames.hierarchy import resolve
from reference_frames.transform import (
    transform_position, transform_velocity, transform_acceleration,
    transform_quaternion, transform_direction)

from testing_utilities import random_uniform, random_quaternion, random_hierarchy, assert_same_rotation

__all__ = ['TestTransformProperties', 'TestTransportTheorem']

NUM_HIERARCHIES = 3
FRAME_PAIRS = list(itl.permutations('OABCDE', 2))
STEP = 1e-5

@pytest.fixture(params=range(NUM_HIERARCHIES))
def frames(request) -> dict:
    return random_hierarchy()

class TestTransformProperties():
    @pytest.mark.parametrize('label', 'OABCDE')
    def test_identity(self, frames, label: str):
        pos = random_uniform(10,3)
        frame = frames[label]

        np.testing.assert_array_equal(transform_position(pos, frame, frame, 1.5), pos)

    @pytest.mark.parametrize('source, target', FRAME_PAIRS)
    def test_round_trip(self, frames, source: str, target: str):
        F1, F2 = frames[source], frames[target]
        t = np.random.uniform(-5, 5)
        state = tuple(random_uniform(10,3) for _ in range(3))

        there = transform_acceleration(state, F1, F2, t)
        back = transform_acceleration(there, F2, F1, t)
        for expected, actual in zip(state, back):
            np.testing.assert_allclose(actual, expected, atol=1e-8)

        np.testing.assert_allclose(
            transform_position(transform_position(state[0], F1, F2, t), F2, F1, t), state[0], atol=1e-9)

        q = random_quaternion()
        assert_same_rotation(transform_quaternion(transform_quaternion(q, F1, F2, t), F2, F1, t), q, atol=1e-9)

    @pytest.mark.parametrize('source, target', FRAME_PAIRS)
    def test_composability(self, frames, source: str, target: str):
        F1, F3 = frames[source], frames[target]
        _, ascent, descent = resolve(F1, F3)
        t = np.random.uniform(-5, 5)
        state = tuple(random_uniform(10,3) for _ in range(3))

        direct = transform_acceleration(state, F1, F3, t)
        for F2 in ascent + descent:
            staged = transform_acceleration(transform_acceleration(state, F1, F2, t), F2, F3, t)
            for expected, actual in zip(direct, staged):
                np.testing.assert_allclose(actual, expected, atol=1e-8)

    @pytest.mark.parametrize('source, target', FRAME_PAIRS)
    def test_direction_is_rotation(self, frames, source: str, target: str):
        F1, F2 = frames[source], frames[target]
        t = np.random.uniform(-5, 5)
        vec = random_uniform(1,3)

        expected = transform_position(vec, F1, F2, t) - transform_position(np.zeros(3), F1, F2, t)
        direction = transform_direction(vec, F1, F2, t)

        np.testing.assert_allclose(direction, expected, atol=1e-9)
        np.testing.assert_allclose(np.linalg.norm(direction), np.linalg.norm(vec))

    def test_disjoint(self, frames):
        other = InertialFrame(OriginFrame('O'), name='Z')
        state = tuple(np.zeros(3) for _ in range(3))

        with pytest.raises(DisjointHierarchyError):
            transform_position(state[0], frames['C'], other, 0.)
        with pytest.raises(DisjointHierarchyError):
            transform_velocity(state[:2], other, frames['E'], 0.)
        with pytest.raises(DisjointHierarchyError):
            transform_acceleration(state, frames['O'], other, 0.)
        with pytest.raises(DisjointHierarchyError):
            transform_quaternion([1, 0, 0, 0], frames['A'], other, 0.)
        with pytest.raises(DisjointHierarchyError):
            transform_direction(state[0], other, frames['B'], 0.)

class TestTransportTheorem():
    """Checks velocity and acceleration transforms against central
    differences of the position transform of a uniformly accelerating point"""

    @staticmethod
    def _trajectory(state: tuple, F1, F2, t: float) -> np.ndarray:
        pos, vel, acc = state
        return transform_position(pos + vel*t + 0.5*acc*t**2, F1, F2, t)

    @pytest.mark.parametrize('source, target', FRAME_PAIRS)
    def test_velocity(self, frames, source: str, target: str):
        F1, F2 = frames[source], frames[target]
        t = np.random.uniform(-2, 2)
        state = tuple(random_uniform(5,3) for _ in range(3))
        pos, vel, acc = state

        numeric = (self._trajectory(state, F1, F2, t + STEP)
                   - self._trajectory(state, F1, F2, t - STEP)) / (2*STEP)
        _, analytic = transform_velocity((pos + vel*t + 0.5*acc*t**2, vel + acc*t), F1, F2, t)

        np.testing.assert_allclose(analytic, numeric, rtol=1e-6, atol=1e-5)

    @pytest.mark.parametrize('source, target', FRAME_PAIRS)
    def test_acceleration(self, frames, source: str, target: str):
        F1, F2 = frames[source], frames[target]
        t = np.random.uniform(-2, 2)
        state = tuple(random_uniform(5,3) for _ in range(3))
        pos, vel, acc = state
        h = 5e-4

        numeric = (self._trajectory(state, F1, F2, t + h) - 2*self._trajectory(state, F1, F2, t)
                   + self._trajectory(state, F1, F2, t - h)) / h**2
        _, _, analytic = transform_acceleration(
            (pos + vel*t + 0.5*acc*t**2, vel + acc*t, acc), F1, F2, t)

        np.testing.assert_allclose(analytic, numeric, rtol=1e-4, atol=1e-3)

class TestRotatingFrameExample():
    def test_fixed_point(self):
        origin = OriginFrame('O')
        F = RotatingFrame(origin, [0, 0, 1], name='F')
        p, zero = np.array([1., 0., 0.]), np.zeros(3)

        _, vel = transform_velocity((p, zero), F, origin, 0.)
        _, _, acc = transform_acceleration((p, zero, zero), F, origin, 0.)

        np.testing.assert_allclose(vel, [0, 1, 0], atol=1e-12)
        np.testing.assert_allclose(acc, [-1, 0, 0], atol=1e-12)

    def test_quarter_turn(self):
        origin = OriginFrame('O')
        F = RotatingFrame(origin, [0, 0, 1], name='F')

        np.testing.assert_allclose(transform_position([1, 0, 0], F, origin, np.pi/2), [0, 1, 0], atol=1e-12)
        np.testing.assert_allclose(transform_direction([1, 0, 0], origin, F, np.pi/2), [0, -1, 0], atol=1e-12)
