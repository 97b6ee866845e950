"""reference_frames - Kinematic Transforms Through Hierarchies of Reference Frames"""
import logging

from reference_frames.errors import (
    ReferenceFrameError, DisjointHierarchyError, InvalidHierarchyError)
from reference_frames.frame import (
    ReferenceFrame, OriginFrame, InertialFrame, KinematicFrame, RotatingFrame,
    parent, ancestors, is_inertial, make_origin, make_inertial)
from reference_frames.hierarchy import resolve, common_ancestor, hops
from reference_frames.transform import (
    transform_position, transform_velocity, transform_acceleration,
    transform_quaternion, transform_direction)
from reference_frames.system import FrameSystem

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = '0.1.0'

__all__ = ['ReferenceFrameError', 'DisjointHierarchyError', 'InvalidHierarchyError',
           'ReferenceFrame', 'OriginFrame', 'InertialFrame', 'KinematicFrame', 'RotatingFrame',
           'parent', 'ancestors', 'is_inertial', 'make_origin', 'make_inertial',
           'resolve', 'common_ancestor', 'hops',
           'transform_position', 'transform_velocity', 'transform_acceleration',
           'transform_quaternion', 'transform_direction',
           'FrameSystem']
