"""hierarchy.py - Ancestor Resolution Between Reference Frames"""
from __future__ import annotations

import logging

from reference_frames.errors import DisjointHierarchyError
from reference_frames.frame import ReferenceFrame

__all__ = ['ASCEND', 'DESCEND', 'resolve', 'common_ancestor', 'hops']

logger = logging.getLogger(__name__)

ASCEND  = 'ascend'
DESCEND = 'descend'

def resolve(frame1: ReferenceFrame, frame2: ReferenceFrame) \
        -> tuple[ReferenceFrame, list[ReferenceFrame], list[ReferenceFrame]]:
    """Finds the nearest common ancestor of two frames and the frames to pass
    through on the way from `frame1` to `frame2`

    Ancestor chains of a tree converge on a single root, so the first frame of
    `frame1`'s chain that also appears in `frame2`'s chain is the nearest
    common ancestor.

    :param frame1: Source frame
    :type frame1: ReferenceFrame

    :param frame2: Target frame
    :type frame2: ReferenceFrame

    :raises DisjointHierarchyError: If the frames descend from different origins

    :return: Common ancestor; ascent frames from `frame1` upward (nearest
        first, excluding the common ancestor); descent frames downward to
        `frame2` (parent-to-child order, excluding the common ancestor)
    :rtype: tuple[ReferenceFrame, list[ReferenceFrame], list[ReferenceFrame]]
    """
    chain1 = frame1.ancestors()
    chain2 = frame2.ancestors()

    index2 = {id(frame): j for j, frame in enumerate(chain2)}
    for i, frame in enumerate(chain1):
        if id(frame) in index2:
            break
    else:
        raise DisjointHierarchyError(frame1, frame2)

    common = chain1[i]
    ascent = chain1[:i]
    descent = chain2[:index2[id(common)]][::-1]

    logger.debug("Resolved %s -> %s through %s (%d up, %d down)",
                 frame1, frame2, common, len(ascent), len(descent))

    return common, ascent, descent

def common_ancestor(frame1: ReferenceFrame, frame2: ReferenceFrame) -> ReferenceFrame:
    """Returns the nearest common ancestor of two frames"""
    return resolve(frame1, frame2)[0]

def hops(frame1: ReferenceFrame, frame2: ReferenceFrame) -> list[tuple[ReferenceFrame, str]]:
    """Generates the single-hop transform sequence between two frames

    :param frame1: Source frame
    :type frame1: ReferenceFrame

    :param frame2: Target frame
    :type frame2: ReferenceFrame

    :return: Hops as (frame, direction) tuples; all ascents precede all descents
    :rtype: list[tuple[ReferenceFrame, str]]
    """
    _, ascent, descent = resolve(frame1, frame2)
    return [(frame, ASCEND) for frame in ascent] + [(frame, DESCEND) for frame in descent]
