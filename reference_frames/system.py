"""system.py - Reference Frame Graph Collections"""
from __future__ import annotations

import numpy as np

import networkx as nx
import matplotlib.pyplot as plt

from reference_frames.frame import ReferenceFrame
from reference_frames.hierarchy import ASCEND, DESCEND, hops
from reference_frames.kinematics import shift_position, shift_direction

__all__ = ['FrameSystem']

class FrameSystem(nx.DiGraph):
    """Reference frame graph network system with an edge from every parent to
    each of its children. Nodes are the frame objects themselves."""

    def __init__(self, incoming_graph_data = None, **attr):
        """Initialize FrameSystem"""
        super().__init__(incoming_graph_data, **attr)
        self._path: dict[tuple[ReferenceFrame, ReferenceFrame], list[tuple[ReferenceFrame, str]]] = {}

    def add_frame(self, frame: ReferenceFrame, color: str | None = None):
        """Adds a frame and all of its ancestors

        :param frame: Frame to add
        :type frame: ReferenceFrame

        :param color: Plotting color; new frames default to 'k' and frames
            already present keep their color unless one is given
        :type color: str | None, optional

        :raises InvalidHierarchyError: If the frame's ancestry is malformed
        """
        chain = frame.ancestors()
        for node in chain:
            if node not in self:
                self.add_node(node, color='k')
        if color is not None:
            self.nodes[frame]['color'] = color

        for child, base in zip(chain[:-1], chain[1:]):
            self.add_edge(base, child)

    def roots(self) -> list[ReferenceFrame]:
        """Returns the origin of every hierarchy in the system"""
        return [node for node, degree in self.in_degree() if degree == 0]

    def children(self, frame: ReferenceFrame) -> list[ReferenceFrame]:
        """Returns the frames whose parent is `frame`"""
        return list(self.successors(frame))

    def is_tree(self) -> bool:
        """Checks that every frame has at most one parent and there are no cycles"""
        return len(self) == 0 or nx.is_branching(self)

    # Traversal
    def path(self, source: ReferenceFrame, target: ReferenceFrame) -> list[tuple[ReferenceFrame, str]]:
        """Generates transform sequence between two frames of the system. Plans
        are cached, and a cached plan is reversed to serve the opposite direction.

        :param source: Source frame
        :type source: ReferenceFrame

        :param target: Target frame
        :type target: ReferenceFrame

        :raises KeyError: If either frame is not in the system

        :return: Hops as (frame, direction) tuples
        :rtype: list[tuple[ReferenceFrame, str]]
        """
        for node in (source, target):
            if node not in self:
                raise KeyError(f"Frame {node} is not present")

        if (source, target) in self._path:
            # Path previously cached
            return self._path[(source, target)]
        elif (target, source) in self._path:
            # Reverse path previously cached
            self._path[(source, target)] = [
                (frame, DESCEND if direction == ASCEND else ASCEND)
                for frame, direction in reversed(self._path[(target, source)])]

            return self._path[(source, target)]

        # Path not previously cached
        self._path[(source, target)] = hops(source, target)

        return self._path[(source, target)]

    def plot(self, ax: plt.Axes | None = None, frame: ReferenceFrame | None = None,
             t: float = 0., size: float = 1.):
        """3D plot of the axes of every frame in the system

        :param ax: Plotting axes with a 3D projection, defaults to current axes
        :type ax: matplotlib.pyplot.Axes | None, optional

        :param frame: Reference frame to plot in, defaults to the first root
        :type frame: ReferenceFrame | None, optional

        :param t: Time, defaults to 0
        :type t: float, optional

        :param size: Quiver size, defaults to 1
        :type size: float, optional

        :raises KeyError: If `frame` is not in the system
        """
        # Default parameters
        ax = plt.gca() if ax is None else ax
        frame = self.roots()[0] if frame is None else frame

        # Plot Cartesian frames
        for node in self.nodes():
            O = np.zeros(3)
            E = np.eye(3)
            for hop, direction in self.path(node, frame):
                O = shift_position(O, hop, t, direction)
                E = np.array([shift_direction(e, hop, t, direction) for e in E])

            for i in range(3):
                ax.quiver(*O, *E[i], color=self.nodes[node]['color'], length=size, normalize=True)

        ax.set_xlabel('X')
        ax.set_ylabel('Y')
        ax.set_zlabel('Z')
        ax.set_aspect('equal')
