"""errors.py - Reference Frame Exceptions"""

__all__ = ['ReferenceFrameError', 'DisjointHierarchyError', 'InvalidHierarchyError']

class ReferenceFrameError(Exception):
    """Base exception for all reference frame errors"""

class DisjointHierarchyError(ReferenceFrameError):
    """Two frames do not descend from a common origin

    :param frame1: Source frame
    :type frame1: ReferenceFrame

    :param frame2: Target frame
    :type frame2: ReferenceFrame
    """
    def __init__(self, frame1, frame2):
        """Initialize DisjointHierarchyError"""
        self.frame1 = frame1
        self.frame2 = frame2
        super().__init__(f"Frames {frame1} and {frame2} do not have a common hierarchy")

class InvalidHierarchyError(ReferenceFrameError):
    """Malformed frame hierarchy: missing parent, cycle, or runaway depth

    :param frame: Frame at which the problem was detected
    :type frame: ReferenceFrame

    :param reason: Description of the problem
    :type reason: str
    """
    def __init__(self, frame, reason: str):
        """Initialize InvalidHierarchyError"""
        self.frame = frame
        self.reason = reason
        super().__init__(f"Invalid hierarchy at {frame}: {reason}")
