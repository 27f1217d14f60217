from collections import namedtuple

from .. import config
from ..utility.utils import add, walk
from .body_landmarks import BodySegment, Landmark


class Offset(namedtuple('Offset', ['landmark', 'offset'])):
    """Segment CM at a fixed pixel offset from a landmark."""
    __slots__ = ()

    def locate(self, locations):
        return add(locations[self.landmark], self.offset)


class Walk(namedtuple('Walk', ['start', 'end', 'fraction'])):
    """Segment CM a fixed fraction of the way from one landmark to another."""
    __slots__ = ()

    def locate(self, locations):
        return walk(locations[self.start], locations[self.end], self.fraction)


SEGMENT_RULES = {
    BodySegment.HEAD: Offset(Landmark.SHOULDER, config.head_offset),
    BodySegment.UPPER_ARM: Walk(Landmark.SHOULDER, Landmark.ELBOW, 0.5754),
    BodySegment.FOREARM: Walk(Landmark.ELBOW, Landmark.WRIST, 0.4559),
    BodySegment.HAND: Offset(Landmark.WRIST, config.hand_offset),
    # Mid-shoulder to mid-hip
    BodySegment.TRUNK: Walk(Landmark.SHOULDER, Landmark.HIP, 0.4151),
    # Hip joint center to knee joint center
    BodySegment.THIGH: Walk(Landmark.HIP, Landmark.KNEE, 0.3612),
    # Knee joint center to ankle joint center
    BodySegment.SHANK: Walk(Landmark.KNEE, Landmark.ANKLE, 0.4416),
    BodySegment.FOOT: Offset(Landmark.FOOT, config.foot_offset),
}


def locate_segments(locations, rules=SEGMENT_RULES):
    """
    Compute the CM of every segment from a landmark -> point mapping.

    Parameters:
    - locations: dict, Landmark -> point, must hold every landmark a rule uses.
    - rules: dict, BodySegment -> Offset or Walk rule.

    Returns:
    - dict, BodySegment -> point.
    """
    return {segment: rule.locate(locations) for segment, rule in rules.items()}
