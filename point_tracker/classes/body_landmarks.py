# body_landmarks.py

from enum import IntEnum


class _NamedEnum(IntEnum):
    """IntEnum printed and parsed by its CamelCase name (UPPER_ARM <-> "UpperArm")."""

    def __str__(self):
        return "".join(word.capitalize() for word in self.name.split("_"))

    @classmethod
    def from_name(cls, name):
        if isinstance(name, cls):
            return name
        for member in cls:
            if str(member) == name:
                return member
        raise ValueError(f"{name!r} is not a valid {cls.__name__}")


class Landmark(_NamedEnum):
    """Tracked anatomical points, in tracking (stick figure) order."""
    WRIST = 0
    ELBOW = 1
    SHOULDER = 2
    HIP = 3
    KNEE = 4
    ANKLE = 5
    FOOT = 6


class BodySegment(_NamedEnum):
    HEAD = 0
    UPPER_ARM = 1
    FOREARM = 2
    HAND = 3
    TRUNK = 4
    THIGH = 5
    SHANK = 6
    FOOT = 7


class BodySegmentGroups:
    """Free bodies above a given joint, as segment groups."""

    # Whole body
    ALL = list(BodySegment)

    # Everything above the ankle joint
    ABOVE_ANKLE = [
        BodySegment.HEAD, BodySegment.UPPER_ARM, BodySegment.FOREARM,
        BodySegment.HAND, BodySegment.TRUNK, BodySegment.THIGH, BodySegment.SHANK,
    ]

    # Everything above the knee joint
    ABOVE_KNEE = [
        BodySegment.HEAD, BodySegment.UPPER_ARM, BodySegment.FOREARM,
        BodySegment.HAND, BodySegment.TRUNK, BodySegment.THIGH,
    ]

    # Everything above the hip joint
    ABOVE_HIP = [
        BodySegment.HEAD, BodySegment.UPPER_ARM, BodySegment.FOREARM,
        BodySegment.HAND, BodySegment.TRUNK,
    ]
