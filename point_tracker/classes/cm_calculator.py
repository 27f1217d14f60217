import numpy as np

from .. import config
from ..errors import EmptySubsetError, MissingLandmarkError, UnknownLandmarkError, UnknownPartError
from ..utility import masses
from ..utility.utils import center, div
from .body_landmarks import BodySegment, BodySegmentGroups, Landmark
from .segments import SEGMENT_RULES, locate_segments


class CmCalculator:
    """
    Partial centers of mass (PCMs) of the body segments, from tracked landmarks.

    Each call to `update` replaces the landmark locations of one frame and
    recomputes every segment CM right away, queries read the cached result.
    """

    def __init__(self, total_mass=config.total_mass, rules=SEGMENT_RULES):
        self.weights = masses.Weights(total_mass)
        self.rules = rules

        # Absolute weight of each segment
        self.masses_dict = masses.create_mass_dict(self.weights)

        # Last known landmark locations and last computed PCMs
        self._locs = {}
        self._last_pcms = None

    def update(self, names, rects):
        """
        Register the tracked rectangles of one frame and recompute the PCMs.

        Parameters:
        - names: sequence of landmark names (e.g. "Wrist").
        - rects: sequence of (x, y, width, height) rectangles, same length as names.
        """
        if len(names) != len(rects):
            raise ValueError(f"Got {len(names)} landmark names but {len(rects)} rectangles")

        # Parse every name first so a bad one leaves the previous frame untouched
        landmarks = [self._landmark(name) for name in names]
        for landmark, rect in zip(landmarks, rects):
            self._locs[landmark] = center(rect)

        missing = [str(lm) for lm in Landmark if lm not in self._locs]
        if missing:
            self._last_pcms = None
            raise MissingLandmarkError(missing)

        self._last_pcms = locate_segments(self._locs, self.rules)

    def get_pcms(self):
        # Copy keyed by segment name, None before the first complete update
        if self._last_pcms is None:
            return None
        return {str(segment): pcm.copy() for segment, pcm in self._last_pcms.items()}

    def get_location(self, name):
        landmark = self._landmark(name)
        if landmark not in self._locs:
            raise UnknownLandmarkError(name)
        return self._locs[landmark].copy()

    def get_gcm(self):
        return self.free_body_pcm(BodySegmentGroups.ALL)

    def get_ankle_pcm(self):
        return self.free_body_pcm(BodySegmentGroups.ABOVE_ANKLE)

    def get_knee_pcm(self):
        return self.free_body_pcm(BodySegmentGroups.ABOVE_KNEE)

    def get_hip_pcm(self):
        return self.free_body_pcm(BodySegmentGroups.ABOVE_HIP)

    def free_body_pcm(self, parts):
        """
        Mass-weighted center of mass of the free body made of the given segments.

        Parameters:
        - parts: iterable of segment names or BodySegment members, order and
          duplicates are ignored, a single name is a one part body.

        Returns:
        - (point, total_weight): the PCM and the summed segment mass in kg.
        """
        if isinstance(parts, (str, BodySegment)):
            parts = [parts]

        selected = {self._segment(part) for part in parts}
        if not selected:
            raise EmptySubsetError("Cannot aggregate an empty set of body parts")

        if self._last_pcms is None:
            raise MissingLandmarkError([str(lm) for lm in Landmark if lm not in self._locs])

        # Sum in enum order so the result does not depend on the order of parts
        segments = sorted(selected)
        weights = np.array([self.masses_dict[segment] for segment in segments])
        points = np.array([self._last_pcms[segment] for segment in segments])

        total_weight = float(np.sum(weights))
        cm = div(np.sum(points * weights[:, None], axis=0), total_weight)

        return cm, total_weight

    @staticmethod
    def _landmark(name):
        try:
            return Landmark.from_name(name)
        except ValueError:
            raise UnknownLandmarkError(name) from None

    @staticmethod
    def _segment(name):
        try:
            return BodySegment.from_name(name)
        except ValueError:
            raise UnknownPartError(name) from None
