import cv2
import numpy as np

from .. import config
from ..utility.utils import center


def search_window(rect, frame_shape, fraction=config.search_fraction):
    # Window of a fraction of the frame size, centered on the rectangle
    frame_height, frame_width = frame_shape[:2]
    width = fraction * frame_width
    height = fraction * frame_height
    cx, cy = center(rect)
    return (int(round(cx - 0.5 * width)), int(round(cy - 0.5 * height)),
            int(round(width)), int(round(height)))


def _gray(image):
    if image.ndim == 3:
        return cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    return image


class MatchingTracker:
    """
    Template matching tracker for one landmark.

    Parameters:
    - template: image patch of the landmark (BGR or grayscale).
    - threshold: float, minimum normalized correlation to accept a match.
    - registration_threshold: float, matches scoring below this value replace the template.
    """

    def __init__(self, template, threshold=config.match_threshold,
                 registration_threshold=config.registration_threshold):
        self.template = _gray(np.asarray(template))
        self.threshold = threshold
        self.registration_threshold = registration_threshold
        self.last_similarity = None

    @classmethod
    def from_frame(cls, frame, rect, **kwargs):
        x, y, w, h = (int(round(v)) for v in rect)
        return cls(frame[y:y + h, x:x + w].copy(), **kwargs)

    def process_frame(self, frame, window):
        """
        Look for the template inside the search window of a frame.

        Returns:
        - (rect, found): the matched (x, y, width, height) rectangle, or (None, False).
        """
        image = _gray(np.asarray(frame))
        frame_height, frame_width = image.shape[:2]
        t_height, t_width = self.template.shape[:2]

        # Clip the search window to the frame
        wx, wy, ww, wh = window
        x0, y0 = max(0, wx), max(0, wy)
        x1, y1 = min(frame_width, wx + ww), min(frame_height, wy + wh)

        if x1 - x0 < t_width or y1 - y0 < t_height:
            self.last_similarity = None
            return None, False

        region = image[y0:y1, x0:x1]
        scores = cv2.matchTemplate(region, self.template, cv2.TM_CCOEFF_NORMED)
        _, max_val, _, max_loc = cv2.minMaxLoc(scores)
        self.last_similarity = max_val

        if max_val < self.threshold:
            return None, False

        rect = (x0 + max_loc[0], y0 + max_loc[1], t_width, t_height)

        # Follow slow appearance changes by registering the new patch
        if max_val < self.registration_threshold:
            x, y = rect[0], rect[1]
            self.template = image[y:y + t_height, x:x + t_width].copy()

        return rect, True

    def track(self, previous_rect, window, frame):
        rect, found = self.process_frame(frame, window)
        if not found:
            return previous_rect, False
        return rect, True
