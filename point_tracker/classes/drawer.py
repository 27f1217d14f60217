import cv2
import numpy as np

from ..errors import OutputWriteError
from ..utility.utils import center


class Drawer:
    def __init__(self, crop=None):
        self.crop = crop

        # Color palette (BGR)
        self.colors = {
            "landmark": (255, 255, 0),  # Cyan
            "stick": (0, 255, 127),     # Chartreuse
            "pcm": (0, 0, 255),         # Red
            "gcm": (0, 165, 255),       # Orange
        }

    def __call__(self, frame, rects, pcms=None, gcm=None):
        # Annotate a copy of the frame and crop it to the output region
        annotated_image = self._draw_stick_figure(frame.copy(), rects)

        if pcms:
            for pcm in pcms.values():
                self._draw_point(annotated_image, pcm, self.colors["pcm"], 2)

        if gcm is not None:
            self._draw_point(annotated_image, gcm, self.colors["gcm"], 4)

        return self._crop(annotated_image)

    def save(self, path, image):
        if not cv2.imwrite(path, image):
            raise OutputWriteError(f"Could not write annotated frame: {path}")

    def _draw_stick_figure(self, image, rects):
        points = [center(rect) for rect in rects]

        # Connect the landmarks in tracking order
        for p1, p2 in zip(points, points[1:]):
            cv2.line(image, self._pixel(p1), self._pixel(p2), self.colors["stick"], 1)

        for p in points:
            self._draw_point(image, p, self.colors["landmark"], 2)

        return image

    def _draw_point(self, image, p, color, radius):
        cv2.circle(image, self._pixel(p), radius, color, -1)

    def _crop(self, image):
        if self.crop is None:
            return image

        x, y, w, h = (int(round(v)) for v in self.crop)
        return np.ascontiguousarray(image[y:y + h, x:x + w])

    @staticmethod
    def _pixel(p):
        return int(round(p[0])), int(round(p[1]))
