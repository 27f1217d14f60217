import csv
import logging
import os

import numpy as np

from .. import config
from ..errors import OutputWriteError, UnknownStreamError
from ..utility.utils import div, point, sub

logger = logging.getLogger(__name__)

HEADER = ["frame", "cm_x", "cm_y", "cm_dx", "cm_dy", "cm_vdx", "cm_vdy", "cm_adx", "cm_ady", "fg", "lever_arm"]


def nf(value):
    # Fixed 5 decimals, '.' separator whatever the locale
    return f"{value:.5f}"


class DataWriter:
    """
    Writes one CSV file of kinematic data per free body.

    Positions given in image coordinates are reframed into Cartesian
    coordinates in centimeters (origin at the bottom of the crop, Y up).
    Displacement, velocity and acceleration are finite differences against the
    previous frame of the same stream, so frames must be written in order.

    Parameters:
    - path: str, output directory, one `<body>.csv` is created per body.
    - crop: (x, y, width, height) crop region of the picture.
    - pixels_per_cm: float, number of pixels in one centimeter.
    - bodies: iterable of stream names.
    - frame_duration: float, time between two frames in seconds.
    """

    def __init__(self, path, crop, pixels_per_cm, bodies, frame_duration=config.frame_duration):
        self.crop = crop
        self.crop_height = crop[3]
        self.ppcm = float(pixels_per_cm)
        self.frame_duration = float(frame_duration)

        # Last recorded centers of mass and velocities per stream
        self._last_cms = {}
        self._last_vcms = {}

        self._files = {}
        self._writers = {}
        self._closed = False

        try:
            for body in bodies:
                f = open(os.path.join(path, body + ".csv"), "w", newline="", encoding="utf-8")
                self._files[body] = f
                self._writers[body] = csv.writer(f, lineterminator="\n")
                self._writers[body].writerow(HEADER)
                self._last_cms[body] = None
                self._last_vcms[body] = None
        except OSError as exc:
            self.close()
            raise OutputWriteError(f"Could not open output streams in {path}: {exc}") from exc

        logger.debug("Opened %d output streams in %s", len(self._files), path)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def reframe(self, p):
        return div(point(p[0], self.crop_height - p[1]), self.ppcm)

    def unreframe(self, p):
        x, y = np.asarray(p, dtype=float) * self.ppcm
        return point(x, self.crop_height - y)

    def write_frame(self, body, frame, cm, weight, lever_reference=None):
        """
        Writes a single frame for a body.

        Parameters:
        - body: str, stream name.
        - frame: int, frame index.
        - cm: (x, y) center of mass in image coordinates.
        - weight: float, mass of the free body in kilograms.
        - lever_reference: optional (x, y) in image coordinates, the axis the lever arm is measured to.

        Returns:
        - list, the row that was written.
        """
        if body not in self._writers:
            raise UnknownStreamError(body)
        if self._closed:
            raise OutputWriteError(f"Stream {body} is already closed")

        cm = self.reframe(cm)

        last_cm = self._last_cms[body]
        last_vcm = self._last_vcms[body]

        dd = sub(cm, last_cm) if last_cm is not None else point(0, 0)
        dv = div(dd, self.frame_duration)
        da = div(sub(dv, last_vcm), self.frame_duration) if last_vcm is not None else point(0, 0)

        self._last_cms[body] = cm
        self._last_vcms[body] = dv

        # da is in cm/s^2 while gravity is in m/s^2, kept as is to match reference outputs
        fg = weight * (da[1] + config.gravity)

        lever_arm = 0.0
        if lever_reference is not None:
            # The line of force points straight down, so the perpendicular
            # distance to the reference is the horizontal distance
            lr = self.reframe(lever_reference)
            lever_arm = abs(lr[0] - cm[0])

        row = [int(frame)] + [nf(v) for v in (cm[0], cm[1], dd[0], dd[1], dv[0], dv[1], da[0], da[1], fg, lever_arm)]

        try:
            self._writers[body].writerow(row)
        except OSError as exc:
            raise OutputWriteError(f"Could not write frame {frame} to stream {body}: {exc}") from exc

        return row

    def close(self):
        if self._closed:
            return
        self._closed = True

        errors = []
        for body, f in self._files.items():
            # close() releases the file even when its final flush fails
            try:
                try:
                    f.flush()
                finally:
                    f.close()
            except OSError as exc:
                errors.append((body, exc))

        if errors:
            body, exc = errors[0]
            raise OutputWriteError(f"Could not flush stream {body}: {exc}") from exc
