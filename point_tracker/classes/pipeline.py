import logging
import os

from .. import config
from .cm_calculator import CmCalculator
from .data_writer import DataWriter
from .drawer import Drawer
from .tracker import MatchingTracker, search_window

logger = logging.getLogger(__name__)


class PointTracker:
    """
    Tracks the landmarks through a frame sequence and writes the kinematics
    of every free body.

    Parameters:
    - boxes: list of (landmark name, rect) template boxes in the first frame.
    - crop: (x, y, width, height) output region.
    - pixels_per_cm: float, image scale.
    - total_mass: float, subject mass in kilograms.
    - frame_duration: float, time between frames in seconds.
    - streams: dict, stream name -> lever reference landmark name or None.
    """

    def __init__(self, boxes, crop, pixels_per_cm, total_mass=config.total_mass,
                 frame_duration=config.frame_duration, streams=None):
        self.names = [name for name, _ in boxes]
        self.boxes = [rect for _, rect in boxes]
        self.crop = crop
        self.pixels_per_cm = pixels_per_cm
        self.frame_duration = frame_duration
        self.streams = dict(config.streams if streams is None else streams)

        self.calculator = CmCalculator(total_mass)

        # Free body PCM per stream name
        self.free_bodies = {
            "global": self.calculator.get_gcm,
            "ankle": self.calculator.get_ankle_pcm,
            "knee": self.calculator.get_knee_pcm,
            "hip": self.calculator.get_hip_pcm,
        }

        unknown = [name for name in self.streams if name not in self.free_bodies]
        if unknown:
            raise ValueError(f"No free body defined for streams: {', '.join(unknown)}")

    def __call__(self, frames, out_dir, annotate=True):
        os.makedirs(out_dir, exist_ok=True)

        plot = Drawer(self.crop) if annotate else None
        trackers = None
        rects = list(self.boxes)
        frame_index = 0

        with DataWriter(out_dir, self.crop, self.pixels_per_cm, list(self.streams),
                        frame_duration=self.frame_duration) as writer:
            for frame in frames:
                frame_index += 1

                # Templates come from the first frame
                if trackers is None:
                    trackers = [MatchingTracker.from_frame(frame, rect) for rect in rects]

                rects = self.track_frame(trackers, rects, frame, frame_index)
                self.calculator.update(self.names, rects)
                self.write_frame(writer, frame_index)

                if plot is not None:
                    annotated = plot(frame, rects, self.calculator.get_pcms(), self.calculator.get_gcm()[0])
                    plot.save(os.path.join(out_dir, f"{frame_index:02d}_annotated.jpg"), annotated)

        logger.info("Processed %d frames into %s", frame_index, out_dir)
        return frame_index

    def track_frame(self, trackers, rects, frame, frame_index):
        new_rects = []
        for name, tracker, rect in zip(self.names, trackers, rects):
            window = search_window(rect, frame.shape)
            new_rect, found = tracker.track(rect, window, frame)

            # Keep the last known rectangle when the landmark is lost
            if not found:
                logger.warning("Lost %s @ frame %d", name, frame_index)

            new_rects.append(new_rect)

        return new_rects

    def write_frame(self, writer, frame_index):
        for body, reference in self.streams.items():
            cm, weight = self.free_bodies[body]()
            lever_reference = self.calculator.get_location(reference) if reference else None
            writer.write_frame(body, frame_index, cm, weight, lever_reference)
