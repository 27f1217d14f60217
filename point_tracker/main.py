import logging
import os
import sys

from . import config
from .classes.pipeline import PointTracker
from .utility.utils import load_frames


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv

    if not args:
        print("Usage: python -m point_tracker.main <picture_dir> [hd|sd]")
        sys.exit(1)

    picture_dir = args[0]
    resolution = args[1] if len(args) > 1 else "hd"

    if resolution not in config.presets:
        print(f"Unknown resolution: {resolution}. Please use one of: {', '.join(config.presets)}.")
        sys.exit(1)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    preset = config.presets[resolution]
    out_dir = os.path.join(picture_dir, config.out_dir_name)
    print(f"Processing {config.num_frames} {resolution} frames from: {picture_dir}.")

    tracker = PointTracker(preset["boxes"], preset["crop"], preset["pixels_per_cm"])
    frames = load_frames(picture_dir, config.num_frames)
    count = tracker(frames, out_dir)

    print(f"Wrote {count} frames to: {out_dir}.")
    return count


if __name__ == "__main__":
    main()
