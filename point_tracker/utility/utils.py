import os

import cv2
import numpy as np


# Points are numpy arrays of shape (2,), rectangles are (x, y, width, height)
# tuples in image pixels with the origin in the top-left corner.
def point(x, y):
    return np.array([x, y], dtype=float)


def add(p, other):
    return np.asarray(p, dtype=float) + np.asarray(other, dtype=float)


def sub(p, other):
    return np.asarray(p, dtype=float) - np.asarray(other, dtype=float)


def mult(p, fac):
    return fac * np.asarray(p, dtype=float)


def div(p, fac):
    return np.asarray(p, dtype=float) / fac


def walk(start, end, frac):
    # Traverse a fraction of the segment going from start to end
    return add(start, mult(sub(end, start), frac))


def center(rect):
    x, y, width, height = rect
    return point(x + width / 2, y + height / 2)


def rect_points(xmin, ymin, xmax, ymax):
    # Rectangle from two annotated corners
    return (xmin, ymin, xmax - xmin, ymax - ymin)


def frame_path(picture_dir, index):
    return os.path.join(picture_dir, f"{index:02d}.jpg")


def load_frame(picture_dir, index):
    path = frame_path(picture_dir, index)
    frame = cv2.imread(path)
    if frame is None:
        raise FileNotFoundError(f"Could not read frame {index}: {path}")
    return frame


def load_frames(picture_dir, num_frames):
    # Frames are numbered from 01.jpg onwards
    for index in range(1, num_frames + 1):
        yield load_frame(picture_dir, index)
