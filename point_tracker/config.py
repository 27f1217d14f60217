from .utility.utils import rect_points


# === Subject and capture === #

# Total subject mass in kilograms
total_mass = 69

# Frame duration in seconds
frame_duration = 0.22

# Gravitational acceleration used by the vertical force estimate
gravity = 9.81

# Number of frames in a picture directory (01.jpg ... 20.jpg)
num_frames = 20


# === Segment offsets (pixels) === #

# Offsets tuned to the camera framing of the study, not anthropometric ratios.
# Head: about 40x40 px, its center sits 12 px left of the shoulder marker
head_offset = (-12, -0.5894 * 40)
# Hand: 74.74% of the wrist to middle finger tip distance, about 35 px
hand_offset = (0.7474 * 35, 0)
# Foot: heel 40 px left of the marker, toe 10 px right of it
foot_offset = (0.4014 * 50 - 40, 0)


# === Tracking === #

# Search window size as a fraction of the frame size
search_fraction = 0.2
match_threshold = 0.8
registration_threshold = 0.99


# === Output === #

# Stream name -> landmark used as lever arm reference (None: no lever arm)
streams = {
    "global": None,
    "ankle": "Ankle",
    "knee": "Knee",
    "hip": "Hip",
}

out_dir_name = "out"


# === Resolution presets === #

# Template boxes in the first frame, in tracking order
boxes_hd = [
    ("Wrist", rect_points(1175, 210, 1204, 234)),
    # Enlarged from 1057 205 1082 225
    ("Elbow", rect_points(1052, 200, 1087, 230)),
    ("Shoulder", rect_points(935, 168, 963, 189)),
    ("Hip", rect_points(905, 402, 935, 430)),
    ("Knee", rect_points(927, 625, 951, 650)),
    ("Ankle", rect_points(895, 840, 916, 856)),
    ("Foot", rect_points(961, 873, 984, 889)),
]

boxes_sd = [
    ("Wrist", rect_points(484, 67, 500, 79)),
    ("Elbow", rect_points(436, 67, 451, 79)),
    ("Shoulder", rect_points(384, 61, 398, 72)),
    ("Hip", rect_points(373, 165, 387, 179)),
    ("Knee", rect_points(381, 254, 396, 268)),
    ("Ankle", rect_points(362, 341, 379, 352)),
    ("Foot", rect_points(391, 355, 405, 366)),
]

presets = {
    "hd": {
        "boxes": boxes_hd,
        "crop": (550, 0, 950, 950),
        "pixels_per_cm": 4.3,
    },
    "sd": {
        "boxes": boxes_sd,
        "crop": (250, 0, 350, 380),
        "pixels_per_cm": 1.75,
    },
}
