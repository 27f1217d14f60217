import numpy as np
import pytest

from point_tracker.classes.body_landmarks import BodySegment, BodySegmentGroups
from point_tracker.classes.cm_calculator import CmCalculator
from point_tracker.errors import (EmptySubsetError, MissingLandmarkError, UnknownLandmarkError,
                                  UnknownPartError)

LANDMARKS = {
    "Shoulder": (100, 100),
    "Elbow": (120, 140),
    "Wrist": (130, 180),
    "Hip": (100, 200),
    "Knee": (100, 300),
    "Ankle": (100, 400),
    "Foot": (110, 410),
}


def point_rect(x, y):
    # Zero sized rectangle centered on the point
    return (x, y, 0, 0)


@pytest.fixture
def calculator():
    calc = CmCalculator(69)
    calc.update(list(LANDMARKS), [point_rect(*p) for p in LANDMARKS.values()])
    return calc


def test_segment_cms(calculator):
    pcms = calculator.get_pcms()

    assert set(pcms) == {"Head", "UpperArm", "Forearm", "Hand", "Trunk", "Thigh", "Shank", "Foot"}
    np.testing.assert_allclose(pcms["Head"], [88, 100 - 23.576])
    np.testing.assert_allclose(pcms["UpperArm"], [111.5, 123.0], atol=0.02)
    np.testing.assert_allclose(pcms["Forearm"], [124.559, 158.236])
    np.testing.assert_allclose(pcms["Hand"], [156.159, 180])
    np.testing.assert_allclose(pcms["Trunk"], [100, 141.51])
    np.testing.assert_allclose(pcms["Thigh"], [100, 236.12])
    np.testing.assert_allclose(pcms["Shank"], [100, 344.16])
    np.testing.assert_allclose(pcms["Foot"], [90.07, 410])


def test_global_cm_weight_is_total_mass(calculator):
    gcm, weight = calculator.get_gcm()

    assert weight == pytest.approx(69)
    assert gcm.shape == (2,)


def test_free_body_weights(calculator):
    assert calculator.get_ankle_pcm()[1] == pytest.approx(69 * 0.97)
    assert calculator.get_knee_pcm()[1] == pytest.approx(69 * 0.88)
    assert calculator.get_hip_pcm()[1] == pytest.approx(69 * 0.64)


def test_free_body_cm_is_mass_weighted(calculator):
    pcms = calculator.get_pcms()
    cm, weight = calculator.free_body_pcm(["Trunk", "Head"])

    expected = (pcms["Trunk"] * 0.43 + pcms["Head"] * 0.07) / 0.5
    np.testing.assert_allclose(cm, expected)
    assert weight == pytest.approx(69 * 0.5)


def test_free_body_is_order_independent(calculator):
    parts = ["Head", "UpperArm", "Forearm", "Hand", "Trunk", "Thigh"]

    cm1, w1 = calculator.free_body_pcm(parts)
    cm2, w2 = calculator.free_body_pcm(reversed(parts))
    cm3, w3 = calculator.free_body_pcm(set(parts) | {"Thigh"})

    np.testing.assert_array_equal(cm1, cm2)
    np.testing.assert_array_equal(cm1, cm3)
    assert w1 == w2 == w3
    np.testing.assert_array_equal(cm1, calculator.get_knee_pcm()[0])


def test_free_body_accepts_enum_members(calculator):
    cm, weight = calculator.free_body_pcm(BodySegmentGroups.ABOVE_HIP)
    np.testing.assert_array_equal(cm, calculator.get_hip_pcm()[0])
    assert calculator.free_body_pcm([BodySegment.FOOT])[1] == pytest.approx(69 * 0.03)


def test_update_is_deterministic():
    rects = [point_rect(*p) for p in LANDMARKS.values()]
    first = CmCalculator(69)
    second = CmCalculator(69)
    first.update(list(LANDMARKS), rects)
    second.update(list(LANDMARKS), rects)

    np.testing.assert_array_equal(first.get_gcm()[0], second.get_gcm()[0])


def test_update_replaces_previous_frame(calculator):
    before = calculator.get_pcms()["Shank"]
    calculator.update(["Ankle"], [point_rect(100, 500)])

    after = calculator.get_pcms()["Shank"]
    assert after[1] > before[1]
    np.testing.assert_allclose(calculator.get_location("Ankle"), [100, 500])


def test_location_is_rect_center(calculator):
    calculator.update(["Wrist"], [(10, 20, 30, 40)])
    np.testing.assert_allclose(calculator.get_location("Wrist"), [25, 40])


def test_missing_landmark():
    calc = CmCalculator()
    with pytest.raises(MissingLandmarkError) as excinfo:
        calc.update(["Wrist", "Elbow"], [point_rect(0, 0), point_rect(1, 1)])

    assert "Shoulder" in excinfo.value.missing
    assert calc.get_pcms() is None
    with pytest.raises(MissingLandmarkError):
        calc.get_gcm()


def test_landmarks_accumulate_across_updates():
    calc = CmCalculator()
    names = list(LANDMARKS)
    with pytest.raises(MissingLandmarkError):
        calc.update(names[:3], [point_rect(*LANDMARKS[n]) for n in names[:3]])

    calc.update(names[3:], [point_rect(*LANDMARKS[n]) for n in names[3:]])
    assert calc.get_gcm()[1] == pytest.approx(69)


def test_unknown_and_empty_queries(calculator):
    with pytest.raises(EmptySubsetError):
        calculator.free_body_pcm([])
    with pytest.raises(UnknownPartError):
        calculator.free_body_pcm(["Head", "Neck"])
    with pytest.raises(UnknownLandmarkError):
        calculator.get_location("Nose")
    with pytest.raises(UnknownLandmarkError):
        calculator.update(["Nose"], [point_rect(0, 0)])


def test_location_never_set():
    calc = CmCalculator()
    with pytest.raises(UnknownLandmarkError):
        calc.get_location("Wrist")


def test_mismatched_update_lengths():
    calc = CmCalculator()
    with pytest.raises(ValueError):
        calc.update(["Wrist", "Elbow"], [point_rect(0, 0)])


def test_unknown_name_leaves_previous_frame_untouched(calculator):
    before = calculator.get_pcms()

    with pytest.raises(UnknownLandmarkError):
        calculator.update(["Shoulder", "Nose"], [point_rect(500, 500), point_rect(0, 0)])

    np.testing.assert_allclose(calculator.get_location("Shoulder"), LANDMARKS["Shoulder"])
    after = calculator.get_pcms()
    for name, pcm in before.items():
        np.testing.assert_array_equal(after[name], pcm)


def test_single_part_name(calculator):
    cm, weight = calculator.free_body_pcm("Head")

    np.testing.assert_allclose(cm, calculator.get_pcms()["Head"])
    assert weight == pytest.approx(69 * 0.07)
    assert calculator.free_body_pcm(BodySegment.TRUNK)[1] == pytest.approx(69 * 0.43)
