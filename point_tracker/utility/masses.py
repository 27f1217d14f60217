from ..classes.body_landmarks import BodySegment

# Anthropometric mass fractions for body segments (% of total body mass, one side)
MASS_FRACTIONS = {
    'head': 0.07,
    'upper_arm': 0.04,
    'forearm': 0.025,
    'hand': 0.005,
    'trunk': 0.43,
    'upper_leg': 0.12,
    'lower_leg': 0.045,
    'foot': 0.015
}


class Weights:
    """
    Absolute masses of the body segments for a subject.

    Every value is a fixed fraction of the total mass. Bilateral segments
    expose both the single side value (e.g. `upper_arm`) and the value for
    both sides (e.g. `upper_arms`).

    Parameters:
    - total: float, total body mass in kilograms.
    """

    def __init__(self, total):
        self._total = float(total)

    @property
    def total(self):
        return self._total

    @property
    def head(self):
        return MASS_FRACTIONS['head'] * self._total

    @property
    def upper_arm(self):
        return MASS_FRACTIONS['upper_arm'] * self._total

    @property
    def upper_arms(self):
        return 2 * self.upper_arm

    @property
    def forearm(self):
        return MASS_FRACTIONS['forearm'] * self._total

    @property
    def forearms(self):
        return 2 * self.forearm

    @property
    def hand(self):
        return MASS_FRACTIONS['hand'] * self._total

    @property
    def hands(self):
        return 2 * self.hand

    @property
    def trunk(self):
        return MASS_FRACTIONS['trunk'] * self._total

    @property
    def upper_leg(self):
        return MASS_FRACTIONS['upper_leg'] * self._total

    @property
    def upper_legs(self):
        return 2 * self.upper_leg

    @property
    def lower_leg(self):
        return MASS_FRACTIONS['lower_leg'] * self._total

    @property
    def lower_legs(self):
        return 2 * self.lower_leg

    @property
    def foot(self):
        return MASS_FRACTIONS['foot'] * self._total

    @property
    def feet(self):
        return 2 * self.foot


def create_mass_dict(weights):
    # Segment CMs are tracked on one side only, so bilateral segments carry both sides' mass
    return {
        BodySegment.HEAD: weights.head,
        BodySegment.UPPER_ARM: weights.upper_arms,
        BodySegment.FOREARM: weights.forearms,
        BodySegment.HAND: weights.hands,
        BodySegment.TRUNK: weights.trunk,
        BodySegment.THIGH: weights.upper_legs,
        BodySegment.SHANK: weights.lower_legs,
        BodySegment.FOOT: weights.feet
    }
