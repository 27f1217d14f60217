class PointTrackerError(Exception):
    """Base class for every error raised by point_tracker."""


class MissingLandmarkError(PointTrackerError, KeyError):
    """A segment center of mass was requested before all landmarks were set."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Missing landmarks: {', '.join(self.missing)}")

    def __str__(self):
        return self.args[0]


class UnknownLandmarkError(PointTrackerError, KeyError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown landmark: {name}")

    def __str__(self):
        return self.args[0]


class UnknownPartError(PointTrackerError, KeyError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown body part: {name}")

    def __str__(self):
        return self.args[0]


class UnknownStreamError(PointTrackerError, KeyError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown output stream: {name}")

    def __str__(self):
        return self.args[0]


class EmptySubsetError(PointTrackerError, ValueError):
    pass


class OutputWriteError(PointTrackerError, IOError):
    pass
