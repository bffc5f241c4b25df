"""
Exception types raised while building polygons or measuring them.
"""


class LocationCheckerError(ValueError):
    """Base class for every error raised by location_checker."""


class DegenerateInputError(LocationCheckerError):
    """Fewer than 3 distinct vertices, or the vertices do not enclose an area."""


class RangeValidationError(LocationCheckerError):
    """A longitude or latitude lies outside its valid range."""


class GeodesicConvergenceError(LocationCheckerError):
    """The Vincenty iteration did not converge within the configured cap."""

    def __init__(self, iterations: int):
        super().__init__(f"Vincenty iteration did not converge after {iterations} iterations")
        self.iterations = iterations
