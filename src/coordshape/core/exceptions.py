"""Exception hierarchy for shape analysis."""


class ShapeAnalysisError(Exception):
    """Base class for all errors raised by the shape analysis engine."""


class SizeMismatchError(ShapeAnalysisError, ValueError):
    """Actual and reference point sets have different lengths.

    Raised per reference geometry. Ranking catches it, records the geometry
    as skipped and carries on with the remaining references.
    """

    def __init__(self, actual_size: int, reference_size: int, name: str = ""):
        self.actual_size = actual_size
        self.reference_size = reference_size
        self.name = name
        label = f" for {name}" if name else ""
        super().__init__(
            f"Point count mismatch{label}: {actual_size} actual vs "
            f"{reference_size} reference points"
        )

    def __reduce__(self):
        # Keeps the error picklable across worker processes
        return (self.__class__, (self.actual_size, self.reference_size, self.name))


class CoordinationSphereError(ShapeAnalysisError, ValueError):
    """The coordination sphere handed to an analysis run is unusable."""


class DegenerateInputError(CoordinationSphereError):
    """A coordinating point coincides with the metal center."""


class InvalidReferenceError(ShapeAnalysisError, ValueError):
    """A reference geometry has a vertex at its own center.

    Raised per reference geometry and recorded as skipped by ranking.
    """
