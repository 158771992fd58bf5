class ScoringError(ValueError):
    """Base error for the scoring engine."""


class InvalidInput(ScoringError):
    """Parallel per-hole inputs that do not line up."""


class InvalidRange(ScoringError):
    """A value outside the range the calculation is defined for."""
