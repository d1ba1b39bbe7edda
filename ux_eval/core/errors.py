"""Base exception class for all ux-eval-specific errors."""


class UxEvalError(Exception):
    """Base class for all ux-eval errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidThresholdError(UxEvalError):
    """Raised when a similarity threshold lies outside the closed interval [0, 1]."""

    def __init__(self, threshold: float) -> None:
        self.threshold = threshold
        super().__init__(
            f"Failed to match findings: threshold must be within [0, 1], got {threshold}"
        )
