"""Error types raised by finding infrastructure."""

from ux_eval.core.errors import UxEvalError


class FindingLoadError(UxEvalError):
    """Raised when an analysis-set or reference file cannot be loaded or is malformed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to load findings: {reason}")
