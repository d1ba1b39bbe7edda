"""Error types raised by config infrastructure."""

from pathlib import Path

from ux_eval.core.errors import UxEvalError


class ConfigValidationError(UxEvalError):
    """Raised when the loaded config fails schema or syntax validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(UxEvalError):
    """Raised when the config file cannot be opened or read."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Failed to load config: file not found: {path}")
