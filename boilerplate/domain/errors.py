"""
Error definitions for the generator.

Rules:
- fatal errors abort the run before (or during) generation
- record parse failures are recovered locally as diagnostics, never raised
- every error carries a code from ErrorCodes
"""

from typing import Any


class BoilerplateError(Exception):
    """
    Base error for the generator.

    Usage:
        raise NotFoundError(
            ErrorCodes.TEMPLATES_DIR_NOT_FOUND,
            "Templates directory not found",
            path=str(path),
        )
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """For logs and JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


class ConfigurationError(BoilerplateError):
    """Settings file exists but is empty, unreadable or malformed."""


class NotFoundError(BoilerplateError):
    """Resolved templates directory does not exist."""


class RecordParseError(BoilerplateError):
    """
    A template record failed to deserialize.

    Never propagated out of the loader: it is converted into a
    RecordDiagnostic and the record is skipped.
    """


class UserInputError(BoilerplateError):
    """Command-line input cannot be turned into a UserInput."""


class EmitError(BoilerplateError):
    """Output directory creation or file write failed."""


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """Error code constants. Warning codes never abort a run."""

    # === Configuration ===
    CONFIG_EMPTY = "CONFIG_EMPTY"
    CONFIG_INVALID = "CONFIG_INVALID"

    # === Templates ===
    TEMPLATES_DIR_NOT_FOUND = "TEMPLATES_DIR_NOT_FOUND"
    RECORD_PARSE_ERROR = "RECORD_PARSE_ERROR"

    # === User input ===
    DUPLICATE_VARIABLE = "DUPLICATE_VARIABLE"

    # === Emit ===
    EMIT_FAILED = "EMIT_FAILED"

    # === Warnings (run log only) ===
    RECORD_SKIPPED = "RECORD_SKIPPED"
    UNRESOLVED_PLACEHOLDER = "UNRESOLVED_PLACEHOLDER"
