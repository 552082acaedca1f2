"""Custom exceptions for configuration management."""

from typing import List, Optional

from pydantic import ValidationError


class ConfigurationError(Exception):
    """
    Exception raised when configuration cannot be loaded or validated.

    Normalization itself never raises; a bad configuration file is the one
    place where the library refuses to continue. The exception carries the
    individual problems and suggestions for fixing them.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: Primary error message
            errors: List of specific validation errors
            suggestions: List of helpful suggestions to fix the errors
        """
        self.message = message
        self.errors = errors or []
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    @classmethod
    def from_validation_error(cls, exc: ValidationError, source: str) -> "ConfigurationError":
        """
        Convert a pydantic ValidationError into a readable ConfigurationError.

        Args:
            exc: Validation error raised by NormalizerConfig.model_validate
            source: Where the configuration came from (file path or "environment")

        Returns:
            ConfigurationError listing one line per invalid field
        """
        errors = []
        for error in exc.errors():
            field_path = " -> ".join(str(loc) for loc in error["loc"]) or "<root>"
            error_type = error["type"]

            if error_type == "extra_forbidden":
                errors.append(f"Unknown setting: {field_path}")
            elif error_type.endswith("_type") or error_type.endswith("_parsing"):
                errors.append(
                    f"Invalid type for '{field_path}': got {error.get('input')!r}"
                )
            elif error_type == "enum":
                errors.append(f"Invalid value for '{field_path}': {error['msg']}")
            else:
                errors.append(f"{field_path}: {error['msg']}")

        return cls(
            f"Configuration validation failed ({source})",
            errors=errors,
            suggestions=[
                "Review cv_normalizer.example.yaml for the expected format",
                "Remove settings you do not need; every section has defaults",
            ],
        )

    def _format_message(self) -> str:
        parts = [self.message]

        if self.errors:
            parts.append("\nValidation Errors:")
            for i, error in enumerate(self.errors, 1):
                parts.append(f"  {i}. {error}")

        if self.suggestions:
            parts.append("\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"  - {suggestion}")

        return "\n".join(parts)
