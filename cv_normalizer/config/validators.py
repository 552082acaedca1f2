"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for values that are valid but probably unintended.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    # Empty fallbacks silently produce blank mandatory fields
    fallbacks = config_dict.get("fallbacks", {})
    if isinstance(fallbacks, dict):
        for name, value in sorted(fallbacks.items()):
            if isinstance(value, str) and not value.strip():
                warning_messages.append(
                    f"Fallback '{name}' is empty; entries missing this field will render blank"
                )

    skills = config_dict.get("skills", {})
    if isinstance(skills, dict):
        soft_label = skills.get("soft_category_label")
        if isinstance(soft_label, str) and soft_label.strip() and "soft" not in soft_label.lower():
            warning_messages.append(
                f"soft_category_label '{soft_label}' does not contain 'soft'; canonical input "
                "without a kind tag will treat that group as technical"
            )

    summary = config_dict.get("summary", {})
    if isinstance(summary, dict):
        limit = summary.get("skill_preview_limit")
        if isinstance(limit, int) and limit > 20:
            warning_messages.append(
                f"Large skill_preview_limit ({limit}) may crowd the confirmation preview"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
