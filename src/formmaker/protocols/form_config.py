"""Base configuration for form validation and state handling.

Provides hooks for applications to customize engine-wide defaults.
"""

from typing import Optional, Tuple
from dataclasses import dataclass, field

from formmaker.validation.rules import PhoneRule

# Placeholder texts older dropdowns used as their first "option". Not
# reserved by default; pass them as reserved_placeholders to opt in.
LEGACY_PLACEHOLDERS: Tuple[str, ...] = (
    "Select a Country",
    "Select a State",
    "Select a Status",
    "Select an Option",
)


@dataclass
class FormMakerConfig:
    """Engine-wide defaults.

    Applications can subclass this or construct one with overrides.

    Attributes:
        phone_rule: Phone length policy for fields that do not declare one
        reserved_placeholders: Dropdown values always treated as "no selection"
        date_format: strftime pattern for date fields without their own
        date_time_format: strftime pattern for date-time fields without their own
        debug_dispatch: Trace every dispatch and state change at INFO level
    """

    phone_rule: PhoneRule = field(default_factory=PhoneRule.at_most)
    reserved_placeholders: Tuple[str, ...] = ()
    date_format: str = "%b %d, %Y"
    date_time_format: str = "%b %d, %Y %H:%M"
    debug_dispatch: bool = False


# Global config instance (set by application)
_form_config: Optional[FormMakerConfig] = None


def set_form_config(config: Optional[FormMakerConfig]) -> None:
    """Set the global configuration. ``None`` restores the defaults.

    Args:
        config: FormMakerConfig instance or None
    """
    global _form_config
    _form_config = config


def get_form_config() -> FormMakerConfig:
    """Get the current configuration.

    Returns:
        Current FormMakerConfig or default if not set
    """
    if _form_config is None:
        return FormMakerConfig()
    return _form_config
