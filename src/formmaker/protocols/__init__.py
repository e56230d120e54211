"""Configuration protocols."""

from .form_config import FormMakerConfig, LEGACY_PLACEHOLDERS, get_form_config, set_form_config

__all__ = [
    "FormMakerConfig",
    "LEGACY_PLACEHOLDERS",
    "get_form_config",
    "set_form_config",
]
