"""
Context manager factory for temporary boolean flags on form state.

Pattern:
    Instead of:
        self._in_reset = True
        try:
            # ... logic
        finally:
            self._in_reset = False

    Use:
        with FlagContextManager.manage_flags(self, _in_reset=True):
            # ... logic
"""

from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Set
import logging

logger = logging.getLogger(__name__)


class StateFlag(Enum):
    """
    Registry of valid FormState flags.

    Add new flags here as they're introduced; manage_flags() rejects
    anything not listed.
    """
    IN_RESET = '_in_reset'
    DISPATCHING = '_dispatching'


class FlagContextManager:
    """Sets flags on entry and restores their previous values on exit."""

    VALID_FLAGS: Set[str] = {flag.value for flag in StateFlag}

    @staticmethod
    @contextmanager
    def manage_flags(obj: Any, **flags: bool):
        """
        Set flags for the duration of the block, restoring them even on exception.

        Raises:
            ValueError: If any flag name is not in VALID_FLAGS
        """
        invalid_flags = set(flags) - FlagContextManager.VALID_FLAGS
        if invalid_flags:
            raise ValueError(
                f"Invalid flags: {invalid_flags}. "
                f"Valid flags: {FlagContextManager.VALID_FLAGS}. "
                f"Add new flags to StateFlag enum."
            )

        # Flags must be initialized by the owner; a missing one is a bug.
        prev_values: Dict[str, bool] = {name: getattr(obj, name) for name in flags}
        for flag_name, flag_value in flags.items():
            setattr(obj, flag_name, flag_value)
        try:
            yield
        finally:
            for flag_name, prev_value in prev_values.items():
                setattr(obj, flag_name, prev_value)

    @staticmethod
    @contextmanager
    def reset_context(obj: Any):
        """Suppress per-field change notifications during a bulk reset or clear."""
        with FlagContextManager.manage_flags(obj, **{StateFlag.IN_RESET.value: True}):
            yield

    @staticmethod
    def is_flag_set(obj: Any, flag: StateFlag) -> bool:
        return bool(getattr(obj, flag.value))
