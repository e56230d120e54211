"""
Unified Field Change Dispatcher.

Every value change in a FormState is routed through here: the value is
stored, auto-validation runs according to the form's mode, and listeners are
notified with an immutable FieldChangeEvent.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from formmaker.protocols import get_form_config
from formmaker.services.flag_context_manager import FlagContextManager, StateFlag

if TYPE_CHECKING:
    from formmaker.forms.form_state import FormState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldChangeEvent:
    """Immutable event representing a field change."""
    field_key: Optional[str]               # None for bulk operations (clear/reset)
    value: Optional[str]                   # New value; None for bulk operations
    source: 'FormState'                    # Where the change originated
    is_reset: bool = False                 # True for clear/reset
    user_input: bool = False               # True when the change came from typing or a picker


class FieldChangeDispatcher:
    """Singleton dispatcher for all field changes. Stateless."""

    _instance = None

    @classmethod
    def instance(cls) -> 'FieldChangeDispatcher':
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def dispatch(self, event: FieldChangeEvent) -> None:
        """Handle a field change event."""
        source = event.source
        debug = get_form_config().debug_dispatch

        if debug:
            reset_tag = " [RESET]" if event.is_reset else ""
            logger.info(f"DISPATCH{reset_tag}: {event.field_key} = {event.value!r:.50}")

        # Reentrancy guard: a listener writing back into the form is stored
        # but does not re-notify.
        if FlagContextManager.is_flag_set(source, StateFlag.DISPATCHING):
            if event.field_key is not None:
                source._store(event.field_key, event.value)
            logger.debug(f"Nested dispatch for {event.field_key!r} stored without notification")
            return

        with FlagContextManager.manage_flags(source, _dispatching=True):
            # 1. Update the data model (bulk events already wrote their values)
            if event.field_key is not None:
                source._store(event.field_key, event.value)
                if FlagContextManager.is_flag_set(source, StateFlag.IN_RESET):
                    # Part of a bulk operation; one reset event follows.
                    return

            # 2. Auto-validate
            source._auto_validate(event)

            # 3. Notify listeners
            for listener in list(source._listeners):
                listener(event)
            if source.on_changed is not None:
                source.on_changed(source.values)
            if debug:
                logger.info(f"  Notified {len(source._listeners)} listener(s)")
