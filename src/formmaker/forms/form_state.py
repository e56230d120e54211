"""
Framework-agnostic form state.

FormState owns one raw string value per declared field and exposes the
programmatic operations a rendered form needs: get/set, clear, reset,
validate and submit. It never renders anything; a UI layer binds its widgets
to these operations and listens for FieldChangeEvents.

Usage:
    form = FormState(
        [FieldSpec(key="email", label="Email", field_type=FieldType.EMAIL, is_required=True)],
        on_submit=save,
    )
    form.enter_text("email", "user@example.com")
    if form.submit():
        ...
"""

from __future__ import annotations

import datetime
import logging
from enum import Enum
from types import MappingProxyType
from typing import Callable, Dict, Iterable, List, Mapping, Optional

from formmaker.exceptions import DuplicateFieldKeyError, SelectionError
from formmaker.forms.input_formatters import filter_input
from formmaker.models.field_spec import FieldSpec
from formmaker.models.field_type import FieldType
from formmaker.services.field_change_dispatcher import FieldChangeDispatcher, FieldChangeEvent
from formmaker.services.flag_context_manager import FlagContextManager
from formmaker.validation.errors import FieldError
from formmaker.validation.validator import check

logger = logging.getLogger(__name__)

ValuesCallback = Callable[[Mapping[str, str]], None]
ChangeListener = Callable[[FieldChangeEvent], None]


class AutoValidateMode(Enum):
    """When FormState revalidates on its own."""
    DISABLED = "disabled"                         # only on validate()/submit()
    ALWAYS = "always"                             # every change revalidates the whole form
    ON_USER_INTERACTION = "on_user_interaction"   # fields the user has touched


class FormState:
    """Value holder and operation surface for one form."""

    def __init__(
        self,
        fields: Iterable[FieldSpec],
        on_changed: Optional[ValuesCallback] = None,
        on_submit: Optional[ValuesCallback] = None,
        auto_validate: AutoValidateMode = AutoValidateMode.DISABLED,
    ):
        self._fields: Dict[str, FieldSpec] = {}
        for spec in fields:
            if spec.key in self._fields:
                raise DuplicateFieldKeyError(spec.key)
            self._fields[spec.key] = spec

        self.on_changed = on_changed
        self.on_submit = on_submit
        self.auto_validate = auto_validate

        self._values: Dict[str, str] = {key: spec.initial_text for key, spec in self._fields.items()}
        self._errors: Dict[str, FieldError] = {}
        self._obscured: Dict[str, bool] = {
            key: spec.should_obscure_text for key, spec in self._fields.items()
        }
        self._touched: set = set()
        self._listeners: List[ChangeListener] = []

        # Flags managed by FlagContextManager
        self._in_reset = False
        self._dispatching = False

        logger.debug(f"FormState created with {len(self._fields)} field(s)")

    # ==================== INTROSPECTION ====================

    @property
    def fields(self) -> List[FieldSpec]:
        return list(self._fields.values())

    def field(self, key: str) -> Optional[FieldSpec]:
        return self._fields.get(key)

    @property
    def values(self) -> Mapping[str, str]:
        """Read-only view of current values."""
        return MappingProxyType(self._values)

    @property
    def errors(self) -> Mapping[str, FieldError]:
        """Errors from the last validation pass, keyed by field."""
        return MappingProxyType(self._errors)

    def error_message(self, key: str) -> Optional[str]:
        error = self._errors.get(key)
        return None if error is None else error.message

    def get_value(self, key: str) -> Optional[str]:
        return self._values.get(key)

    # ==================== LISTENERS ====================

    def add_listener(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ==================== MUTATIONS ====================

    def set_value(self, key: str, value: str) -> None:
        """Programmatic write. Unknown keys are ignored."""
        if key not in self._fields:
            logger.warning(f"set_value ignored for unknown field {key!r}")
            return
        self._dispatch(key, value, user_input=False)

    def enter_text(self, key: str, text: str) -> None:
        """User typing: the field's input filter runs before the value is stored.

        Picker fields (dropdown, date, date-time, time) take no typed input;
        use the select_* operations or set_value instead.
        """
        spec = self._require_field(key)
        if spec.field_type.is_picker:
            raise SelectionError(
                f"Field {key!r} is a {spec.field_type.value} picker and takes no typed input"
            )
        self._dispatch(key, filter_input(spec, text), user_input=True)

    def select_option(self, key: str, option: str) -> None:
        spec = self._require_field(key, FieldType.DROPDOWN)
        if spec.dropdown_options is not None and option not in spec.dropdown_options:
            raise SelectionError(f"{option!r} is not an option of field {key!r}")
        self._dispatch(key, option, user_input=True)

    def select_date(self, key: str, value: datetime.date) -> None:
        spec = self._require_field(key, FieldType.DATE)
        self._check_range(spec, value)
        self._dispatch(key, spec.format_date(value), user_input=True)

    def select_time(self, key: str, value: datetime.time) -> None:
        spec = self._require_field(key, FieldType.TIME)
        self._dispatch(key, spec.format_time(value), user_input=True)

    def select_date_time(self, key: str, date_value: datetime.date, time_value: datetime.time) -> None:
        spec = self._require_field(key, FieldType.DATE_TIME)
        self._check_range(spec, date_value)
        self._dispatch(key, spec.format_date_time(date_value, time_value), user_input=True)

    def clear(self) -> None:
        """Empty every field."""
        with FlagContextManager.reset_context(self):
            for key in self._fields:
                self._dispatch(key, "", user_input=False)
        self._dispatch_bulk()

    def reset(self) -> None:
        """Restore initial values and forget errors and interaction state."""
        with FlagContextManager.reset_context(self):
            for key, spec in self._fields.items():
                self._dispatch(key, spec.initial_text, user_input=False)
        self._errors.clear()
        self._touched.clear()
        self._dispatch_bulk()

    # ==================== OBSCURE TEXT ====================

    def is_obscured(self, key: str) -> bool:
        return self._obscured.get(key, False)

    def toggle_obscure_text(self, key: str) -> bool:
        self._require_field(key)
        self._obscured[key] = not self._obscured[key]
        return self._obscured[key]

    # ==================== VALIDATION ====================

    def validate_field(self, key: str) -> Optional[FieldError]:
        spec = self._require_field(key)
        error = check(spec, self._values.get(key))
        if error is None:
            self._errors.pop(key, None)
        else:
            self._errors[key] = error
        return error

    def validate(self) -> bool:
        """Validate every field; True when all pass."""
        for key in self._fields:
            self.validate_field(key)
        if self._errors:
            logger.debug(f"Validation failed for {sorted(self._errors)}")
        return not self._errors

    def submit(self) -> bool:
        """Validate and, when valid, hand the values to on_submit."""
        if not self.validate():
            return False
        if self.on_submit is not None:
            self.on_submit(self.values)
        return True

    # ==================== INTERNALS ====================

    def _require_field(self, key: str, field_type: Optional[FieldType] = None) -> FieldSpec:
        spec = self._fields.get(key)
        if spec is None:
            raise KeyError(f"Unknown field {key!r}")
        if field_type is not None and spec.field_type is not field_type:
            raise SelectionError(
                f"Field {key!r} is {spec.field_type.value}, not {field_type.value}"
            )
        return spec

    @staticmethod
    def _check_range(spec: FieldSpec, value: datetime.date) -> None:
        if not spec.contains_date(value):
            raise SelectionError(
                f"{value.isoformat()} is outside {spec.first_date} - {spec.last_date} for field {spec.key!r}"
            )

    def _dispatch(self, key: str, value: str, user_input: bool) -> None:
        FieldChangeDispatcher.instance().dispatch(
            FieldChangeEvent(field_key=key, value=value, source=self, user_input=user_input)
        )

    def _dispatch_bulk(self) -> None:
        FieldChangeDispatcher.instance().dispatch(
            FieldChangeEvent(field_key=None, value=None, source=self, is_reset=True)
        )

    def _store(self, key: str, value: Optional[str]) -> None:
        self._values[key] = "" if value is None else value

    def _auto_validate(self, event: FieldChangeEvent) -> None:
        """Called by the dispatcher after a value is stored."""
        if event.user_input and event.field_key is not None:
            self._touched.add(event.field_key)

        if self.auto_validate is AutoValidateMode.ALWAYS:
            self.validate()
        elif self.auto_validate is AutoValidateMode.ON_USER_INTERACTION:
            for key in self._touched:
                self.validate_field(key)
