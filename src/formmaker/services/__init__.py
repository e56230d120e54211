"""
Service layer for form state.

Enum dispatch, change dispatching and flag management shared by the
validator, the input formatters and FormState.
"""

from .enum_dispatch_service import EnumDispatchService
from .flag_context_manager import FlagContextManager, StateFlag
from .field_change_dispatcher import FieldChangeDispatcher, FieldChangeEvent

__all__ = [
    "EnumDispatchService",
    "FlagContextManager",
    "StateFlag",
    "FieldChangeDispatcher",
    "FieldChangeEvent",
]
