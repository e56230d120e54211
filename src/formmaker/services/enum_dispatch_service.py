"""
Abstract base class for enum-driven dispatch.

Services using this pattern:
1. Define (or reuse) an enum of variants
2. Register one handler per variant
3. Determine the variant from the input
4. Dispatch to that variant's handler

Services using this pattern:
- FieldValidator (FieldType enum)
- InputFormatterService (FieldType enum)

Example:
    class Shape(Enum):
        CIRCLE = "circle"
        SQUARE = "square"

    class AreaService(EnumDispatchService[Shape]):
        def __init__(self):
            super().__init__()
            self._register_handlers({
                Shape.CIRCLE: self._area_circle,
                Shape.SQUARE: self._area_square,
            }, exhaustive_for=Shape)

        def _determine_strategy(self, shape, size) -> Shape:
            return shape

        def _area_circle(self, shape, size): ...
        def _area_square(self, shape, size): ...
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TypeVar, Generic, Dict, Callable, Any, Optional, Type
import logging

from formmaker.exceptions import DispatchConfigurationError

logger = logging.getLogger(__name__)

StrategyEnum = TypeVar('StrategyEnum', bound=Enum)


class EnumDispatchService(ABC, Generic[StrategyEnum]):
    """
    Base class for services using enum-driven dispatch.

    Subclasses must:
    1. Register handlers in __init__() using _register_handlers()
    2. Implement _determine_strategy() to select the variant for an input

    dispatch() forwards all of its arguments to the selected handler.
    """

    def __init__(self):
        self._handlers: Dict[StrategyEnum, Callable[..., Any]] = {}

    def _register_handlers(
        self,
        handlers: Dict[StrategyEnum, Callable[..., Any]],
        exhaustive_for: Optional[Type[StrategyEnum]] = None,
    ) -> None:
        """
        Register variant handlers.

        Args:
            handlers: Mapping of enum members to handler callables
            exhaustive_for: When given, every member of this enum must have a handler

        Raises:
            DispatchConfigurationError: If handlers is empty or not exhaustive
        """
        name = self.__class__.__name__
        if not handlers:
            raise DispatchConfigurationError(f"{name}: Handler registry cannot be empty")

        if exhaustive_for is not None:
            missing = [member for member in exhaustive_for if member not in handlers]
            if missing:
                raise DispatchConfigurationError(
                    f"{name}: No handler registered for {[m.name for m in missing]}"
                )

        self._handlers = dict(handlers)
        logger.debug(f"{name}: Registered {len(handlers)} handlers")

    @abstractmethod
    def _determine_strategy(self, *args, **kwargs) -> StrategyEnum:
        """Return the enum member whose handler should process this input."""

    def dispatch(self, *args, **kwargs) -> Any:
        """
        Determine the variant and call its handler with the same arguments.

        Raises:
            KeyError: If the determined variant has no registered handler
        """
        strategy = self._determine_strategy(*args, **kwargs)
        try:
            handler = self._handlers[strategy]
        except KeyError:
            raise KeyError(
                f"{self.__class__.__name__}: No handler registered for strategy {strategy}. "
                f"Available strategies: {list(self._handlers.keys())}"
            ) from None
        return handler(*args, **kwargs)

    def get_registered_strategies(self) -> list[StrategyEnum]:
        return list(self._handlers.keys())

    def has_strategy(self, strategy: StrategyEnum) -> bool:
        return strategy in self._handlers
