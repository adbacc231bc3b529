from typing import Any, Callable, Dict, Iterator, Mapping, Optional

from graphql.pyutils import inspect

from .error import DirectiveConfigurationError

__all__ = ["DirectiveHandler", "HandlerRegistry"]


# A handler is called as handler(next_, source, args, context, info) where next_()
# returns the upstream value and args are the coerced directive arguments.
DirectiveHandler = Callable[..., Any]


class HandlerRegistry(Mapping[str, DirectiveHandler]):
    """Registry of directive handlers.

    An immutable mapping from directive names (without the leading "@") to the
    handlers implementing them. The given handlers are validated when the registry
    is created, so that a malformed registry is detected before any schema is bound.
    """

    __slots__ = ("_handlers",)

    _handlers: Dict[str, DirectiveHandler]

    def __init__(self, handlers: Mapping[str, DirectiveHandler]) -> None:
        if handlers is None:
            raise DirectiveConfigurationError(
                "Expected handler registry to be a mapping, got None."
            )
        if not isinstance(handlers, Mapping):
            if isinstance(handlers, (list, tuple)):
                kind = f"a {type(handlers).__name__}"
            else:
                kind = inspect(handlers)
            raise DirectiveConfigurationError(
                f"Expected handler registry to be a mapping, got {kind}."
            )
        for name, handler in handlers.items():
            if not isinstance(name, str):
                raise DirectiveConfigurationError(
                    f"Expected directive name to be a string, got {inspect(name)}."
                )
            if not callable(handler):
                raise DirectiveConfigurationError(
                    f"Handler for directive @{name} must be callable,"
                    f" got {inspect(handler)}."
                )
        self._handlers = dict(handlers)

    @classmethod
    def from_value(cls, value: Any) -> "HandlerRegistry":
        """Get a handler registry for the given value.

        Registries are returned as they are, everything else must be a mapping.
        """
        return value if isinstance(value, cls) else cls(value)

    def get_handler(self, name: str) -> Optional[DirectiveHandler]:
        return self._handlers.get(name)

    def __getitem__(self, name: str) -> DirectiveHandler:
        return self._handlers[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {inspect(list(self._handlers))}>"
