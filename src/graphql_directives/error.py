"""Directive errors

Two kinds of errors are raised by this package. A configuration error is detected
while binding the directives declared in the schema and aborts binding. An
execution error is the same kind of problem detected while resolving a single
field, because directives attached to a field in a query document are only known
once that document is executed.

Errors raised by the directive handlers themselves are never wrapped by this
package.
"""

from typing import Collection, Optional, Union, TYPE_CHECKING

from graphql import GraphQLError

if TYPE_CHECKING:
    from graphql.language import Node  # noqa: F401

__all__ = ["DirectiveConfigurationError", "DirectiveExecutionError"]


class DirectiveConfigurationError(GraphQLError):
    """Directive configuration error

    Raised when a directive is not declared in the schema, is used on a location
    which is not allowed by its declaration, has no handler, or when the handler
    registry itself is malformed.
    """


class DirectiveExecutionError(GraphQLError):
    """Directive execution error

    Raised from inside a field resolver when a directive attached to the current
    selection cannot be resolved, so that only the resolved field fails.
    """

    def __init__(
        self,
        original_error: DirectiveConfigurationError,
        nodes: Union[Collection["Node"], "Node", None] = None,
    ) -> None:
        super().__init__(
            original_error.message,
            nodes or original_error.nodes,
            original_error=original_error,
        )

    @property
    def configuration_error(self) -> Optional[DirectiveConfigurationError]:
        return self.original_error  # type: ignore
