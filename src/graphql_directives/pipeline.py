"""Directive pipelines

A pipeline wraps a field resolver with an ordered sequence of resolved directives.
The value produced by the resolver is the input of the first directive handler,
whose output is the input of the second handler, and so on. The result of the
pipeline is the output of the last handler.

Pipelines are lazy: the last handler is called first, and the upstream value of a
handler is only produced when the handler calls the ``next_`` function it has been
given. A handler that never calls ``next_`` prevents all earlier handlers and the
field resolver from being called at all.
"""

from asyncio import Future, ensure_future
from functools import partial
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    Generator,
    Optional,
    Sequence,
    Tuple,
)

from graphql import GraphQLFieldResolver, GraphQLResolveInfo
from graphql.pyutils import is_awaitable

from .validate import ResolvedDirective

__all__ = ["DirectivePipeline", "SharedAwaitable", "build_pipeline"]


def build_pipeline(
    stages: Sequence[ResolvedDirective], resolver: GraphQLFieldResolver
) -> GraphQLFieldResolver:
    """Wrap the given resolver with the given resolved directives.

    Returns the resolver itself if there are no directives.
    """
    if not stages:
        return resolver
    return DirectivePipeline(stages, resolver)


class DirectivePipeline:
    """Resolver chaining resolved directives around a base resolver.

    The stages are kept as an explicit tuple, so a pipeline can be inspected, and
    they are executed by an explicit index instead of nested closures.
    """

    __slots__ = "stages", "resolver"

    stages: Tuple[ResolvedDirective, ...]
    resolver: GraphQLFieldResolver

    def __init__(
        self, stages: Sequence[ResolvedDirective], resolver: GraphQLFieldResolver
    ) -> None:
        self.stages = tuple(stages)
        self.resolver = resolver

    def __call__(self, source: Any, info: GraphQLResolveInfo, **args: Any) -> Any:
        return PipelineExecution(self, source, info, args).run(len(self.stages) - 1)

    def __repr__(self) -> str:
        names = ", ".join(f"@{stage.name}" for stage in self.stages)
        return f"<{self.__class__.__name__} [{names}]>"


class PipelineExecution:
    """A single invocation of a directive pipeline.

    The upstream value of every stage is produced at most once per invocation. If a
    handler calls ``next_`` more than once, the value produced on the first call is
    returned again. Awaitable upstream values are wrapped in a SharedAwaitable, so
    that they can be awaited more than once.
    """

    __slots__ = "pipeline", "source", "info", "args", "_values"

    _values: Dict[int, Any]

    def __init__(
        self,
        pipeline: DirectivePipeline,
        source: Any,
        info: GraphQLResolveInfo,
        args: Dict[str, Any],
    ) -> None:
        self.pipeline = pipeline
        self.source = source
        self.info = info
        self.args = args
        self._values = {}

    def run(self, index: int) -> Any:
        """Run the stage with the given index.

        The index -1 stands for the base resolver.
        """
        if index < 0:
            return self.pipeline.resolver(self.source, self.info, **self.args)
        stage = self.pipeline.stages[index]
        info = self.info
        return stage.handler(
            self.continuation(index - 1), self.source, stage.args, info.context, info
        )

    def continuation(self, index: int) -> Callable[[], Any]:
        return partial(self.value, index)

    def value(self, index: int) -> Any:
        """Get the memoized output of the stage with the given index."""
        values = self._values
        if index not in values:
            value = self.run(index)
            if is_awaitable(value):
                value = SharedAwaitable(value)
            values[index] = value
        return values[index]


class SharedAwaitable:
    """Awaitable that can be awaited more than once.

    The wrapped awaitable is only scheduled when it is awaited for the first time,
    so an upstream value that is requested but never awaited is never produced.
    """

    __slots__ = "awaitable", "_future"

    _future: Optional["Future[Any]"]

    def __init__(self, awaitable: Awaitable[Any]) -> None:
        self.awaitable = awaitable
        self._future = None

    def __await__(self) -> Generator[Any, None, Any]:
        future = self._future
        if future is None:
            future = self._future = ensure_future(self.awaitable)
        return future.__await__()
