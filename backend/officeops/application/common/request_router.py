"""
Request Router - sends a command or query to the one handler registered for
its concrete type.

The handler registry is built once from explicitly injected handlers and is
read-only afterwards. A request type without a handler is a wiring error
(ConfigurationError), never a per-request Result.

Flow:
  caller → RequestRouter.send(request) → HandlerRegistry.handler_for(type)
         → handler.handle(request) → Result
"""

import logging
from types import MappingProxyType
from typing import Any, Iterable, Mapping, TypeVar

from officeops.application.common.errors import ConfigurationError
from officeops.application.common.interfaces import Request, RequestHandler
from officeops.domain.common.result import ErrorType, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HandlerRegistry:
    """Immutable request type → handler map."""

    def __init__(
        self,
        handlers: Iterable[RequestHandler],
        required: Iterable[type[Request]] = (),
    ):
        bindings: dict[type[Request], RequestHandler] = {}
        for handler in handlers:
            request_type = getattr(type(handler), "request_type", None)
            if not (isinstance(request_type, type) and issubclass(request_type, Request)):
                raise ConfigurationError(
                    f"{type(handler).__name__} does not declare a request_type"
                )
            if request_type in bindings:
                raise ConfigurationError(
                    f"{request_type.__name__} has more than one handler: "
                    f"{type(bindings[request_type]).__name__}, {type(handler).__name__}"
                )
            bindings[request_type] = handler

        missing = [t.__name__ for t in required if t not in bindings]
        if missing:
            raise ConfigurationError(
                f"No handler registered for: {', '.join(sorted(missing))}"
            )

        self._bindings: Mapping[type[Request], RequestHandler] = MappingProxyType(bindings)

    @property
    def request_types(self) -> frozenset[type[Request]]:
        return frozenset(self._bindings)

    def handler_for(self, request_type: type[Request]) -> RequestHandler:
        try:
            return self._bindings[request_type]
        except KeyError:
            raise ConfigurationError(
                f"No handler registered for {request_type.__name__}"
            ) from None


class RequestRouter:
    def __init__(self, registry: HandlerRegistry):
        self._registry = registry

    async def send(self, request: Request[T]) -> Result[T]:
        handler = self._registry.handler_for(type(request))
        logger.debug(
            "Routing %s to %s", type(request).__name__, type(handler).__name__
        )

        try:
            result: Any = await handler.handle(request)
        except Exception as e:
            # handlers convert their own failures; this is the last line
            logger.exception("Handler %s raised", type(handler).__name__)
            return Result.failure(
                f"Unhandled error in {type(request).__name__}: {e}",
                ErrorType.UNEXPECTED,
            )

        if not isinstance(result, Result):
            logger.error(
                "Handler %s returned %r instead of a Result",
                type(handler).__name__,
                type(result).__name__,
            )
            return Result.failure(
                f"{type(handler).__name__} did not return a Result",
                ErrorType.UNEXPECTED,
            )
        return result
