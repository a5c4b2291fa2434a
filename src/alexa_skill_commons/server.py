"""Request dispatch by request type or intent name.

Transport (HTTP, lambda runtime) is left to the caller: ``Server.invoke``
takes the raw JSON payload and returns the JSON response.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from .errors import NotFoundError
from .request import RequestEnvelope, RequestType
from .response import ResponseBuilder

Handler = Callable[[ResponseBuilder, RequestEnvelope], None]


def fallback_handler(err: Exception) -> Handler:
    """Handler ending the session with a card describing err."""

    def handle(builder: ResponseBuilder, request: RequestEnvelope) -> None:
        builder.with_simple_card("Fatal error", f"error: {err}").with_should_end_session(True)

    return handle


class ServeMux:
    """Routes requests to handlers registered per request type or intent name.

    Request type handlers take precedence. IntentRequests are routed by
    intent name. Requests without a handler get the fallback handler.
    A ServeMux is itself a handler.

    Example:
        >>> mux = ServeMux()
        >>> mux.handle_request_type(RequestType.LAUNCH_REQUEST, on_launch)
        >>> mux.handle_intent("SayHello", on_hello)
        >>> server = Server(mux)
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._lock = threading.RLock()
        self._types: dict[str, Handler] = {}
        self._intents: dict[str, Handler] = {}

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def handler(self, request: RequestEnvelope) -> Handler:
        """Return the handler for request.

        Raises:
            NotFoundError: If neither the request type nor the intent has a handler.
        """
        request_type = request.request_type
        with self._lock:
            if request_type in self._types:
                return self._types[request_type]
            if request_type != RequestType.INTENT_REQUEST:
                raise NotFoundError(f"server: unknown intent type {request_type}")
            if request.intent_name not in self._intents:
                raise NotFoundError(f"server: unknown intent {request.intent_name}")
            return self._intents[request.intent_name]

    def handle_request_type(self, request_type: RequestType | str, handler: Handler) -> None:
        """Register handler for a request type; IntentRequests are routed by intent instead."""
        if request_type == RequestType.INTENT_REQUEST:
            self._logger.warning("Ignoring handler for %s, register intents instead", request_type)
            return
        if handler is None:
            raise ValueError("handler must not be None")
        key = request_type.value if isinstance(request_type, RequestType) else request_type
        with self._lock:
            self._types[key] = handler

    def handle_intent(self, intent: str, handler: Handler) -> None:
        if handler is None:
            raise ValueError("handler must not be None")
        with self._lock:
            self._intents[intent] = handler

    def serve(self, builder: ResponseBuilder, request: RequestEnvelope) -> None:
        self._logger.debug("Request: %s", request.to_json())
        try:
            handler = self.handler(request)
        except NotFoundError as err:
            self._logger.warning("No handler found: %s", err)
            handler = fallback_handler(err)
        handler(builder, request)
        self._logger.debug("Response: %s", builder.build().to_json())

    __call__ = serve


class Server:
    """Decodes a request payload, dispatches it and encodes the response."""

    def __init__(self, handler: Handler) -> None:
        if handler is None:
            raise ValueError("cannot serve empty handler")
        self.handler = handler

    def invoke(self, payload: bytes | str) -> str:
        """Handle one raw JSON request.

        Raises:
            pydantic.ValidationError: If payload is not a valid request envelope.
        """
        request = RequestEnvelope.model_validate_json(payload)
        builder = ResponseBuilder()
        self.handler(builder, request)
        return builder.build().to_json()
