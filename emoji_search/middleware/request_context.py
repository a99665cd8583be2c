"""Request context middleware.

Tags every HTTP response with a request id and its handling time using the
pure ASGI pattern.
"""

import logging
import time
from uuid import uuid4

logger = logging.getLogger(__name__)


class RequestContextMiddleware:
    """
    Add tracing headers to all responses.

    Uses pure ASGI middleware pattern instead of BaseHTTPMiddleware
    to avoid Content-Length mismatch issues with streaming responses.

    Headers added:
        - X-Request-Id: Unique request identifier (echoed when the client sends one)
        - X-Response-Time-Ms: Time spent until the response started
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start_time = time.perf_counter()
        request_id = None
        for name, value in scope.get("headers", []):
            if name == b"x-request-id":
                request_id = value.decode("latin-1")
                break
        request_id = request_id or str(uuid4())

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                elapsed_ms = (time.perf_counter() - start_time) * 1000
                headers = list(message.get("headers", []))
                headers.append((b"x-request-id", request_id.encode("latin-1")))
                headers.append((b"x-response-time-ms", f"{elapsed_ms:.2f}".encode()))
                message = {**message, "headers": headers}
                logger.debug(
                    f"{scope.get('method')} {scope.get('path')} -> {message['status']} "
                    f"in {elapsed_ms:.2f}ms [{request_id}]"
                )
            await send(message)

        await self.app(scope, receive, send_with_headers)
