"""Request middleware: correlation ids and request/response logging."""
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from core.logging import api_logger, bind_context, clear_context, generate_correlation_id

log = api_logger()


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Binds a correlation id to the logging context for the lifetime of a request.

    The id is taken from X-Correlation-ID when the client sends one and is
    echoed back on the response either way.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = request.headers.get("X-Correlation-ID") or generate_correlation_id()

        clear_context()
        bind_context(
            correlation_id=correlation_id,
            request_id=request.headers.get("X-Request-ID"),
            method=request.method,
            path=request.url.path,
        )

        start = time.perf_counter()
        log.info("request_started", query=dict(request.query_params) or None)

        try:
            response = await call_next(request)
        except Exception as exc:
            log.exception(
                "request_failed",
                error_type=type(exc).__name__,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            raise
        else:
            response.headers["X-Correlation-ID"] = correlation_id
            status = response.status_code
            log_method = log.info if status < 400 else (log.warning if status < 500 else log.error)
            log_method("request_completed", status=status, duration_ms=round((time.perf_counter() - start) * 1000, 2))
            return response
        finally:
            clear_context()
