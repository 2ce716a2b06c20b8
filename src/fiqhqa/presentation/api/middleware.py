"""HTTP middleware: trace id propagation and request logging."""

import logging
import time
import uuid

from fastapi import FastAPI, Request, Response

logger = logging.getLogger("fiqhqa.http")

TRACE_ID_HEADER = "Trace-Id"


def setup_middleware(app: FastAPI) -> None:
    """Register the trace/logging middleware on the application."""

    @app.middleware("http")
    async def trace_and_log(request: Request, call_next) -> Response:
        trace_id = request.headers.get(TRACE_ID_HEADER) or str(uuid.uuid4())
        request.state.trace_id = trace_id
        request.state.user_id = None

        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[TRACE_ID_HEADER] = trace_id
            return response
        finally:
            latency_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "[HTTP] TraceId: %s; UserId: %s; Method: %s; Path: %s; "
                "Status: %d; Latency: %.2fms",
                trace_id,
                request.state.user_id,
                request.method,
                request.url.path,
                status_code,
                latency_ms,
            )
