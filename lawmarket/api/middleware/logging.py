# 📄 File: lawmarket/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request made to the marketplace API: what was asked for, how it ended
# and how long it took, tagged with an id that ties all its log lines together.
# 🧪 Purpose (Technical Summary):
# Request logging middleware: propagates or generates X-Request-ID, binds it to the logging
# context variable and request.state, and logs method, path, status and duration.
# 🔗 Dependencies:
# Starlette BaseHTTPMiddleware, lawmarket.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# lawmarket.main (middleware registration), exception handlers (request.state.request_id)

import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from lawmarket.shared.utils.logging import account_id_var, get_logger, request_id_var

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
SLOW_REQUEST_THRESHOLD = 2.0  # seconds
EXCLUDED_PATHS = {"/health", "/health/ready", "/favicon.ico"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware with request-id correlation.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        request_token = request_id_var.set(request_id)
        account_token = account_id_var.set("")
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                f"{request.method} {request.url.path} failed",
                exc_info=True,
                method=request.method,
                path=request.url.path,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            raise
        else:
            duration = time.perf_counter() - start_time
            if request.url.path not in EXCLUDED_PATHS:
                log = logger.warning if duration > SLOW_REQUEST_THRESHOLD else logger.info
                log(
                    f"{request.method} {request.url.path} -> {response.status_code} ({duration:.3f}s)",
                    method=request.method,
                    path=request.url.path,
                    status_code=response.status_code,
                    duration_ms=round(duration * 1000, 2),
                    client_ip=request.client.host if request.client else None,
                )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            request_id_var.reset(request_token)
            account_id_var.reset(account_token)
