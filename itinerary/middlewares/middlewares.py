from starlette.middleware.base import BaseHTTPMiddleware
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, Response
import logging
import time

logger = logging.getLogger(__name__)


class HTTPErrorHandler(BaseHTTPMiddleware):
    def __init__(self, app: FastAPI) -> None:
        super().__init__(app)

    async def dispatch(self, request: Request, call_next) -> Response | JSONResponse:
        try:
            return await call_next(request)
        except Exception:
            logger.exception(f"Unhandled error on {request.method} {request.url.path}")
            return JSONResponse(
                content={"detail": "Internal server error"},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        url = request.url.path
        origin = request.headers.get("origin", "unknown")

        logger.info(f"Incoming request: {method} {url} from {client_ip} (origin: {origin})")

        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(f"Response {response.status_code} for {method} {url} in {elapsed_ms:.1f} ms")
        return response
