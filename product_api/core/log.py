import logging
import time

from fastapi import Request
from fastapi.responses import JSONResponse

access_logger = logging.getLogger("product_api.access")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

CORS_REJECTED_MESSAGE = "Not allowed by CORS"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("product_api").setLevel(level.upper())


async def log_requests(request: Request, call_next):
    """One line per request: method, path, status, time taken, body size."""
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        elapsed = (time.perf_counter() - start) * 1000
        access_logger.exception(
            "%s %s 500 %.3f ms", request.method, request.url.path, elapsed
        )
        raise
    elapsed = (time.perf_counter() - start) * 1000
    access_logger.info(
        "%s %s %s %.3f ms - %s",
        request.method,
        request.url.path,
        response.status_code,
        elapsed,
        response.headers.get("content-length", "-"),
    )
    return response


def origin_guard(allowed_origins: list[str]):
    """Reject cross-origin requests from anywhere not on the allow-list.

    Requests without an Origin header (curl, server-to-server, same-origin
    GETs) always pass.
    """
    allowed = set(allowed_origins)

    async def reject_disallowed_origin(request: Request, call_next):
        origin = request.headers.get("origin")
        if origin and origin not in allowed:
            access_logger.warning("Rejected request from origin %s", origin)
            return JSONResponse(status_code=403, content={"error": CORS_REJECTED_MESSAGE})
        return await call_next(request)

    return reject_disallowed_origin
