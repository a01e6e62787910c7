"""FastAPI application for the NonSmallInt calculator."""

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from nonsmallint import __version__
from nonsmallint.api.endpoints import router
from nonsmallint.config import ApiConfig

# Maximum request body size (16 KB); operands are also bounded by
# ApiConfig.max_operand_digits once parsed
MAX_REQUEST_SIZE = 16 * 1024

app = FastAPI(
    title="NonSmallInt Calculator",
    description="Arbitrary-precision unsigned integer arithmetic over decimal strings",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Run the calculator API server.

    Configuration via environment variables:
    - NSI_HOST: Host to bind to (default: 0.0.0.0)
    - NSI_PORT: Port to bind to (default: 8000)
    - NSI_DEBUG: Enable debug/reload mode (default: false)
    - NSI_MAX_EXPONENT: Largest exponent accepted by pow (default: 10000)
    - NSI_MAX_OPERAND_DIGITS: Largest operand length (default: 500)
    - NSI_MAX_RESULT_DIGITS: Largest pow result length (default: 1000)
    """
    config = ApiConfig.from_env()
    uvicorn.run(
        "nonsmallint.api.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
    )


if __name__ == "__main__":
    run()
