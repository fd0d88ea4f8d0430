"""TxSecure - Main Application."""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from txsecure.api.transactions import router as tx_router
from txsecure.logging_hardening import setup_logging_redaction
from txsecure.routers import health
from txsecure.settings import settings

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Initialize logging redaction filters early
setup_logging_redaction()

app = FastAPI(
    title="TxSecure",
    description="Envelope-encrypted transaction records",
    version="0.1.0",
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Schema failures are plain client errors; 422 is reserved for tampering
    fields = [".".join(str(p) for p in err["loc"]) for err in exc.errors()]
    return JSONResponse(
        status_code=400,
        content={"detail": {"error": {
            "code": "REQUEST_INVALID",
            "message": "Request body failed schema validation",
            "details": {"fields": fields},
        }}},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log the traceback server-side and return a generic 500."""
    logger.exception("Unhandled exception for %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": {"error": {
            "code": "INTERNAL_ERROR",
            "message": "An unexpected error occurred.",
        }}},
    )


# Mount routers
app.include_router(tx_router.router, tags=["Transactions"])
app.include_router(health.router, tags=["Health"])
