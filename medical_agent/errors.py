import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# -----------------------------
# ERROR TAXONOMY
# -----------------------------
class AgentError(Exception):
    """Base error carrying the HTTP status it maps to."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClientInputError(AgentError):
    """A required request field is missing or empty."""
    status_code = 400


class UpstreamError(AgentError):
    """The model call failed or returned something unusable."""
    status_code = 500


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


# -----------------------------
# BOUNDARY ERROR MAPPING
# -----------------------------
async def catch_exception_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except AgentError as e:
        if e.status_code >= 500:
            logger.exception("%s %s failed", request.method, request.url.path)
        else:
            logger.info("%s %s rejected: %s", request.method, request.url.path, e.message)
        return error_response(e.status_code, e.message)
    except Exception as e:
        logger.exception("%s %s failed", request.method, request.url.path)
        return error_response(500, str(e))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        if first.get("type") == "json_invalid":
            logger.info("%s %s rejected: invalid JSON", request.method, request.url.path)
            return error_response(400, "Invalid JSON body")
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid '{location}' field: {first.get('msg')}" if location else f"Invalid request body: {first.get('msg')}"
    else:
        message = "Invalid request body"
    logger.info("%s %s rejected: %s", request.method, request.url.path, message)
    return error_response(400, message)
