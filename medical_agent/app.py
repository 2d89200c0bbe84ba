from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse
from typing import Optional
import logging
import os

from .agent import AskHandler, get_handler
from .config import setup_logging
from .errors import catch_exception_middleware, validation_exception_handler
from .schemas import AskRequest, AskResponse, ErrorResponse

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Smart Medical Agent",
    version="1.0",
)

# -----------------------------
# FRONTEND SERVING
# -----------------------------
frontend_dir = os.path.join(os.path.dirname(__file__), "..", "frontend")
frontend_dir = os.path.abspath(frontend_dir)

app.mount("/static", StaticFiles(directory=frontend_dir), name="static")

@app.get("/")
def serve_landing_page():
    return FileResponse(os.path.join(frontend_dir, "index.html"))

@app.get("/dashboard")
def serve_dashboard():
    return FileResponse(os.path.join(frontend_dir, "dashboard.html"))

# -----------------------------
# MIDDLEWARE & ERROR MAPPING
# -----------------------------
# CORS is added last so it wraps the error mapping and decorates its responses.
app.middleware("http")(catch_exception_middleware)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -----------------------------
# MAIN ENDPOINT — ASK
# -----------------------------
@app.post(
    "/api/ask",
    response_model=AskResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def ask(query: Optional[AskRequest] = None, handler: AskHandler = Depends(get_handler)):
    question = query.question if query is not None else None
    logger.info("[ask] question: %s", question)
    result = await handler.handle(question)
    logger.info("[ask] answered with type=%s", result.type)
    return result

@app.get("/health")
def health():
    return {"status": "ok"}
