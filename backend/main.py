"""FastAPI main application."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.app.api import interrogation as interrogation_api
from backend.app.config import load_security_settings, log_resolved_config
from backend.app.content.repository import CAST_REPOSITORY
from backend.app.core.error_handling import create_error_response, log_error_with_context

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SECURITY = load_security_settings()


def _node_for_path(path: str) -> str:
    if path.endswith("/ask"):
        return "ask"
    if path.endswith("/inspect"):
        return "inspect"
    if "/characters" in path or "/daily-rules" in path:
        return "cast"
    return "api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    SECURITY.check_startup()
    log_resolved_config()
    try:
        pack = CAST_REPOSITORY.get_pack()
        logger.info(
            "Cast loaded: %d characters, %d daily rules",
            len(pack.characters),
            len(pack.daily_rules),
        )
    except FileNotFoundError as e:
        logger.warning("Cast pack missing: %s (character endpoints will fail until resolved)", e)
    logger.info(
        "API startup complete (dev_mode=%s, auth=%s)",
        SECURITY.dev_mode,
        "enabled" if SECURITY.auth_enabled else "disabled",
    )
    yield


app = FastAPI(title="Xtrange API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(SECURITY.cors_allow_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _extract_token(request: Request) -> str:
    auth_header = request.headers.get("Authorization", "").strip()
    if auth_header.lower().startswith("bearer "):
        return auth_header[7:].strip()
    return request.headers.get("X-API-Key", "").strip()


@app.middleware("http")
async def auth_middleware(request: Request, call_next):
    if request.method.upper() == "OPTIONS":
        return await call_next(request)
    if not SECURITY.auth_enabled:
        return await call_next(request)
    path = request.url.path or ""
    if path in ("/", "/health"):
        return await call_next(request)
    if SECURITY.dev_mode and (path.startswith("/docs") or path.startswith("/redoc") or path.startswith("/openapi")):
        return await call_next(request)

    provided = _extract_token(request)
    if provided != SECURITY.api_token:
        error_response = create_error_response(
            error_code="AUTH_HTTP_401",
            message="Unauthorized",
            node="api",
            details={"path": path},
        )
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content=error_response)
    return await call_next(request)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTPExceptions with structured error responses."""
    node = _node_for_path(request.url.path)
    error_response = create_error_response(
        error_code=f"{node.upper()}_HTTP_{exc.status_code}",
        message=exc.detail,
        node=node,
        details={
            "status_code": exc.status_code,
            "path": request.url.path,
        },
    )
    return JSONResponse(status_code=exc.status_code, content=error_response)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler: return structured error responses with logging."""
    character_id = None
    if hasattr(request, "path_params") and "character_id" in request.path_params:
        character_id = request.path_params.get("character_id")

    node = _node_for_path(request.url.path)

    log_error_with_context(
        error=exc,
        node_name=node,
        character_id=character_id,
        endpoint=request.url.path,
        extra_context={
            "method": request.method,
            "query_params": dict(request.query_params),
        },
    )

    message = f"An error occurred: {type(exc).__name__}"
    if str(exc):
        message = str(exc)

    error_response = create_error_response(
        error_code=f"{node.upper()}_ERROR",
        message=message,
        node=node,
        details={
            "exception_type": type(exc).__name__,
            "path": request.url.path,
        },
    )
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error_response)


app.include_router(interrogation_api.router)


@app.get("/")
async def root():
    return {"message": "Xtrange API", "version": "1.0.0"}


@app.get("/health")
async def health():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
