"""pgdesk local API server entry point."""
from pathlib import Path
from dotenv import load_dotenv

# Load .env from project root (parent of server_py directory)
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Import configurations and middleware
from core.config import get_settings
from core.logging import setup_logging, log_info, log_error
from middleware.logging import LoggingMiddleware
from utils.response import error_response

# Import API routers
from api.v1 import (
    connection,
    schema,
    columns,
    rows,
    query,
)

settings = get_settings()
setup_logging(settings.log_level)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Local PostgreSQL administration API for the pgdesk desktop UI"
)

# The desktop renderer is served from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(LoggingMiddleware)

# Include API routers
app.include_router(connection.router, prefix="/api")    # Connection test & saved data
app.include_router(schema.router, prefix="/api")        # Schema introspection
app.include_router(columns.router, prefix="/api")       # Column editor (DDL)
app.include_router(rows.router, prefix="/api")          # Table content (DML)
app.include_router(query.router, prefix="/api")         # Ad-hoc SQL


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render errors as ``{"error": ..., "details": ...}``, which the UI reads."""
    body = exc.detail if isinstance(exc.detail, dict) else error_response(str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report missing or empty fields as 400, like the UI expects."""
    missing = []
    for error in exc.errors():
        if error.get("type") in ("missing", "string_too_short") and error.get("loc"):
            missing.append(str(error["loc"][-1]))

    if len(missing) == 1 and len(exc.errors()) == 1:
        body = error_response(f"{missing[0]} is required")
    elif missing and len(missing) == len(exc.errors()):
        body = error_response("Missing required fields", missing)
    else:
        details = [
            {"field": ".".join(str(p) for p in e.get("loc", ())[1:]), "message": e.get("msg")}
            for e in exc.errors()
        ]
        body = error_response("Invalid request body", details)
    return JSONResponse(status_code=400, content=body)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Anything the routers did not map still answers in the error shape."""
    log_error(f"Unhandled error on {request.method} {request.url.path}", "app", exc)
    return JSONResponse(status_code=500, content=error_response("Internal server error", str(exc) or None))


@app.on_event("startup")
async def startup_event():
    """Application startup event."""
    log_info(f"{settings.app_name} v{settings.app_version} starting", "app")
    log_info(f"Environment: {settings.environment}", "app")
    log_info(f"Server: http://{settings.host}:{settings.port}", "app")


@app.on_event("shutdown")
async def shutdown_event():
    """Application shutdown event."""
    log_info("Application shutting down", "app")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": settings.app_version}


def main():
    import uvicorn
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="info"
    )


if __name__ == "__main__":
    main()
