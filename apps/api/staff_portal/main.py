import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .routers import admin_requests, auth, departments, health, loa_requests, notifications, transfer_requests
from .models import Base
from .db import engine
from .core.config import settings as config
from .core.errors import PortalError
from .core.settings import settings

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(title="Staff Portal API")


@app.on_event("startup")
def on_startup():
    if config.uses_default_session_secret:
        logger.warning("SESSION_SECRET is not set; session cookies are signed with the built-in default key")

    if settings.AUTO_DB_BOOTSTRAP:
        # Create tables in dev if missing.
        Base.metadata.create_all(bind=engine)


@app.exception_handler(PortalError)
def handle_portal_error(request: Request, exc: PortalError):
    level = logging.ERROR if exc.status_code >= 500 else logging.INFO
    logger.log(level, "%s %s -> %d %s: %s", request.method, request.url.path, exc.status_code, type(exc).__name__, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
def handle_validation_error(request: Request, exc: RequestValidationError):
    logger.info("%s %s -> 400 invalid payload: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception("%s %s failed", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(health.router)
app.include_router(auth.router)
app.include_router(transfer_requests.router)
app.include_router(loa_requests.router)
app.include_router(notifications.router)
app.include_router(admin_requests.router)
app.include_router(departments.router)

# CORS: the portal client sends the session cookie, so credentials must be allowed.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
