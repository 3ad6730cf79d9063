"""
User Service - account registration and profile lookup over HTTP
"""

from pathlib import Path
import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from routers.user_router import user_router
from services.user_service import UserServiceError, UserNotFoundError, UserAlreadyExistsError
from utils.responses import error_response
from database import init_db
from config.settings import settings

# ============================================================================
# LOGGING
# ============================================================================

LOGS_DIR = Path(settings.log_dir)
LOGS_DIR.mkdir(parents=True, exist_ok=True)
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler(LOGS_DIR / "app.log"),
        logging.StreamHandler()
    ]
)
logger = logging.getLogger(__name__)

# ============================================================================
# FASTAPI APP SETUP
# ============================================================================

app = FastAPI(title=settings.project_name, version=settings.api_version)

# Status codes for failures raised by the service layer
SERVICE_ERROR_STATUS = {
    UserNotFoundError: 404,
    UserAlreadyExistsError: 409,
}


# Uncaught exception middleware - logs all unhandled exceptions and returns 500
class UncaughtExceptionMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(f"Uncaught exception on {request.method} {request.url.path}: {e}\n{traceback.format_exc()}")
            return error_response(
                "INTERNAL_SERVER_ERROR",
                status=500,
                message="Internal Server Error",
            )


app.add_middleware(UncaughtExceptionMiddleware)

# CORS MUST be near the bottom
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ============================================================================
# ERROR MAPPING
# ============================================================================


@app.exception_handler(UserServiceError)
async def handle_user_service_error(request: Request, exc: UserServiceError):
    status = SERVICE_ERROR_STATUS.get(type(exc), 400)
    logger.info(f"{request.method} {request.url.path} -> {status} {exc.code}")
    return error_response(exc.code, status=status, message=exc.message)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", "Invalid value"),
        }
        for err in exc.errors()
    ]
    logger.info(f"{request.method} {request.url.path} -> 400 validation failed: {errors}")
    return error_response(
        "VALIDATION_ERROR",
        status=400,
        message="Invalid request",
        data={"errors": errors},
    )

# ============================================================================
# STARTUP
# ============================================================================


@app.on_event("startup")
async def initialize_database():
    """Create the users table (and its unique email constraint) if missing."""
    try:
        await init_db()
        logger.info("✅ Database initialized successfully")
    except Exception as e:
        logger.error(f"❌ Database initialization failed: {e}")
        raise

# ============================================================================
# INCLUDE ROUTERS
# ============================================================================
app.include_router(user_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
