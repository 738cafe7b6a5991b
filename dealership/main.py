# dealership/main.py
"""
Main application file for the dealership sales service.
"""

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
import logging
from datetime import datetime

from sqlalchemy.orm import Session

from dealership.api.api import api_router
from dealership.core.config import settings
from dealership.core.exceptions import DealershipException
from dealership.db.session import get_db, verify_db_connection
from dealership.api.endpoints.errors import to_http_exception

# --- Logging Configuration ---
LOG_LEVEL = getattr(logging, settings.LOG_LEVEL, logging.INFO)

logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger("dealership")
logger.setLevel(LOG_LEVEL)

# Initialize FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="API for recording dealership vehicle sales",
    version="1.0.0",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    docs_url=f"{settings.API_V1_STR}/docs",
)


@app.exception_handler(DealershipException)
async def dealership_exception_handler(request: Request, exc: DealershipException):
    http_exc = to_http_exception(exc)
    logger.error(f"Unhandled {exc.__class__.__name__} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=http_exc.status_code, content={"detail": http_exc.detail})


# Log requests
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = datetime.now()
    logger.info(f"-> Request: {request.method} {request.url.path}")
    response = await call_next(request)
    process_time = (datetime.now() - start_time).total_seconds()
    logger.info(f"<- Response: {response.status_code} ({process_time:.4f}s)")
    return response


# Include the API router
app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/health", tags=["Health"], summary="API Health Check")
def health_check(db: Session = Depends(get_db)):
    """Returns the operational status of the API and its database."""
    if verify_db_connection(db.get_bind()):
        return {"status": "ok", "database": "connected", "timestamp": datetime.now().isoformat()}
    return JSONResponse(
        status_code=503,
        content={"status": "degraded", "database": "unavailable", "timestamp": datetime.now().isoformat()},
    )
