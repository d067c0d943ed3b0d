import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.exceptions import HTTPException as StarletteHTTPException

from nurse_connect.api.v1.api import api_router
from nurse_connect.core.config import settings
from nurse_connect.core.database import engine, get_async_session
from nurse_connect.core.exceptions import AppException
from nurse_connect.core.logging_config import setup_logging
from nurse_connect.middleware.logging import LoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info(f"Nurse Connect API starting ({settings.ENVIRONMENT})")
    yield
    await engine.dispose()


app_config = {
    "title": "Nurse Connect API",
    "description": "Shift-staffing marketplace between healthcare facilities and workers",
    "version": "1.0.0",
    "lifespan": lifespan,
}

app = FastAPI(**app_config)

# Add middleware
app.add_middleware(LoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_ORIGIN],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    content = exc.to_dict() if isinstance(exc, AppException) else {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(content), headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Server error"})


# Include routers
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    return {"message": "Nurse Connect API is running"}


@app.get("/health")
async def health_check(session: AsyncSession = Depends(get_async_session)):
    """Liveness plus a round trip to the database"""
    try:
        timestamp = await session.scalar(select(func.now()))
        return {"status": "ok", "timestamp": timestamp}
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(status_code=500, content={"status": "error", "message": str(e)})


def run_http():
    """Run HTTP server on the configured port"""
    import uvicorn
    uvicorn.run(
        "nurse_connect.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=False,
    )


if __name__ == "__main__":
    run_http()
