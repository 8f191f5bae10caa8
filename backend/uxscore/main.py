"""Main FastAPI application."""
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from uxscore.api import auth, categories, evaluations, performance, projects, reports, users
from uxscore.config import settings
from uxscore.database import SessionLocal, init_db
from uxscore.utils.exceptions import register_exception_handlers
from uxscore.utils.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Without auto-creation the schema comes from Alembic migrations
    init_db(create_schema=settings.auto_create_schema)
    logger.info("Reference data seeded")
    yield


app = FastAPI(
    title="UX Score API",
    description="Backend API for scoring website usability evaluations",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.is_development else settings.cors_origins,
    allow_credentials=not settings.is_development,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition", "Location"],
)

if settings.use_https_redirection:
    app.add_middleware(HTTPSRedirectMiddleware)

register_exception_handlers(app)

# Include routers
app.include_router(auth.router)
app.include_router(categories.router)
app.include_router(projects.router)
app.include_router(evaluations.router)
app.include_router(performance.router)
app.include_router(reports.router)
app.include_router(users.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "UX Score API",
        "version": "0.1.0",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint with a database probe."""
    body = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "UXScore API",
    }

    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check database probe failed: {e}")
        body["status"] = "unhealthy"
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    finally:
        db.close()

    return body
