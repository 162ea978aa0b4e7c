"""
FastAPI application entry point
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from backend.app.api.v1 import auth, profile, users
from backend.app.core.config import settings
from backend.app.core.error_handlers import register_exception_handlers
from backend.app.core.logging_config import setup_logging
from backend.app.db import session
from backend.app.web import register


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the store at startup, release it at shutdown."""
    logger = setup_logging()
    session.init_db()
    logger.info("Database ready url=%s", session.engine.url.render_as_string(hide_password=True))
    yield
    session.dispose_engine()
    logger.info("Database connections closed")


# Initialize FastAPI app
app = FastAPI(
    title=f"{settings.app_name} API",
    description="Developer profiles and accounts API",
    version=settings.app_version,
    lifespan=lifespan,
)

# CORS Middleware - allowlist from env (comma-separated)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(users.router, prefix="/api/users", tags=["users"])
app.include_router(auth.router, prefix="/api/auth", tags=["authentication"])
app.include_router(profile.router, prefix="/api/profile", tags=["profile"])
app.include_router(register.router, tags=["web"], include_in_schema=False)


@app.get("/", response_class=PlainTextResponse)
def read_root():
    """Root endpoint"""
    return "API Running"


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
