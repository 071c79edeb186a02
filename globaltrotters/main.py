"""
FastAPI entrypoint for the GlobalTrotters backend application.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from globaltrotters.core.config import settings
from globaltrotters.core.error_handlers import register_exception_handlers
from globaltrotters.core.logging import configure_logging
from globaltrotters.api.router import api_router

configure_logging()

app = FastAPI(
    title="GlobalTrotters API",
    description="Backend API for multi-city trip planning",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"success": True, "message": f"{settings.APP_NAME} API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"success": True, "data": {"status": "healthy"}}
