"""FastAPI application entry point."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings

app = FastAPI(
    title="Blog Admin API",
    description="Admin backend for posts, authors and tags",
    version="0.1.0",
)

logger = logging.getLogger(__name__)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,  # Admin UI URL
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Blog Admin API", "version": "0.1.0"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.on_event("startup")
def log_startup() -> None:
    """Log the environment the API is starting in."""
    logger.info("Blog Admin API starting in %s environment.", settings.app_env)

# Import and include routers
from app.routers import authors, posts, tags

app.include_router(posts.router, prefix="/api/posts", tags=["posts"])
app.include_router(authors.router, prefix="/api/authors", tags=["authors"])
app.include_router(tags.router, prefix="/api/tags", tags=["tags"])
