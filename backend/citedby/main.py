"""
GetCitedBy - AI Visibility Scoring for Swiss Local Businesses
Main FastAPI Application
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from citedby import __version__
from citedby.config import get_settings
from citedby.utils import configure_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Factory function to create FastAPI app"""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    application = FastAPI(
        title="GetCitedBy API",
        description="""
        AI Visibility Scoring for Swiss Local Businesses

        Score how an AI assistant talks about a business, and check that its
        Name, Address and Phone agree across directory listings.

        ## Features
        - Exact and partial business name matching with list position detection
        - Transparent 0-100 visibility score with a per-component explanation
        - NAP consistency scoring with prioritized issues and recommendations
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc" if settings.is_development else None,
    )

    # CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Global exception handler
    @application.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected errors"""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        settings = get_settings()
        if settings.DEBUG:
            return JSONResponse(
                status_code=500,
                content={
                    "detail": str(exc),
                    "type": type(exc).__name__,
                },
            )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    from citedby.api.routes import api_router
    application.include_router(api_router, prefix=f"/api/{settings.API_VERSION}")

    # Health check
    @application.get("/health")
    async def health_check():
        """Health check endpoint"""
        settings = get_settings()
        return {
            "status": "healthy",
            "version": __version__,
            "environment": settings.APP_ENV,
        }

    @application.get("/")
    async def root():
        """Root endpoint"""
        return {
            "name": "GetCitedBy API",
            "version": __version__,
            "docs": "/docs",
        }

    return application


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()

    uvicorn.run(
        "citedby.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
        workers=1 if settings.is_development else settings.WORKERS,
    )
