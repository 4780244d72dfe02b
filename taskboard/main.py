"""
FastAPI Application Entry Point - Application initialization and configuration
"""

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
import logging
import sys
import time

from taskboard.core.config import settings, validate_config, is_production
from taskboard.database import check_db_connection, close_db_connections, get_pool_stats, init_db

# Configure application logging with timestamp and log level
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def create_application() -> FastAPI:
    """
    Factory function to create and configure FastAPI application.
    Tests build the app through here and override get_db.
    """
    app = FastAPI(
        title=settings.APP_NAME,  # API documentation title
        version=settings.APP_VERSION,  # API version
        debug=settings.DEBUG,  # Debug mode in development
        docs_url="/api/docs" if not is_production() else None,  # Hide Swagger docs in production
        redoc_url="/api/redoc" if not is_production() else None,  # Hide ReDoc in production
        description="Task tracking backend with an activity log",
    )

    setup_middleware(app)  # CORS and request logging
    setup_exception_handlers(app)  # Uniform error bodies
    setup_event_handlers(app)  # Startup checks and shutdown cleanup
    setup_routers(app)  # Health check and API routers

    return app


def setup_middleware(app: FastAPI) -> None:
    """Configure application middleware - runs on every request/response"""

    # CORS middleware - the frontend calls the API from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,  # Frontend dev servers (e.g., http://localhost:5173)
        allow_credentials=True,  # Allow cookies and auth headers
        allow_methods=["*"],  # GET, POST, PUT, DELETE, OPTIONS
        allow_headers=["*"],  # Any request header
    )

    # Request timing and logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log every request with method, path, status, and processing time"""
        start_time = time.time()  # Request start
        logger.info(f"➡️  {request.method} {request.url.path}")

        response = await call_next(request)  # Run the route handler

        process_time = time.time() - start_time  # Seconds spent in the handler
        logger.info(
            f"⬅️  {request.method} {request.url.path} "
            f"- Status: {response.status_code} - Time: {process_time:.2f}s"
        )
        response.headers["X-Process-Time"] = str(process_time)  # Timing header for debugging
        return response


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure global exception handlers for consistent error responses"""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """
        Handle Pydantic validation errors (invalid request data).
        Returns field-level error details.
        """
        errors = []
        for error in exc.errors():  # One entry per invalid field
            errors.append({
                "field": ".".join(str(x) for x in error["loc"]),  # Field path (e.g., "body.email")
                "message": error["msg"],  # Human-readable error message
                "type": error["type"],  # Error type (e.g., "string_too_long")
            })

        logger.warning(f"❌ Validation error on {request.url.path}: {errors}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"error": "Validation Error", "detail": errors, "timestamp": time.time()}
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        """
        Handle database errors - logs full details but returns generic message.
        Never expose database schema or internal errors to client.
        """
        logger.error(
            f"❌ Database error on {request.method} {request.url.path}: {str(exc)}",
            exc_info=True  # Full stack trace in logs
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Database Error",
                "detail": "An error occurred while processing your request. Please try again later.",
                "timestamp": time.time()
            }
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """
        Catch-all handler for unexpected exceptions, including unknown
        task status/priority names raised by the task service.
        """
        logger.error(
            f"❌ Unhandled exception on {request.method} {request.url.path}: {str(exc)}",
            exc_info=True  # Full stack trace in logs
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal Server Error",
                "detail": "An unexpected error occurred.",
                "timestamp": time.time()
            }
        )


def setup_event_handlers(app: FastAPI) -> None:
    """Configure startup and shutdown event handlers"""

    @app.on_event("startup")
    async def startup_event():
        """
        Validate config and check the database on startup.
        If checks fail, application won't start.
        """
        logger.info("🚀 Starting Taskboard API...")

        try:
            validate_config()  # Environment variables and settings
        except ValueError as e:
            logger.error(f"❌ Configuration validation failed: {e}")
            sys.exit(1)  # Refuse to start with bad config or no database

        if not check_db_connection():  # Database must be reachable
            logger.error("❌ Cannot connect to database. Exiting.")
            sys.exit(1)  # Refuse to start with bad config or no database

        if settings.AUTO_CREATE_TABLES:  # Create missing tables from the models
            init_db()

        logger.info(f"📊 Database pool: {get_pool_stats()}")
        logger.info("✅ Application started successfully")
        logger.info(f"🌍 Environment: {settings.ENVIRONMENT}")
        logger.info(f"🔧 Debug mode: {settings.DEBUG}")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("🛑 Shutting down Taskboard API...")
        close_db_connections()  # Release pooled connections
        logger.info("✅ Shutdown complete")


def setup_routers(app: FastAPI) -> None:
    """Mount API routers"""

    @app.get("/health", tags=["Health"])
    async def health_check():
        """
        Health check endpoint for monitoring and load balancers.
        Returns application status, database connectivity, and version info.
        """
        db_healthy = check_db_connection()  # Runs SELECT 1 against the engine

        return {
            "status": "healthy" if db_healthy else "unhealthy",
            "database": "connected" if db_healthy else "disconnected",
            "pool_stats": get_pool_stats(),
            "timestamp": time.time(),
            "version": settings.APP_VERSION
        }

    # Include API routers
    from taskboard.api import activities, auth, categories, comments, tasks, users
    app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
    app.include_router(tasks.router, prefix="/api", tags=["Tasks"])
    app.include_router(users.router, prefix="/api/users", tags=["Users"])
    app.include_router(comments.router, prefix="/api/comments", tags=["Comments"])
    app.include_router(activities.router, prefix="/api/activities", tags=["Activities"])
    app.include_router(categories.router, prefix="/api", tags=["Lookups"])


# Create application instance
app = create_application()

if __name__ == "__main__":
    # Development only. Production: uvicorn taskboard.main:app --host 0.0.0.0 --port 8000
    import uvicorn
    uvicorn.run(
        "taskboard.main:app",
        host="0.0.0.0",  # Listen on all network interfaces
        port=8000,  # Default HTTP port
        reload=settings.DEBUG,  # Auto-reload on code changes (development only)
        log_level="debug" if settings.DEBUG else "info"
    )
