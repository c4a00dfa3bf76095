# main.py

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from app.core.config import Settings, settings as default_settings
from app.core.dsa.transaction_dsa import TransactionDSA
from app.core.errors import ExpenseTrackerError, StorageError
from app.db.sqlite import connect_to_sqlite, close_sqlite_connection
from app.api.v1.routes.transaction_route import router as transaction_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or default_settings

    # -----------------------------
    # STARTUP / SHUTDOWN
    # -----------------------------
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("🚀 Starting %s...", settings.PROJECT_NAME)
        engine = connect_to_sqlite(settings)

        dsa = TransactionDSA(engine)
        try:
            await dsa.initialize()
        except ExpenseTrackerError:
            # Refuse to serve without a schema; uvicorn exits on this
            logger.critical("DB Error: schema initialization failed, shutting down")
            await close_sqlite_connection(engine)
            raise
        logger.info("🔧 Transactions table ready")

        app.state.transaction_dsa = dsa
        yield

        logger.info("🛑 Shutting down API...")
        await close_sqlite_connection(engine)

    # -----------------------------
    # FASTAPI APP
    # -----------------------------
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Backend API for tracking income & expense transactions",
        lifespan=lifespan,
    )

    # -----------------------------
    # CORS MIDDLEWARE
    # -----------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -----------------------------
    # ERROR HANDLERS
    # -----------------------------
    @app.exception_handler(ExpenseTrackerError)
    async def expense_tracker_error_handler(request: Request, exc: ExpenseTrackerError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    # anything unexpected still answers with the generic storage body
    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": StorageError.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": "Invalid request"})

    # -----------------------------
    # ROUTERS
    # -----------------------------
    app.include_router(transaction_router)

    # -----------------------------
    # ROOT ENDPOINT
    # -----------------------------
    @app.get("/", tags=["Health"])
    def root():
        return {
            "message": f"{settings.PROJECT_NAME} Backend Running",
            "version": settings.VERSION,
            "docs": "/docs",
        }

    return app


app = create_app()


def run():
    logging.basicConfig(
        level=default_settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "app.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=default_settings.LOG_LEVEL.lower(),
        lifespan="on",
    )


if __name__ == "__main__":
    run()
