from contextlib import asynccontextmanager
from pathlib import Path
import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse


# Load environment variables from .env file
PROJECT_ROOT = Path(__file__).parent.parent
ENV_FILE = PROJECT_ROOT / ".env"
load_dotenv(ENV_FILE)

from api.config import settings
from api.dependencies.storage import build_collector_service, create_transaction_store
from api.routers.api import api_router
from api.routers.endpoints.transactions import error_response
from api.services.transaction_service import INVALID_BODY_MESSAGE


# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Picks the transaction store once at startup and closes MongoDB on shutdown.
    """
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")

    store, db_manager = await create_transaction_store(settings)
    app.state.transaction_service = build_collector_service(store, settings)
    logger.info(f"Transaction storage: {store.source.value}")

    yield  # Application runs here

    app.state.transaction_service = None
    if db_manager is not None:
        await db_manager.close()
        logger.info("MongoDB connections closed")


app = FastAPI(
    title=settings.api_title,
    description=settings.api_description,
    version=settings.api_version,
    lifespan=lifespan,
)

# The dApp front-end runs on another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Bodies FastAPI cannot parse get the same {ok, message} shape as the endpoints"""
    logger.warning(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return error_response(400, INVALID_BODY_MESSAGE)


@app.get("/")
async def root():
    """Basic HTML response."""
    body = (
        "<html>"
        "<body style='padding: 10px;'>"
        "<h1>Cardano dApp Backend</h1>"
        "<div>"
        "Check the docs: <a href='/docs'>here</a>"
        "</div>"
        "</body>"
        "</html>"
    )

    return HTMLResponse(content=body)


app.include_router(api_router, prefix=settings.API_PREFIX)


def run() -> None:
    """Serve the API with uvicorn on the configured port"""
    import uvicorn

    logger.info(f"Backend API listening on http://localhost:{settings.port}")
    uvicorn.run("api.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
