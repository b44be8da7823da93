import time
import uuid
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from app.core.config import settings
from app.core.errors import BookStoreError
from app.core.logging import setup_logging, get_logger, request_id_ctx
from app.api.dependencies import get_store
from app.db.store import BookStore

logger = get_logger("app.main")


def build_store() -> BookStore:
    """Create the process-wide book store, seeded unless disabled."""
    store = BookStore.seeded() if settings.SEED_SAMPLE_BOOKS else BookStore()
    logger.info(f"Book store initialised with {len(store)} books")
    return store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    setup_logging()
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")

    app.state.store = build_store()

    yield

    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description=(
        "## Book Store API\n\n"
        "Create, read, update and delete books held in memory.\n\n"
        "- `GET /books` – list books, optionally filtered by `author`\n"
        "- `GET /books/{id}` – fetch one book\n"
        "- `POST /books` – add a book (`author`, `title`, `description`, `genre`)\n"
        "- `PUT /books/{id}` – partially update a book\n"
        "- `DELETE /books/{id}` – remove a book\n\n"
        "Data lives only as long as the process does."
    ),
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {
            "name": "Health",
            "description": "Greeting and health checks",
        },
        {
            "name": "Books",
            "description": "Book CRUD and author search",
        },
    ],
    license_info={
        "name": "MIT",
    },
    servers=[
        {"url": f"http://localhost:{settings.PORT}", "description": "Local development"},
    ],
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request ID and timing middleware
@app.middleware("http")
async def request_middleware(request: Request, call_next):
    req_id = str(uuid.uuid4())[:8]
    request_id_ctx.set(req_id)

    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time

    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} "
        f"({duration:.3f}s)"
    )

    response.headers["X-Request-ID"] = req_id
    return response


@app.exception_handler(BookStoreError)
async def book_store_error_handler(request: Request, exc: BookStoreError):
    logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


@app.get(
    "/",
    tags=["Health"],
    summary="Welcome",
    description="Returns a plain-text greeting.",
    response_class=PlainTextResponse,
)
async def welcome():
    return settings.WELCOME_MESSAGE


@app.get("/health", tags=["Health"], summary="Health check", description="Returns the current health status, API version and number of stored books.")
async def health_check(store: Annotated[BookStore, Depends(get_store)]):
    return {"status": "healthy", "version": settings.APP_VERSION, "books": len(store)}


from app.api.endpoints.books import router as books_router

app.include_router(books_router)
