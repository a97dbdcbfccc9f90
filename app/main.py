import logging

from fastapi import FastAPI
from app.database import create_db_and_tables
from app.config import settings
from app.routes import books, health

from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager


logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Run DB creation ONLY in local
    if settings.ENV == "local":
        create_db_and_tables()
        logger.info("Database tables ensured")
    yield

app = FastAPI(title="Bookstore Catalog API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(books.router, prefix="/api/books", tags=["Books"])
app.include_router(health.router, prefix="/health", tags=["Health"])


@app.get("/")
def root():
    return {
        "book_endpoints": [
            "/api/books", "/api/books/{book_id}"
        ],
        "health": [
            "/health/check"
        ]
    }
