import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from booklending.api import routes
from booklending.core.config import configure_logging
from booklending.core.database import Base, engine
from booklending.core.exceptions import LibraryError
from booklending.models import models  # noqa: F401  registers the tables on Base

configure_logging()
logger = logging.getLogger("booklending")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Creating database tables (if not present)...")
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(title="Book Lending Records", lifespan=lifespan)
app.include_router(routes.books_router)
app.include_router(routes.users_router)


@app.exception_handler(LibraryError)
async def library_error_handler(request: Request, exc: LibraryError):
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.get("/health")
def health():
    return {"status": "ok"}
