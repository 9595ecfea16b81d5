# bookshelf/main.py
import logging

from fastapi import FastAPI

from .catalog.router import router as catalog_router
from .config import get_settings


logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Bookshelf",
    description=(
        "In-memory book catalogue: add and delete books, look them up "
        "by a substring of their name or author."
    ),
    version="1.0.0",
)

app.include_router(catalog_router)


# Base route for a quick liveness check
@app.get("/")
def health_check():
    return {"status": "ok"}
