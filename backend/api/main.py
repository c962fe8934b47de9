from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.routers import facets_router
from backend.api.routers.facets import _init_facets
from backend.core.config import settings
from storefront.facets import __version__

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle - build the catalog index at startup."""
    if not _init_facets():
        logger.warning("Starting without a catalog; search will return 503 until one loads")

    yield  # Application runs here


app = FastAPI(title="Storefront Facets", version=__version__, lifespan=lifespan)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(facets_router)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "version": __version__}
