import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from folio.routers import pages, posts
from folio.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="folio", description="Personal blog and portfolio")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        f"Serving {settings.SITE_NAME} at {settings.BASE_URL} "
        f"(posts from {settings.POSTS_DIR})"
    )
    try:
        yield
    finally:
        logger.info("folio exited gracefully")


app.router.lifespan_context = lifespan

app.mount(
    "/static",
    StaticFiles(directory=settings.STATIC_DIR, check_dir=False),
    name="static",
)
app.include_router(posts.router)
app.include_router(pages.router)


@app.get("/healthz")
async def healthz():
    return {"message": "folio is running"}
