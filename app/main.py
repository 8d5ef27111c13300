import logging

from fastapi import FastAPI

from app.routers import posts, preview
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="spacetraveling", description="Blog front-end for Prismic posts")

app.include_router(posts.router)
app.include_router(preview.router)


@app.get("/health")
async def health():
    return {"message": "spacetraveling is running"}
