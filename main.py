import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.endpoints import router
from app.core.config import settings
from app.shared.correlation import CorrelationMiddleware
from app.shared.errors import register_exception_handlers
from app.shared.logging_config import setup_logging

# Configure logging
setup_logging(settings.SERVICE_NAME)
logger = logging.getLogger("Scrolls.Main")

app = FastAPI(
    title="Living Scrolls Service",
    description="Devotional journaling, streaks and scripture guidance",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)
app.add_middleware(CorrelationMiddleware)
register_exception_handlers(app)

app.include_router(router, prefix="/api")


@app.get("/")
async def root():
    return {"message": "Living Scrolls Service Running"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
