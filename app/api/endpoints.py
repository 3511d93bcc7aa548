from fastapi import APIRouter

from app.api.routes import community, guidance, health, journaling, prayers, transcription


router = APIRouter()

router.include_router(guidance.router)
router.include_router(transcription.router)
router.include_router(journaling.router)
router.include_router(prayers.router)
router.include_router(community.router)
router.include_router(health.router)
