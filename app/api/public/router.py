from fastapi import APIRouter
from app.api.public import about, events, forms, news, programs, site_settings, team, university, videos

router = APIRouter()
router.include_router(news.router, prefix="/news", tags=["Public"])
router.include_router(programs.router, prefix="/programs", tags=["Public"])
router.include_router(team.router, prefix="/team", tags=["Public"])
router.include_router(videos.router, prefix="/videos", tags=["Public"])
router.include_router(about.router, prefix="/about", tags=["Public"])
router.include_router(university.router, prefix="/university", tags=["Public"])
router.include_router(events.router, prefix="/events", tags=["Public"])
router.include_router(site_settings.router, prefix="/settings", tags=["Public"])
router.include_router(forms.router, prefix="/forms", tags=["PublicForms"])
