from fastapi import APIRouter
from app.api.admin import auth, comments, content, newsletter, settings, stats, submissions

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["AdminAuth"])
router.include_router(content.news_router, prefix="/news", tags=["AdminNews"])
router.include_router(content.programs_router, prefix="/programs", tags=["AdminPrograms"])
router.include_router(content.team_router, prefix="/team", tags=["AdminTeam"])
router.include_router(content.videos_router, prefix="/videos", tags=["AdminVideos"])
router.include_router(content.history_router, prefix="/history", tags=["AdminAbout"])
router.include_router(content.courses_router, prefix="/university/courses", tags=["AdminUniversity"])
router.include_router(content.faculty_router, prefix="/university/faculty", tags=["AdminUniversity"])
router.include_router(content.events_router, prefix="/events", tags=["AdminEvents"])
router.include_router(submissions.donations_router, prefix="/donations", tags=["AdminDonations"])
router.include_router(submissions.volunteers_router, prefix="/volunteers", tags=["AdminVolunteers"])
router.include_router(submissions.contact_router, prefix="/contact", tags=["AdminContact"])
router.include_router(newsletter.router, prefix="/newsletter", tags=["AdminNewsletter"])
router.include_router(comments.router, prefix="/comments", tags=["AdminComments"])
router.include_router(settings.router, prefix="/settings", tags=["AdminSettings"])
router.include_router(stats.router, prefix="/stats", tags=["AdminStats"])
