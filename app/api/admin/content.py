from typing import Any

from sqlalchemy.orm import Session

from app.api.admin.crud import ContentTable, build_crud_router
from app.models.event import Event
from app.models.faculty_member import FacultyMember
from app.models.history_event import HistoryEvent
from app.models.news_article import NewsArticle
from app.models.program import Program
from app.models.team_member import TeamMember
from app.models.university_course import UniversityCourse
from app.models.video import Video
from app.schemas.admin import (
    EventUpsert,
    FacultyMemberUpsert,
    HistoryEventUpsert,
    NewsArticleUpsert,
    ProgramUpsert,
    TeamMemberUpsert,
    UniversityCourseUpsert,
    VideoUpsert,
)
from app.services.serialization import row_to_dict
from app.services.slugs import generate_slug, is_valid_slug, unique_slug
from app.services.youtube import youtube_embed_url


def _slug_filler(model: type, fallback: str):
    def _prepare(db: Session, payload: dict[str, Any], row: Any) -> dict[str, Any]:
        if payload.get("slug") or row is not None:
            return payload
        base = generate_slug(payload.get("title"))
        if not is_valid_slug(base):
            base = fallback
        payload["slug"] = unique_slug(db, model, base)
        return payload

    return _prepare


def _video_prepare(db: Session, payload: dict[str, Any], row: Any) -> dict[str, Any]:
    if row is None and db.query(Video.id).first() is None:
        payload["is_main_feature"] = True
    return payload


def _video_after_save(db: Session, row: Video) -> None:
    if not row.is_main_feature:
        return
    db.query(Video).filter(Video.id != row.id, Video.is_main_feature.is_(True)).update(
        {Video.is_main_feature: False}, synchronize_session=False
    )
    db.commit()


def serialize_video(row: Video) -> dict[str, Any]:
    data = row_to_dict(row)
    data["embed_url"] = youtube_embed_url(row.video_url)
    return data


NEWS = ContentTable(
    model=NewsArticle,
    label="Article",
    searchable_fields=("title", "excerpt", "author", "category", "slug"),
    order_by=lambda m: (m.date.desc(), m.created_at.desc()),
    upsert_schema=NewsArticleUpsert,
    prepare=_slug_filler(NewsArticle, "article"),
)
PROGRAMS = ContentTable(
    model=Program,
    label="Program",
    searchable_fields=("title", "description", "category", "slug"),
    order_by=lambda m: (m.created_at.asc(),),
    upsert_schema=ProgramUpsert,
    prepare=_slug_filler(Program, "program"),
)
TEAM = ContentTable(
    model=TeamMember,
    label="Team member",
    searchable_fields=("name", "title", "bio"),
    order_by=lambda m: (m.is_leadership.desc(), m.created_at.asc()),
    upsert_schema=TeamMemberUpsert,
)
VIDEOS = ContentTable(
    model=Video,
    label="Video",
    searchable_fields=("title", "description", "category"),
    order_by=lambda m: (m.date.desc(), m.created_at.desc()),
    upsert_schema=VideoUpsert,
    prepare=_video_prepare,
    after_save=_video_after_save,
    serialize=serialize_video,
)
HISTORY = ContentTable(
    model=HistoryEvent,
    label="History event",
    searchable_fields=("title", "description", "year"),
    order_by=lambda m: (m.year.asc(), m.sort_order.asc()),
    upsert_schema=HistoryEventUpsert,
)
COURSES = ContentTable(
    model=UniversityCourse,
    label="University course",
    searchable_fields=("title", "description", "level", "instructors"),
    order_by=lambda m: (m.created_at.asc(),),
    upsert_schema=UniversityCourseUpsert,
)
FACULTY = ContentTable(
    model=FacultyMember,
    label="Faculty member",
    searchable_fields=("name", "title", "specialization"),
    order_by=lambda m: (m.created_at.asc(),),
    upsert_schema=FacultyMemberUpsert,
)
EVENTS = ContentTable(
    model=Event,
    label="Event",
    searchable_fields=("title", "description", "location"),
    order_by=lambda m: (m.date.asc(), m.created_at.asc()),
    upsert_schema=EventUpsert,
)

news_router = build_crud_router(NEWS)
programs_router = build_crud_router(PROGRAMS)
team_router = build_crud_router(TEAM)
videos_router = build_crud_router(VIDEOS)
history_router = build_crud_router(HISTORY)
courses_router = build_crud_router(COURSES)
faculty_router = build_crud_router(FACULTY)
events_router = build_crud_router(EVENTS)
