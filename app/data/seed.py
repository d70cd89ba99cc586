from __future__ import annotations

from datetime import date
from typing import Any

from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.session import SessionLocal
from app.models.faculty_member import FacultyMember
from app.models.history_event import HistoryEvent
from app.models.news_article import NewsArticle
from app.models.program import Program
from app.models.site_setting import SiteSetting
from app.models.team_member import TeamMember
from app.models.university_course import UniversityCourse
from app.models.video import Video
from app.services.admin_bootstrap import ensure_bootstrap_admin_for_login

_IMG = "https://images.unsplash.com/{}?ixlib=rb-1.2.1&auto=format&fit=crop&w=800&q=80"

NEWS_ARTICLES = [
    {
        "title": "Sunnah Foundation's Annual Conference Attracts Global Attendance",
        "excerpt": "Our recent conference brought together scholars and attendees from over 20 countries.",
        "content": (
            "The Sunnah Foundation's Annual Conference was a tremendous success this year, attracting "
            "participants from more than 20 countries. Workshops and panel discussions provided practical "
            "guidance for implementing Islamic principles in daily life."
        ),
        "date": date(2023, 6, 15),
        "image_url": _IMG.format("photo-1551818255-e6e10975bc17"),
        "category": "Event",
        "author": "Admin",
        "slug": "annual-conference-global-attendance",
    },
    {
        "title": "New Youth Leadership Program Launches This Summer",
        "excerpt": "Our program will empower young Muslims with leadership skills and Islamic knowledge.",
        "content": (
            "The Sunnah Foundation is proud to announce the launch of our new Youth Leadership Program. "
            "The program includes mentorship from established community leaders and workshops on "
            "effective communication and project management."
        ),
        "date": date(2023, 5, 28),
        "image_url": _IMG.format("photo-1577896851231-70ef18881754"),
        "category": "Program",
        "author": "Admin",
        "slug": "youth-leadership-program-launch",
    },
    {
        "title": "Foundation Volunteers Serve 5,000 Meals in Community Initiative",
        "excerpt": "Our volunteers partnered with local organizations to provide meals and essential supplies.",
        "content": (
            "Sunnah Foundation volunteers recently completed a major initiative providing over 5,000 meals "
            "to those in need, working in partnership with local food banks and community organizations."
        ),
        "date": date(2023, 5, 10),
        "image_url": _IMG.format("photo-1542810634-71277d95dcbb"),
        "category": "Community",
        "author": "Admin",
        "slug": "volunteers-serve-meals-community",
    },
]

PROGRAMS = [
    {
        "title": "Youth Mentorship Program",
        "description": "Guidance and support for young Muslims navigating contemporary challenges.",
        "long_description": (
            "The Youth Mentorship Program pairs young Muslims with trained mentors who provide guidance, "
            "support and Islamic knowledge relevant to youth experiences over eight months."
        ),
        "category": "Youth Development",
        "image_url": _IMG.format("photo-1577896851231-70ef18881754"),
        "slug": "youth-mentorship",
    },
    {
        "title": "Quran Learning Program",
        "description": "Courses for Quran memorization, recitation and understanding its meanings.",
        "long_description": (
            "The Quran Learning Program offers structured classes for students of all ages and levels, "
            "from beginners learning Arabic letters to advanced students pursuing complete memorization."
        ),
        "category": "Education",
        "image_url": _IMG.format("photo-1582213782179-e0d53f98f2ca"),
        "slug": "quran-learning",
    },
    {
        "title": "Community Food Bank",
        "description": "Nutritious meals and essential groceries for families in need within our community.",
        "long_description": (
            "Our Community Food Bank operates weekly to provide food packages to individuals and families "
            "experiencing food insecurity. Anyone in need is welcome regardless of religious background."
        ),
        "category": "Community Service",
        "image_url": _IMG.format("photo-1593113598332-cd59a0c3a5bc"),
        "slug": "community-food-bank",
    },
]

TEAM_MEMBERS = [
    {
        "name": "Dr. Ahmad Ibrahim",
        "title": "Executive Director",
        "bio": "Ph.D. in Islamic Studies with over 20 years of experience in educational leadership.",
        "image_url": _IMG.format("photo-1507003211169-0a1dd7228f2d"),
        "social_links": {"linkedin": "https://linkedin.com/in/ahmad-ibrahim"},
        "is_leadership": True,
    },
    {
        "name": "Sarah Hassan",
        "title": "Community Outreach Director",
        "bio": "Dedicated to building bridges between communities through educational initiatives.",
        "image_url": _IMG.format("photo-1573497019940-1c28c88b4f3e"),
        "social_links": {"linkedin": "https://linkedin.com/in/sarah-hassan"},
        "is_leadership": False,
    },
]

VIDEOS = [
    {
        "title": "Understanding the Essence of Sunnah in Modern Times",
        "description": "Scholars discuss implementing the prophetic tradition in contemporary life.",
        "thumbnail_url": _IMG.format("photo-1556761175-129418cb2dfe"),
        "video_url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "duration": "42:15",
        "views": 4328,
        "date": date(2023, 5, 15),
        "category": "Islamic Knowledge",
        "is_featured": True,
        "is_main_feature": True,
    },
    {
        "title": "Family Values in Islam",
        "description": "Exploring the importance of family bonds and parenting in Islamic tradition.",
        "thumbnail_url": _IMG.format("photo-1566492031773-4f4e44671857"),
        "video_url": "https://youtu.be/9bZkp7q19f0",
        "duration": "24:15",
        "views": 2356,
        "date": date(2023, 4, 22),
        "category": "Family",
        "is_featured": True,
        "is_main_feature": False,
    },
]

HISTORY_EVENTS = [
    {"year": 2005, "title": "Foundation Established", "sort_order": 1,
     "description": "The Sunnah Foundation was established by scholars and community leaders."},
    {"year": 2008, "title": "First Community Center", "sort_order": 2,
     "description": "Acquired our first dedicated facility to serve as a community center."},
    {"year": 2018, "title": "Sunnah University Established", "sort_order": 3,
     "description": "Founded Sunnah University to offer degree programs in Islamic studies."},
]

UNIVERSITY_COURSES = [
    {
        "title": "Bachelor of Arts in Islamic Studies",
        "description": "Undergraduate program covering the fundamental Islamic sciences and history.",
        "level": "Undergraduate",
        "duration": "4 years",
        "instructors": ["Dr. Ahmad Ibrahim", "Imam Yusuf Ali"],
        "image_url": _IMG.format("photo-1532012197267-da84d127e765"),
    },
    {
        "title": "Certificate in Hadith Studies",
        "description": "Study of prophetic traditions, their authenticity, compilation and application.",
        "level": "Certificate",
        "duration": "6 months",
        "instructors": ["Imam Yusuf Ali"],
        "image_url": _IMG.format("photo-1590596615969-1f070fdc809d"),
    },
]

FACULTY_MEMBERS = [
    {
        "name": "Imam Yusuf Ali",
        "title": "Lecturer",
        "specialization": "Quranic Sciences and Recitation",
        "bio": "Certified Quran teacher with ijazah in multiple modes of recitation.",
        "image_url": _IMG.format("photo-1560250097-0b93528c311a"),
    },
]

SITE_SETTINGS = [
    {"key": "site_name", "value": "Sunnah Foundation", "label": "Site name", "group": "general"},
    {"key": "contact_email", "value": "info@sunnahfoundation.org", "label": "Contact email", "group": "contact"},
    {"key": "contact_phone", "value": "+1 (555) 123-4567", "label": "Contact phone", "group": "contact"},
]

SEED_TABLES: list[tuple[type, list[dict[str, Any]]]] = [
    (NewsArticle, NEWS_ARTICLES),
    (Program, PROGRAMS),
    (TeamMember, TEAM_MEMBERS),
    (Video, VIDEOS),
    (HistoryEvent, HISTORY_EVENTS),
    (UniversityCourse, UNIVERSITY_COURSES),
    (FacultyMember, FACULTY_MEMBERS),
]


def seed_table(db: Session, model: type, rows: list[dict[str, Any]]) -> int:
    """Insert ``rows`` only when the table is still empty."""
    if db.query(model.id).first() is not None:
        return 0
    for item in rows:
        db.add(model(**item))
    db.commit()
    return len(rows)


def upsert_settings(db: Session, rows: list[dict[str, Any]]) -> int:
    created = 0
    for item in rows:
        if db.query(SiteSetting).filter(SiteSetting.key == item["key"]).first() is not None:
            continue
        db.add(SiteSetting(**item))
        created += 1
    db.commit()
    return created


def seed_all(db: Session) -> dict[str, int]:
    result = {model.__tablename__: seed_table(db, model, rows) for model, rows in SEED_TABLES}
    result["site_settings"] = upsert_settings(db, SITE_SETTINGS)
    return result


def main() -> None:
    db = SessionLocal()
    try:
        ensure_bootstrap_admin_for_login(db, settings.ADMIN_BOOTSTRAP_USERNAME, settings.ADMIN_BOOTSTRAP_PASSWORD)
        result = seed_all(db)
    finally:
        db.close()
    print("seed done: " + ", ".join(f"{name}={count}" for name, count in result.items()))


if __name__ == "__main__":
    main()
