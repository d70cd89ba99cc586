from datetime import date as date_type

from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Optional

from app.schemas.validators import email_or_error, min_length_or_error
from app.services.slugs import is_valid_slug

DONATION_STATUSES = {"pending", "completed", "failed", "refunded"}
VOLUNTEER_STATUSES = {"pending", "approved", "rejected", "contacted"}


class AdminLogin(BaseModel):
    username: str
    password: str

class AdminToken(BaseModel):
    access_token: str
    token_type: str = "Bearer"


def _optional_slug(value: Optional[str]) -> Optional[str]:
    text = str(value or "").strip()
    if not text:
        return None
    if not is_valid_slug(text):
        raise ValueError("Slug must be at least 3 characters of lowercase letters, numbers, and hyphens")
    return text


class NewsArticleUpsert(BaseModel):
    title: str
    excerpt: str
    content: str
    date: Optional[date_type] = None
    image_url: str
    category: str
    author: str
    slug: Optional[str] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        return min_length_or_error(value, 3, "Title must be at least 3 characters")

    @field_validator("excerpt")
    @classmethod
    def validate_excerpt(cls, value: str) -> str:
        return min_length_or_error(value, 10, "Excerpt must be at least 10 characters")

    @field_validator("content")
    @classmethod
    def validate_content(cls, value: str) -> str:
        return min_length_or_error(value, 50, "Content must be at least 50 characters")

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, value: Optional[str]) -> Optional[str]:
        return _optional_slug(value)


class ProgramUpsert(BaseModel):
    title: str
    description: str
    long_description: str
    category: str
    image_url: str
    slug: Optional[str] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        return min_length_or_error(value, 3, "Title must be at least 3 characters")

    @field_validator("description")
    @classmethod
    def validate_description(cls, value: str) -> str:
        return min_length_or_error(value, 10, "Description must be at least 10 characters")

    @field_validator("long_description")
    @classmethod
    def validate_long_description(cls, value: str) -> str:
        return min_length_or_error(value, 50, "Long description must be at least 50 characters")

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, value: Optional[str]) -> Optional[str]:
        return _optional_slug(value)


class TeamMemberUpsert(BaseModel):
    name: str
    title: str
    bio: str
    image_url: str
    social_links: Dict[str, Any] = Field(default_factory=dict)
    is_leadership: bool = False

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return min_length_or_error(value, 2, "Name must be at least 2 characters")

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        return min_length_or_error(value, 2, "Title must be at least 2 characters")

    @field_validator("bio")
    @classmethod
    def validate_bio(cls, value: str) -> str:
        return min_length_or_error(value, 10, "Bio must be at least 10 characters")


class VideoUpsert(BaseModel):
    title: str
    description: str
    thumbnail_url: str
    video_url: str
    duration: str
    views: int = Field(0, ge=0)
    date: Optional[date_type] = None
    category: str
    is_featured: bool = False
    is_main_feature: bool = False

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        return min_length_or_error(value, 3, "Title must be at least 3 characters")

    @field_validator("description")
    @classmethod
    def validate_description(cls, value: str) -> str:
        return min_length_or_error(value, 10, "Description must be at least 10 characters")


class HistoryEventUpsert(BaseModel):
    year: int
    title: str
    description: str
    image_url: Optional[str] = None
    sort_order: int = 0

    @field_validator("year")
    @classmethod
    def validate_year(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Year must be positive")
        return value

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        return min_length_or_error(value, 3, "Title must be at least 3 characters")

    @field_validator("description")
    @classmethod
    def validate_description(cls, value: str) -> str:
        return min_length_or_error(value, 10, "Description must be at least 10 characters")


class UniversityCourseUpsert(BaseModel):
    title: str
    description: str
    level: str
    duration: str
    instructors: List[str] = Field(default_factory=list)
    image_url: str
    application_link: Optional[str] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        return min_length_or_error(value, 3, "Title must be at least 3 characters")

    @field_validator("description")
    @classmethod
    def validate_description(cls, value: str) -> str:
        return min_length_or_error(value, 10, "Description must be at least 10 characters")


class FacultyMemberUpsert(BaseModel):
    name: str
    title: str
    specialization: str
    bio: str
    image_url: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return min_length_or_error(value, 2, "Name must be at least 2 characters")

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        return min_length_or_error(value, 2, "Title must be at least 2 characters")

    @field_validator("specialization")
    @classmethod
    def validate_specialization(cls, value: str) -> str:
        return min_length_or_error(value, 3, "Specialization must be at least 3 characters")

    @field_validator("bio")
    @classmethod
    def validate_bio(cls, value: str) -> str:
        return min_length_or_error(value, 10, "Bio must be at least 10 characters")


class EventUpsert(BaseModel):
    title: str
    description: str
    date: date_type
    time: str
    location: str
    image_url: str
    registration_link: Optional[str] = None
    is_past: bool = False

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        return min_length_or_error(value, 3, "Title must be at least 3 characters")

    @field_validator("description")
    @classmethod
    def validate_description(cls, value: str) -> str:
        return min_length_or_error(value, 10, "Description must be at least 10 characters")

    @field_validator("location")
    @classmethod
    def validate_location(cls, value: str) -> str:
        return min_length_or_error(value, 3, "Location must be at least 3 characters")


class SiteSettingCreate(BaseModel):
    key: str
    value: str
    label: str
    description: Optional[str] = None
    group: str = "general"
    type: str = "text"

    @field_validator("key")
    @classmethod
    def validate_key(cls, value: str) -> str:
        return min_length_or_error(value, 2, "Key must be at least 2 characters")

    @field_validator("value")
    @classmethod
    def validate_value(cls, value: str) -> str:
        return min_length_or_error(value, 1, "Value is required")

    @field_validator("label")
    @classmethod
    def validate_label(cls, value: str) -> str:
        return min_length_or_error(value, 2, "Label must be at least 2 characters")


class SiteSettingUpdate(BaseModel):
    value: str
    label: Optional[str] = None
    description: Optional[str] = None

    @field_validator("value")
    @classmethod
    def validate_value(cls, value: str) -> str:
        return min_length_or_error(value, 1, "Value is required")


class DonationStatusUpdate(BaseModel):
    status: str

    @field_validator("status")
    @classmethod
    def validate_status(cls, value: str) -> str:
        normalized = str(value or "").strip().lower()
        if normalized not in DONATION_STATUSES:
            raise ValueError("status must be one of: " + ", ".join(sorted(DONATION_STATUSES)))
        return normalized


class VolunteerStatusUpdate(BaseModel):
    status: str

    @field_validator("status")
    @classmethod
    def validate_status(cls, value: str) -> str:
        normalized = str(value or "").strip().lower()
        if normalized not in VOLUNTEER_STATUSES:
            raise ValueError("status must be one of: " + ", ".join(sorted(VOLUNTEER_STATUSES)))
        return normalized


class ContactReadUpdate(BaseModel):
    is_read: bool


class BulkDelete(BaseModel):
    ids: List[str] = Field(default_factory=list)


class NewsletterBroadcast(BaseModel):
    subject: str
    content: str
    html: Optional[str] = None
    test_email: Optional[str] = None
    send_to_all: bool = False

    @field_validator("subject")
    @classmethod
    def validate_subject(cls, value: str) -> str:
        return min_length_or_error(value, 5, "Subject must be at least 5 characters")

    @field_validator("content")
    @classmethod
    def validate_content(cls, value: str) -> str:
        return min_length_or_error(value, 10, "Content must be at least 10 characters")

    @field_validator("test_email")
    @classmethod
    def validate_test_email(cls, value: Optional[str]) -> Optional[str]:
        if not str(value or "").strip():
            return None
        return email_or_error(value)
