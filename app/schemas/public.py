from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from app.schemas.validators import email_or_error, min_length_or_error


class DonationCreate(BaseModel):
    first_name: str
    last_name: str
    email: str
    amount: int
    payment_method: str
    recurring: bool = False
    transaction_id: Optional[str] = None

    @field_validator("first_name")
    @classmethod
    def validate_first_name(cls, value: str) -> str:
        return min_length_or_error(value, 2, "First name must be at least 2 characters")

    @field_validator("last_name")
    @classmethod
    def validate_last_name(cls, value: str) -> str:
        return min_length_or_error(value, 2, "Last name must be at least 2 characters")

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return email_or_error(value)

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Amount must be positive")
        return value


class VolunteerCreate(BaseModel):
    first_name: str
    last_name: str
    email: str
    phone: str
    areas: List[str] = Field(default_factory=list)
    availability: List[str] = Field(default_factory=list)
    message: str

    @field_validator("first_name")
    @classmethod
    def validate_first_name(cls, value: str) -> str:
        return min_length_or_error(value, 2, "First name must be at least 2 characters")

    @field_validator("last_name")
    @classmethod
    def validate_last_name(cls, value: str) -> str:
        return min_length_or_error(value, 2, "Last name must be at least 2 characters")

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return email_or_error(value)

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value: str) -> str:
        return min_length_or_error(value, 10, "Phone number must be at least 10 characters")

    @field_validator("message")
    @classmethod
    def validate_message(cls, value: str) -> str:
        return min_length_or_error(value, 10, "Message must be at least 10 characters")


class ContactMessageCreate(BaseModel):
    name: str
    email: str
    subject: str
    message: str
    newsletter: bool = False

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return min_length_or_error(value, 2, "Name must be at least 2 characters")

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return email_or_error(value)

    @field_validator("subject")
    @classmethod
    def validate_subject(cls, value: str) -> str:
        return min_length_or_error(value, 3, "Subject must be at least 3 characters")

    @field_validator("message")
    @classmethod
    def validate_message(cls, value: str) -> str:
        return min_length_or_error(value, 10, "Message must be at least 10 characters")


class NewsletterSubscribe(BaseModel):
    email: str

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return email_or_error(value)


class ArticleCommentCreate(BaseModel):
    name: str
    email: str
    content: str
    parent_id: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return min_length_or_error(value, 2, "Name must be at least 2 characters")

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return email_or_error(value)

    @field_validator("content")
    @classmethod
    def validate_content(cls, value: str) -> str:
        return min_length_or_error(value, 3, "Comment must be at least 3 characters")


class ArticleLikeCreate(BaseModel):
    email: str

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return email_or_error(value)
