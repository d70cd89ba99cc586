import re

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

def email_or_error(value: str) -> str:
    normalized = str(value or "").strip().lower()
    if not _EMAIL_RE.fullmatch(normalized):
        raise ValueError("Must provide a valid email")
    return normalized

def min_length_or_error(value: str, length: int, message: str) -> str:
    text = str(value or "").strip()
    if len(text) < length:
        raise ValueError(message)
    return text
