from __future__ import annotations

import re

YOUTUBE_ID_LENGTH = 11
_YOUTUBE_RE = re.compile(r"^.*(youtu.be/|v/|u/\w/|embed/|watch\?v=|&v=)([^#&?]*).*")


def extract_youtube_id(url: str | None) -> str | None:
    match = _YOUTUBE_RE.match(str(url or ""))
    if not match:
        return None
    video_id = match.group(2)
    return video_id if len(video_id) == YOUTUBE_ID_LENGTH else None


def youtube_embed_url(url: str | None) -> str | None:
    video_id = extract_youtube_id(url)
    if video_id is None:
        return url
    return f"https://www.youtube.com/embed/{video_id}"
