"""In-memory filtering, sorting and paging for admin list screens.

Every helper here is pure: it never mutates its input and degrades to an
empty or default result instead of raising. Records may be mappings or plain
objects; pass ``accessor`` to read fields some other way.
"""

from __future__ import annotations

import math
import unicodedata
from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Literal, Mapping, Sequence, TypeVar

T = TypeVar("T")

SortDirection = Literal["asc", "desc"]
FieldAccessor = Callable[[Any, str], Any]

SEARCH_FILTER_KEY = "search"
MAX_PAGE_BUTTONS = 5


@dataclass(frozen=True)
class SortConfig:
    key: str
    direction: SortDirection = "asc"


@dataclass(frozen=True)
class PaginationConfig:
    current_page: int = 1
    page_size: int = 10


def get_field(record: Any, field: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(_text(item) for item in value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def _matches_filter(item_value: Any, wanted: str) -> bool:
    if item_value is None:
        return False
    if isinstance(item_value, (list, tuple, set, frozenset)):
        return wanted in item_value
    if isinstance(item_value, bool):
        return item_value == (wanted == "true")
    haystack = _text(item_value).lower()
    needle = wanted.lower()
    return haystack == needle or needle in haystack


def filter_data(
    data: Iterable[T] | None,
    search_text: str | None,
    filters: Mapping[str, Any] | None,
    searchable_fields: Sequence[str],
    *,
    accessor: FieldAccessor = get_field,
) -> list[T]:
    if not data:
        return []

    rows = list(data)

    if search_text:
        needle = str(search_text).lower()
        rows = [
            item
            for item in rows
            if any(
                (value := accessor(item, field)) is not None and needle in _text(value).lower()
                for field in searchable_fields
            )
        ]

    for key, wanted in (filters or {}).items():
        if not wanted or key == SEARCH_FILTER_KEY:
            continue
        wanted_text = str(wanted)
        rows = [item for item in rows if _matches_filter(accessor(item, key), wanted_text)]

    return rows


def _locale_compare(a: str, b: str) -> int:
    # Accent- and case-insensitive first, then exact text as tie-breaker.
    a_key = unicodedata.normalize("NFKD", a).casefold()
    b_key = unicodedata.normalize("NFKD", b).casefold()
    if a_key != b_key:
        return -1 if a_key < b_key else 1
    if a == b:
        return 0
    return -1 if a < b else 1


def _as_instant(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, datetime.min.time())
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _as_finite_number(value: Any) -> float | None:
    if isinstance(value, (bool, int, float, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def compare_values(a: Any, b: Any) -> int:
    """Ascending three-way comparison used by :func:`sort_data`.

    The checks run in a fixed order and the first one that applies wins, so
    two numeric-looking strings compare as text, not as numbers.
    """
    if a is None:
        return -1
    if b is None:
        return 1

    if isinstance(a, str) and isinstance(b, str):
        return _locale_compare(a, b)

    a_instant = _as_instant(a)
    b_instant = _as_instant(b)
    if a_instant is not None and b_instant is not None:
        if a_instant == b_instant:
            return 0
        return -1 if a_instant < b_instant else 1

    a_number = _as_finite_number(a)
    b_number = _as_finite_number(b)
    if a_number is not None and b_number is not None:
        if a_number == b_number:
            return 0
        return -1 if a_number < b_number else 1

    if isinstance(a, bool) and isinstance(b, bool):
        if a == b:
            return 0
        return 1 if a else -1

    try:
        if a < b:
            return -1
        if a > b:
            return 1
    except TypeError:
        return 0
    return 0


def sort_data(
    data: Sequence[T] | None,
    sort_config: SortConfig | None,
    *,
    accessor: FieldAccessor = get_field,
) -> Sequence[T] | None:
    if sort_config is None or data is None:
        return data

    sign = 1 if sort_config.direction == "asc" else -1
    key = sort_config.key

    def _cmp(left: T, right: T) -> int:
        return sign * compare_values(accessor(left, key), accessor(right, key))

    return sorted(data, key=cmp_to_key(_cmp))


def paginate_data(data: Sequence[T] | None, pagination: PaginationConfig) -> list[T]:
    if not data:
        return []
    page = int(pagination.current_page)
    size = int(pagination.page_size)
    if page < 1 or size < 1:
        return []
    start = (page - 1) * size
    return list(data[start : start + size])


def calculate_total_pages(total_items: int, page_size: int) -> int:
    if page_size < 1:
        return 1
    return max(1, math.ceil(total_items / page_size))


def generate_pagination_range(current_page: int, total_pages: int) -> list[int]:
    if total_pages <= MAX_PAGE_BUTTONS:
        return list(range(1, total_pages + 1))
    if current_page <= 3:
        return [1, 2, 3, 4, total_pages]
    if current_page >= total_pages - 2:
        return [1] + list(range(total_pages - 3, total_pages + 1))
    return [1, current_page - 1, current_page, current_page + 1, total_pages]


def process_table(
    data: Iterable[T] | None,
    *,
    search_text: str | None = None,
    filters: Mapping[str, Any] | None = None,
    searchable_fields: Sequence[str] = (),
    sort_config: SortConfig | None = None,
    pagination: PaginationConfig | None = None,
    accessor: FieldAccessor = get_field,
) -> dict[str, Any]:
    pagination = pagination or PaginationConfig()
    filtered = filter_data(data, search_text, filters, searchable_fields, accessor=accessor)
    ordered = sort_data(filtered, sort_config, accessor=accessor)
    total = len(ordered)
    total_pages = calculate_total_pages(total, pagination.page_size)
    return {
        "rows": paginate_data(ordered, pagination),
        "total": total,
        "total_pages": total_pages,
        "current_page": pagination.current_page,
        "page_size": pagination.page_size,
        "page_range": generate_pagination_range(pagination.current_page, total_pages),
    }
