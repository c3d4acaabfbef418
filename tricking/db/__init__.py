from tricking.db.database import get_session, init_db
from tricking.db.operations import (
    find_candidate_tricks,
    get_featured_video,
    get_trick,
    get_trick_by_slug,
    list_categories,
    list_tricks,
    trick_to_candidate,
    upsert_category,
    upsert_trick,
)

__all__ = [
    "find_candidate_tricks",
    "get_featured_video",
    "get_session",
    "get_trick",
    "get_trick_by_slug",
    "init_db",
    "list_categories",
    "list_tricks",
    "trick_to_candidate",
    "upsert_category",
    "upsert_trick",
]
