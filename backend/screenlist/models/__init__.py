from screenlist.models.user import User
from screenlist.models.content import Content, ContentType
from screenlist.models.watchlist import WatchlistEntry
from screenlist.models.progress import WatchProgress

__all__ = [
    "User",
    "Content",
    "ContentType",
    "WatchlistEntry",
    "WatchProgress",
]
