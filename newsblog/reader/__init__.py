from .list_view import CATEGORIES, DEFAULT_CATEGORY, ListViewController, ListViewState
from .detail_view import DetailViewController, DetailViewState
from .sessions import SessionRegistry

__all__ = [
    "CATEGORIES",
    "DEFAULT_CATEGORY",
    "ListViewController",
    "ListViewState",
    "DetailViewController",
    "DetailViewState",
    "SessionRegistry",
]
