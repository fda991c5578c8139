from .api import ApiClient, ApiClientError
from .session import SessionStore
from .views import VIEWS, ViewKind, open_view

__all__ = ["ApiClient", "ApiClientError", "SessionStore", "VIEWS", "ViewKind", "open_view"]
