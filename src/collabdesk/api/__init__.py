"""HTTP surface: routes, identity, schemas, and error handlers."""

from collabdesk.api.errors import register_exception_handlers
from collabdesk.api.identity import HeaderIdentityProvider, IdentityProvider, current_influencer
from collabdesk.api.routes import get_inquiry_service, router

__all__ = [
    "HeaderIdentityProvider",
    "IdentityProvider",
    "current_influencer",
    "get_inquiry_service",
    "register_exception_handlers",
    "router",
]
