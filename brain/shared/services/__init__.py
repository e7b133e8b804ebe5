"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories,
security utilities and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- TokenService: Signed session tokens
- AuthService: Sign up and sign in
- ContentService: Owner-scoped content CRUD
- ShareLinkService: Share link lifecycle and public resolution

Usage:
======
    from brain.shared.services import AuthService, TokenService

    service = AuthService(db, TokenService.from_settings(settings))
    token = await service.signin(username, password)
"""

from brain.shared.services.token_service import TokenService
from brain.shared.services.auth_service import AuthService
from brain.shared.services.content_service import ContentService
from brain.shared.services.share_link_service import ShareLinkService, SharedBrain

__all__ = [
    "TokenService",
    "AuthService",
    "ContentService",
    "ShareLinkService",
    "SharedBrain",
]
