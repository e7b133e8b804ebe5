"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]       ← Generic CRUD operations
         │
         ├── UserRepository         ← Username lookups
         ├── ContentRepository      ← Owner-scoped content queries
         ├── TagRepository          ← Get-or-create tags by title
         └── ShareLinkRepository    ← One-link-per-owner lifecycle

Usage Example:
==============
    from brain.shared.repositories import ShareLinkRepository

    repo = ShareLinkRepository(db)
    link = await repo.get_by_hash(token)
"""

from brain.shared.repositories.base import BaseRepository
from brain.shared.repositories.user_repository import UserRepository
from brain.shared.repositories.content_repository import ContentRepository
from brain.shared.repositories.tag_repository import TagRepository
from brain.shared.repositories.share_link_repository import ShareLinkRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "ContentRepository",
    "TagRepository",
    "ShareLinkRepository",
]
