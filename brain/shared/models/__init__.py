"""
Brain SQLAlchemy Models

This package contains all database models for the Brain application.

Model Hierarchy:
================
    User
       ├── contents (Content[])
       │      └── tags (Tag[])  via content_tags
       └── share_link (ShareLink?)

Models Overview:
================
- Base: Base class and timestamp mixin
- User: Registered application user
- Content: A saved link (image / video / article / audio)
- Tag: Global label attached to content
- ShareLink: Public token exposing one user's content read-only

Usage:
======
    from brain.shared.models import User, Content, ShareLink
"""

from brain.shared.models.base import Base, TimestampMixin
from brain.shared.models.enums import ContentType
from brain.shared.models.user import User
from brain.shared.models.tag import Tag
from brain.shared.models.content import Content, content_tags
from brain.shared.models.share_link import ShareLink

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Enums
    "ContentType",
    # Models
    "User",
    "Tag",
    "Content",
    "content_tags",
    "ShareLink",
]
