"""
Enums used across the application.
"""

from enum import Enum


class ContentType(str, Enum):
    """Kind of link a user saved."""

    IMAGE = "image"
    VIDEO = "video"
    ARTICLE = "article"
    AUDIO = "audio"
