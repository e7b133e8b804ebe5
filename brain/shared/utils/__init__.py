"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing and JWT primitives

Usage:
======
    from brain.shared.utils.security import SecurityUtils
"""

from brain.shared.utils.security import BCRYPT_ROUNDS, SecurityUtils

__all__ = [
    "BCRYPT_ROUNDS",
    "SecurityUtils",
]
