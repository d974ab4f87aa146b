"""Core database package: declarative base and mixins.

    - Base: Declarative base with auto table naming and constraint conventions
    - IntegerPKMixin: Integer auto-increment primary key
"""

from content_service.core.database.base import NAMING_CONVENTION, Base, IntegerPKMixin

__all__ = ["NAMING_CONVENTION", "Base", "IntegerPKMixin"]
