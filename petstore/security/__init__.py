# Security modules

from .admin import AdminDependency, require_admin

__all__ = ["AdminDependency", "require_admin"]
