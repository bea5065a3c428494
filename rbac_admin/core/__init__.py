"""Core: config, constants, logging and application bootstrap.

Single place for settings and shared constants.
"""

from rbac_admin.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
