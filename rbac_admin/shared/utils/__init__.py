"""Shared utilities: datetime helpers."""

from rbac_admin.shared.utils.datetime import ensure_utc, utc_now

__all__ = [
    "ensure_utc",
    "utc_now",
]
