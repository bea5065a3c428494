"""API version 1: routers and dependency composition root."""

from rbac_admin.api.v1.router import api_router

__all__ = ["api_router"]
