"""HTTP middleware. Applied in rbac_admin.main (first added = outermost)."""

from rbac_admin.middleware.request_id import (
    RequestIdLogFilter,
    RequestIDMiddleware,
    request_id_var,
)

__all__ = ["RequestIDMiddleware", "RequestIdLogFilter", "request_id_var"]
