"""Stale-page handling shared by list endpoints."""

from typing import Any

from fastapi import Request
from fastapi.responses import RedirectResponse

from rbac_admin.application.dtos.listing import PageResult


def stale_page_redirect(request: Request, result: PageResult[Any]) -> RedirectResponse | None:
    """Return a 302 to page 1 (other params kept) when the page is past the end."""
    if not result.is_stale:
        return None
    target = request.url.include_query_params(page=1)
    return RedirectResponse(url=str(target), status_code=302)
