"""Tests for GET /api/v1/navigation."""

from httpx import AsyncClient

from tests.fakes import FakeModuleRepository


async def test_navigation_filters_by_role(
    api_client: AsyncClient, module_repo: FakeModuleRepository, resolver
) -> None:
    module_repo.add("Dashboard", order=1)
    roles = module_repo.add("Roles", order=2)
    module_repo.add("Roles Detail", order=1, parent_id=roles.id)
    module_repo.add("Users", order=3)
    resolver.grants[1] = {"Dashboard", "Roles Detail"}

    response = await api_client.get("/api/v1/navigation", params={"role_id": 1})

    assert response.status_code == 200
    platform = response.json()["navigations"]["Platform"]
    assert [n["name"] for n in platform] == ["Dashboard", "Roles"]
    assert [c["name"] for c in platform[1]["children"]] == ["Roles Detail"]


async def test_navigation_for_role_without_access_is_empty(
    api_client: AsyncClient, module_repo: FakeModuleRepository
) -> None:
    module_repo.add("Dashboard")
    response = await api_client.get("/api/v1/navigation", params={"role_id": 5})
    assert response.status_code == 200
    assert response.json() == {"navigations": {}}


async def test_navigation_requires_role_id(api_client: AsyncClient) -> None:
    response = await api_client.get("/api/v1/navigation")
    assert response.status_code == 422
