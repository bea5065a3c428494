"""Tests for /api/v1/roles: list, create, manage-role screen, matrix save and toggle."""

from httpx import AsyncClient

from tests.fakes import FakeModuleRepository, FakeRoleRepository


async def test_list_roles_paginates(
    api_client: AsyncClient, role_repo: FakeRoleRepository
) -> None:
    for name in ("Admin", "Editor", "Viewer"):
        role_repo.add(name)
    response = await api_client.get(
        "/api/v1/roles", params={"sortBy": "name", "sortDirection": "desc"}
    )
    assert response.status_code == 200
    data = response.json()
    assert [r["name"] for r in data["items"]] == ["Viewer", "Editor", "Admin"]
    assert data["total"] == 3


async def test_list_roles_rejected_sort_falls_back(
    api_client: AsyncClient, role_repo: FakeRoleRepository
) -> None:
    role_repo.add("First")
    role_repo.add("Second")
    response = await api_client.get(
        "/api/v1/roles", params={"sortBy": "order", "sortDirection": "asc"}
    )
    assert [r["name"] for r in response.json()["items"]] == ["Second", "First"]


async def test_list_roles_stale_page_redirects(api_client: AsyncClient) -> None:
    response = await api_client.get("/api/v1/roles", params={"page": 2})
    assert response.status_code == 302
    assert "page=1" in response.headers["location"]


async def test_create_role(api_client: AsyncClient) -> None:
    response = await api_client.post(
        "/api/v1/roles", json={"name": "Editor", "for_admin": True}
    )
    assert response.status_code == 201
    assert response.json()["for_admin"] is True


async def test_create_role_duplicate_name(
    api_client: AsyncClient, role_repo: FakeRoleRepository
) -> None:
    role_repo.add("Editor")
    response = await api_client.post("/api/v1/roles", json={"name": "Editor"})
    assert response.status_code == 422
    assert response.json()["details"]["field"] == "name"


async def test_get_role_returns_permissions_and_matrix_rows(
    api_client: AsyncClient,
    module_repo: FakeModuleRepository,
    role_repo: FakeRoleRepository,
) -> None:
    roles_module = module_repo.add("Roles", order=2)
    detail_module = module_repo.add("Roles Detail", order=1, parent_id=roles_module.id)
    role = role_repo.add("Editor", permissions={str(detail_module.id): ["can_view"]})

    response = await api_client.get(f"/api/v1/roles/{role.id}")

    assert response.status_code == 200
    data = response.json()
    assert data["permissions"] == {str(detail_module.id): ["can_view"]}
    assert data["modules"][0]["name"] == "Roles"
    assert data["modules"][0]["children"][0]["name"] == "Roles Detail"


async def test_get_missing_role_returns_404(api_client: AsyncClient) -> None:
    assert (await api_client.get("/api/v1/roles/42")).status_code == 404


async def test_save_permissions_replaces_map(
    api_client: AsyncClient,
    module_repo: FakeModuleRepository,
    role_repo: FakeRoleRepository,
) -> None:
    users = module_repo.add("Users", available_actions=("can_view", "can_edit"))
    role = role_repo.add("Editor")
    response = await api_client.put(
        f"/api/v1/roles/{role.id}/permissions",
        json={
            "name": "Editor",
            "description": "Edits users",
            "for_admin": True,
            "permissions": {str(users.id): ["can_edit", "can_view"]},
        },
    )
    assert response.status_code == 200
    assert response.json()["permissions"] == {str(users.id): ["can_view", "can_edit"]}
    assert role_repo.permissions[role.id] == {str(users.id): ["can_view", "can_edit"]}


async def test_save_permissions_for_non_admin_stores_empty_map(
    api_client: AsyncClient,
    module_repo: FakeModuleRepository,
    role_repo: FakeRoleRepository,
) -> None:
    users = module_repo.add("Users")
    role = role_repo.add("Viewer", permissions={str(users.id): ["can_view"]})
    response = await api_client.put(
        f"/api/v1/roles/{role.id}/permissions",
        json={
            "name": "Viewer",
            "for_admin": False,
            "permissions": {str(users.id): ["can_view"]},
        },
    )
    assert response.status_code == 200
    assert response.json()["permissions"] == {}
    assert role_repo.permissions[role.id] == {}


async def test_save_permissions_unknown_action_keeps_stored_map(
    api_client: AsyncClient,
    module_repo: FakeModuleRepository,
    role_repo: FakeRoleRepository,
) -> None:
    users = module_repo.add("Users")
    role = role_repo.add("Editor", permissions={str(users.id): ["can_view"]})
    response = await api_client.put(
        f"/api/v1/roles/{role.id}/permissions",
        json={
            "name": "Editor",
            "for_admin": True,
            "permissions": {str(users.id): ["root"]},
        },
    )
    assert response.status_code == 422
    assert response.json()["details"]["action"] == "root"
    assert role_repo.permissions[role.id] == {str(users.id): ["can_view"]}


async def test_toggle_permission(
    api_client: AsyncClient,
    module_repo: FakeModuleRepository,
    role_repo: FakeRoleRepository,
) -> None:
    users = module_repo.add("Users", available_actions=("can_view", "can_edit"))
    role = role_repo.add("Editor", permissions={str(users.id): ["can_view"]})
    url = f"/api/v1/roles/{role.id}/permissions/{users.id}"

    response = await api_client.patch(url, json={"action": "can_edit", "granted": True})
    assert response.status_code == 200
    assert response.json()["permissions"] == {str(users.id): ["can_view", "can_edit"]}

    response = await api_client.patch(url, json={"action": "can_view", "granted": False})
    assert response.json()["permissions"] == {str(users.id): ["can_edit"]}


async def test_toggle_for_admin_disabled_role_is_noop(
    api_client: AsyncClient,
    module_repo: FakeModuleRepository,
    role_repo: FakeRoleRepository,
) -> None:
    users = module_repo.add("Users")
    role = role_repo.add("Viewer", for_admin=False)
    response = await api_client.patch(
        f"/api/v1/roles/{role.id}/permissions/{users.id}",
        json={"action": "can_view", "granted": True},
    )
    assert response.status_code == 200
    assert response.json()["permissions"] == {}
    assert role_repo.replace_calls == 0


async def test_delete_role(
    api_client: AsyncClient, role_repo: FakeRoleRepository
) -> None:
    role = role_repo.add("Editor")
    assert (await api_client.delete(f"/api/v1/roles/{role.id}")).status_code == 204
    assert (await api_client.get(f"/api/v1/roles/{role.id}")).status_code == 404
