# File: tests/test_rbac.py

from chronoboard.core import rbac
from chronoboard.core.rbac import Permission, Role, has_permission, permissions_for


def test_user_holds_only_profile_permissions():
    assert permissions_for(Role.USER) == {Permission.PROFILE_VIEW, Permission.PROFILE_UPDATE}


def test_manager_inherits_user_permissions():
    perms = permissions_for("manager")
    assert Permission.PROFILE_UPDATE in perms
    assert Permission.USERS_LIST in perms
    assert Permission.USERS_DELETE not in perms


def test_admin_holds_every_permission():
    assert permissions_for(Role.ADMIN) == set(Permission)


def test_unknown_role_has_nothing():
    assert permissions_for("superuser") == frozenset()
    assert permissions_for(None) == frozenset()
    assert not has_permission("superuser", Permission.PROFILE_VIEW)


def test_hierarchy_cycle_terminates(monkeypatch):
    monkeypatch.setitem(rbac.ROLE_HIERARCHY, Role.USER, [Role.ADMIN])
    rbac._effective_permissions.cache_clear()
    try:
        assert permissions_for(Role.USER) == set(Permission)
    finally:
        rbac._effective_permissions.cache_clear()


def test_roles_endpoint_lists_effective_permissions(client, alice, auth_headers):
    resp = client.get("/api/v1/rbac/roles", headers=auth_headers(alice))
    assert resp.status_code == 200
    roles = {r["name"]: r for r in resp.json()}
    assert set(roles) == {"admin", "manager", "user"}
    assert roles["admin"]["inherits"] == ["manager"]
    assert "profile:view" in roles["admin"]["permissions"]
    assert roles["user"]["permissions"] == ["profile:update", "profile:view"]


def test_roles_endpoint_requires_login(client):
    assert client.get("/api/v1/rbac/roles").status_code == 401


def test_my_permissions(client, manager, auth_headers):
    resp = client.get("/api/v1/rbac/me", headers=auth_headers(manager))
    assert resp.status_code == 200
    data = resp.json()
    assert data["role"] == "manager"
    assert "users:view" in data["permissions"]
    assert "users:delete" not in data["permissions"]
