import pytest

from models import db, User


@pytest.fixture
def accounts(make_user):
    return {
        "pending": make_user(email="p@example.com", status="pending"),
        "approved": make_user(email="a@example.com", status="approved"),
        "rejected": make_user(email="r@example.com", status="rejected"),
    }


def test_stats(client, admin_headers, accounts):
    body = client.get("/api/admin/stats", headers=admin_headers).get_json()
    # the admin account itself is approved
    assert body["stats"] == {"total": 4, "pending": 1, "approved": 2, "rejected": 1}


def test_list_users_with_status_filter(client, admin_headers, accounts):
    body = client.get("/api/admin/users?status=pending", headers=admin_headers).get_json()
    assert [u["email"] for u in body["users"]] == ["p@example.com"]


def test_list_users_ignores_unknown_status(client, admin_headers, accounts):
    body = client.get("/api/admin/users?status=banned", headers=admin_headers).get_json()
    assert len(body["users"]) == 4


def test_approve_and_reject(client, admin_headers, accounts):
    pending_id = accounts["pending"].id
    resp = client.post(f"/api/admin/users/{pending_id}/approve", headers=admin_headers)
    assert resp.status_code == 200
    assert db.session.get(User, pending_id).status == "approved"

    resp = client.post(f"/api/admin/users/{pending_id}/reject", headers=admin_headers)
    assert resp.get_json()["user"]["status"] == "rejected"


def test_approve_invalid_id(client, admin_headers):
    resp = client.post("/api/admin/users/abc/approve", headers=admin_headers)
    assert resp.status_code == 400
    assert resp.get_json()["code"] == "VAL_002"


def test_approve_unknown_user(client, admin_headers):
    resp = client.post("/api/admin/users/999/approve", headers=admin_headers)
    assert resp.status_code == 404


def test_non_admin_is_forbidden(client, headers):
    resp = client.get("/api/admin/stats", headers=headers)
    assert resp.status_code == 403
    assert resp.get_json()["code"] == "AUTH_007"
