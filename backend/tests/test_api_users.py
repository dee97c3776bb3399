"""Tests for users API endpoints."""


class TestUsersAPI:
    async def test_get_self(self, client, user):
        response = await client.get(f"/api/v1/users/{user['id']}", headers=user["headers"])
        assert response.status_code == 200
        data = response.json()["user"]
        assert data["id"] == user["id"]
        assert data["email"] == "expense1@tracker.com"
        assert data["firstName"] == "User1First"
        assert data["lastName"] == "User1Last"
        assert data["isOauth"] is False
        assert "password" not in data and "passwordHash" not in data
        assert {c["name"] for c in data["categories"]} >= {"Salary", "Rent", "Groceries"}

    async def test_get_other_user_forbidden(self, client, user, other_user):
        response = await client.get(f"/api/v1/users/{other_user['id']}", headers=user["headers"])
        assert response.status_code == 403

    async def test_requires_token(self, client, user):
        response = await client.get(f"/api/v1/users/{user['id']}")
        assert response.status_code == 401

    async def test_bad_token(self, client, user):
        response = await client.get(
            f"/api/v1/users/{user['id']}", headers={"Authorization": "Bearer garbage"}
        )
        assert response.status_code == 401

    async def test_list_users_ordered_by_first_name(self, client, user, other_user):
        response = await client.get("/api/v1/users", headers=user["headers"])
        assert response.status_code == 200
        names = [u["firstName"] for u in response.json()["users"]]
        assert names == ["User1First", "User2First"]

    async def test_update_names(self, client, user):
        response = await client.patch(
            f"/api/v1/users/{user['id']}",
            json={"firstName": "Changed"},
            headers=user["headers"],
        )
        assert response.status_code == 200
        data = response.json()["user"]
        assert data["firstName"] == "Changed"
        assert data["lastName"] == "User1Last"

    async def test_update_password(self, client, user):
        response = await client.patch(
            f"/api/v1/users/{user['id']}",
            json={"password": "newpassword"},
            headers=user["headers"],
        )
        assert response.status_code == 200

        old = await client.post("/api/v1/auth/token", json={
            "email": "expense1@tracker.com", "password": "password1",
        })
        new = await client.post("/api/v1/auth/token", json={
            "email": "expense1@tracker.com", "password": "newpassword",
        })
        assert old.status_code == 401
        assert new.status_code == 200

    async def test_delete(self, client, user):
        response = await client.delete(f"/api/v1/users/{user['id']}", headers=user["headers"])
        assert response.status_code == 200
        assert response.json() == {"deleted": user["id"]}

        # The token no longer resolves to an active user
        again = await client.get(f"/api/v1/users/{user['id']}", headers=user["headers"])
        assert again.status_code == 401

        login = await client.post("/api/v1/auth/token", json={
            "email": "expense1@tracker.com", "password": "password1",
        })
        assert login.status_code == 401
