"""Tests for /users."""

from httpx import AsyncClient
from pytest import mark


class TestCreateUser:
    async def test_created_user_is_serialized_without_internals(self, client: AsyncClient) -> None:
        response = await client.post(
            "/users",
            json={"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"},
        )

        assert response.status_code == 201
        body = response.json()
        assert set(body) == {"id", "username", "name", "blogs"}
        assert body["username"] == "mluukkai"
        assert body["name"] == "Matti Luukkainen"
        assert body["blogs"] == []
        assert "salainen" not in response.text

    async def test_name_is_optional(self, client: AsyncClient) -> None:
        response = await client.post("/users", json={"username": "root", "password": "sekret"})

        assert response.status_code == 201
        assert response.json()["name"] is None

    @mark.parametrize(
        ("payload", "message"),
        [
            ({"password": "salainen"}, "username is required"),
            ({"username": "", "password": "salainen"}, "username is required"),
            ({"username": "ab", "password": "salainen"}, "username must be at least 3 characters long"),
            ({"username": "m", "password": "salainen"}, "username must be at least 3 characters long"),
            (
                {"username": "x" * 51, "password": "salainen"},
                "username must be at most 50 characters long",
            ),
            (
                {"username": "mluukkai"},
                "please enter a password that is at least 3 characters long",
            ),
            (
                {"username": "mluukkai", "password": "ab"},
                "please enter a password that is at least 3 characters long",
            ),
        ],
    )
    async def test_validation_errors(
        self,
        client: AsyncClient,
        payload: dict,
        message: str,
    ) -> None:
        response = await client.post("/users", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == message

    async def test_username_rule_is_reported_before_password_rule(self, client: AsyncClient) -> None:
        response = await client.post("/users", json={"username": "ab", "password": "x"})

        assert response.status_code == 400
        assert response.json() == {
            "error": "username must be at least 3 characters long",
            "field": "username",
        }

    async def test_duplicate_username(self, client: AsyncClient, create_user) -> None:
        await create_user(username="root")

        response = await client.post("/users", json={"username": "root", "password": "another"})

        assert response.status_code == 400
        assert response.json()["error"] == "expected `username` to be unique"

        listing = await client.get("/users")
        assert len(listing.json()) == 1

    async def test_uniqueness_is_case_sensitive(self, client: AsyncClient, create_user) -> None:
        await create_user(username="root")

        response = await client.post("/users", json={"username": "Root", "password": "another"})

        assert response.status_code == 201


class TestListUsers:
    async def test_users_are_listed_with_their_blogs(
        self,
        client: AsyncClient,
        create_user,
        auth_headers: dict[str, str],
    ) -> None:
        await create_user(username="hellas", name="Arto Hellas")
        created = await client.post(
            "/blogs",
            json={"title": "Type wars", "author": "Robert C. Martin", "url": "http://t.w/", "likes": 2},
            headers=auth_headers,
        )

        response = await client.get("/users")

        assert response.status_code == 200
        users = {user["username"]: user for user in response.json()}
        assert set(users) == {"mluukkai", "hellas"}
        assert users["hellas"]["blogs"] == []
        assert users["mluukkai"]["blogs"] == [
            {
                "id": created.json()["id"],
                "title": "Type wars",
                "author": "Robert C. Martin",
                "url": "http://t.w/",
                "likes": 2,
            },
        ]
        for user in users.values():
            assert "uuid" not in user
            assert "password_hash" not in user
            assert "passwordHash" not in user
