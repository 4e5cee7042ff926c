"""Tests for POST /login."""

from httpx import AsyncClient
from pytest import mark

from bloglist.managers.token_manager import decode_access_token


class TestLogin:
    async def test_login_returns_token_username_and_name(
        self,
        client: AsyncClient,
        create_user,
    ) -> None:
        user = await create_user()

        response = await client.post(
            "/login",
            json={"username": "mluukkai", "password": "salainen"},
        )

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"token", "username", "name"}
        assert body["username"] == "mluukkai"
        assert body["name"] == "Matti Luukkainen"
        assert str(decode_access_token(body["token"]).user_id) == user["id"]

    async def test_wrong_username_and_wrong_password_look_the_same(
        self,
        client: AsyncClient,
        create_user,
    ) -> None:
        """Failure bodies must not reveal which half of the credentials was wrong."""
        await create_user()

        unknown_user = await client.post(
            "/login",
            json={"username": "nobody", "password": "salainen"},
        )
        wrong_password = await client.post(
            "/login",
            json={"username": "mluukkai", "password": "wrong"},
        )

        assert unknown_user.status_code == wrong_password.status_code == 401
        assert unknown_user.json() == wrong_password.json() == {
            "error": "invalid username or password",
        }

    async def test_username_is_case_sensitive(self, client: AsyncClient, create_user) -> None:
        await create_user()

        response = await client.post(
            "/login",
            json={"username": "MLUUKKAI", "password": "salainen"},
        )

        assert response.status_code == 401

    @mark.parametrize(
        "payload",
        [{}, {"username": "mluukkai"}, {"password": "salainen"}, {"username": "", "password": ""}],
    )
    async def test_missing_fields_are_invalid_credentials(
        self,
        client: AsyncClient,
        create_user,
        payload: dict,
    ) -> None:
        await create_user()

        response = await client.post("/login", json=payload)

        assert response.status_code == 401
        assert response.json() == {"error": "invalid username or password"}
