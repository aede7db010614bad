"""HTTP tests for the /users resource."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from src.user_registry.api.http.deps import get_min_age

USER_FIELDS = ("email", "firstName", "lastName", "birthDate", "address", "phoneNumber")


class TestCreateUser:
    def test_create_valid_user(self, client: TestClient, valid_user_data):
        response = client.post("/users", json=valid_user_data)

        assert response.status_code == 201
        body = response.json()
        assert body["id"] > 0
        for field in USER_FIELDS:
            assert body[field] == valid_user_data[field]

    def test_created_user_round_trip(self, client: TestClient, valid_user_data):
        created = client.post("/users", json=valid_user_data).json()

        response = client.get(f"/users/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"id": created["id"], **valid_user_data}

    def test_underage_user_rejected(self, client: TestClient, valid_user_data):
        response = client.post(
            "/users", json={**valid_user_data, "birthDate": "2010-01-01"}
        )

        assert response.status_code == 400
        assert "not Adult" in response.json()["message"]
        assert client.get("/users").json() == []

    @pytest.mark.parametrize(
        ("field", "message"),
        [
            ("email", "Email may not be null; Email may have at least 1 symbol"),
            ("firstName", "FirstName may not be null; FirstName may have at least 1 symbol"),
            ("lastName", "LastName may not be null; LastName may have at least 1 symbol"),
            ("birthDate", "BirthDate may not be null"),
            ("address", "Address may have at least 1 symbol"),
            ("phoneNumber", "PhoneNumber may have at least 1 symbol"),
        ],
    )
    def test_missing_field_rejected(self, client: TestClient, valid_user_data, field, message):
        body = {key: value for key, value in valid_user_data.items() if key != field}

        response = client.post("/users", json=body)

        assert response.status_code == 400
        assert response.json() == {"message": message}

    @pytest.mark.parametrize("field", ["email", "firstName", "lastName", "address", "phoneNumber"])
    def test_empty_field_rejected(self, client: TestClient, valid_user_data, field):
        response = client.post("/users", json={**valid_user_data, field: ""})

        assert response.status_code == 400
        assert "may have at least 1 symbol" in response.json()["message"]

    def test_invalid_email_rejected(self, client: TestClient, valid_user_data):
        response = client.post("/users", json={**valid_user_data, "email": "testgmail.com"})

        assert response.status_code == 400
        assert response.json()["message"] == "Email is not valid"

    def test_future_birth_date_rejected(self, client: TestClient, valid_user_data):
        response = client.post("/users", json={**valid_user_data, "birthDate": "2030-01-01"})

        assert response.status_code == 400
        assert response.json()["message"] == "BirthDate may not be in future"

    def test_all_errors_aggregated(self, client: TestClient):
        response = client.post("/users", json={"email": "bad"})

        assert response.status_code == 400
        message = response.json()["message"]
        for expected in ("Email is not valid", "FirstName may not be null", "BirthDate may not be null"):
            assert expected in message

    def test_client_supplied_id_ignored(self, client: TestClient, valid_user_data):
        response = client.post("/users", json={**valid_user_data, "id": 777})

        assert response.status_code == 201
        assert response.json()["id"] != 777

    def test_malformed_birth_date_is_bad_request(self, client: TestClient, valid_user_data):
        response = client.post("/users", json={**valid_user_data, "birthDate": "01/01/2000"})

        assert response.status_code == 400
        assert "birthDate" in response.json()["message"]

    def test_minimum_age_is_configurable(self, app, client: TestClient, valid_user_data):
        app.dependency_overrides[get_min_age] = lambda: 30

        response = client.post("/users", json=valid_user_data)

        assert response.status_code == 400
        assert response.json() == {"message": "User is not Adult"}


class TestReadUsers:
    def test_list_empty(self, client: TestClient):
        response = client.get("/users")

        assert response.status_code == 200
        assert response.json() == []

    def test_list_all(self, client: TestClient, valid_user_data):
        ids = [
            client.post("/users", json={**valid_user_data, "email": f"u{i}@b.com"}).json()["id"]
            for i in range(3)
        ]

        response = client.get("/users")

        assert response.status_code == 200
        assert [user["id"] for user in response.json()] == ids

    def test_get_missing_user(self, client: TestClient):
        response = client.get("/users/404")

        assert response.status_code == 404
        assert response.json() == {"message": "User with id 404 not found"}

    @pytest.mark.parametrize("method", ["get", "put", "patch", "delete"])
    def test_out_of_range_id_is_bad_request(self, client: TestClient, valid_user_data, method):
        kwargs = {} if method in ("get", "delete") else {"json": valid_user_data}

        response = getattr(client, method)(f"/users/{2**70}", **kwargs)

        assert response.status_code == 400
        assert "user_id" in response.json()["message"]

    def test_non_integer_id_is_bad_request(self, client: TestClient):
        response = client.get("/users/abc")

        assert response.status_code == 400
        assert "message" in response.json()


class TestReplaceUser:
    def test_replace_user(self, client: TestClient, stored_user):
        replacement = {
            "email": "test.user2@gmail.com",
            "firstName": "Philipp",
            "lastName": "Morris",
            "birthDate": "2000-06-13",
            "address": "Lviv",
            "phoneNumber": "+380503746382",
        }

        response = client.put(f"/users/{stored_user['id']}", json=replacement)

        assert response.status_code == 200
        assert response.json() == {"id": stored_user["id"], **replacement}
        assert client.get(f"/users/{stored_user['id']}").json() == response.json()

    def test_replace_missing_user_before_validation(self, client: TestClient):
        response = client.put("/users/99", json={})

        assert response.status_code == 404
        assert response.json() == {"message": "User with id 99 not found"}

    def test_replace_with_partial_body_fails(self, client: TestClient, stored_user):
        response = client.put(f"/users/{stored_user['id']}", json={"firstName": "Z"})

        assert response.status_code == 400
        assert "Email may not be null" in response.json()["message"]
        assert client.get(f"/users/{stored_user['id']}").json() == stored_user

    def test_replace_with_minor(self, client: TestClient, stored_user, valid_user_data):
        response = client.put(
            f"/users/{stored_user['id']}",
            json={**valid_user_data, "birthDate": "2010-01-01"},
        )

        assert response.status_code == 400
        assert response.json() == {"message": "User is not Adult"}


class TestPatchUser:
    def test_patch_single_field(self, client: TestClient, stored_user):
        response = client.patch(f"/users/{stored_user['id']}", json={"firstName": "Z"})

        assert response.status_code == 200
        assert response.json() == {**stored_user, "firstName": "Z"}

    def test_patch_empty_body_changes_nothing(self, client: TestClient, stored_user):
        response = client.patch(f"/users/{stored_user['id']}", json={})

        assert response.status_code == 200
        assert response.json() == stored_user

    def test_patch_explicit_null_is_ignored(self, client: TestClient, stored_user):
        response = client.patch(f"/users/{stored_user['id']}", json={"address": None})

        assert response.status_code == 200
        assert response.json()["address"] == stored_user["address"]

    def test_patch_blank_string_is_accepted(self, client: TestClient, stored_user):
        response = client.patch(f"/users/{stored_user['id']}", json={"lastName": ""})

        assert response.status_code == 200
        assert response.json()["lastName"] == ""

    def test_patch_empty_email_rejected(self, client: TestClient, stored_user):
        response = client.patch(f"/users/{stored_user['id']}", json={"email": ""})

        assert response.status_code == 400
        assert response.json() == {"message": "Email is not valid"}
        assert client.get(f"/users/{stored_user['id']}").json() == stored_user

    def test_patch_invalid_email(self, client: TestClient, stored_user):
        response = client.patch(f"/users/{stored_user['id']}", json={"email": "testgmail.com"})

        assert response.status_code == 400
        assert response.json() == {"message": "Email is not valid"}

    def test_patch_minor_birth_date(self, client: TestClient, stored_user):
        response = client.patch(f"/users/{stored_user['id']}", json={"birthDate": "2010-01-01"})

        assert response.status_code == 400
        assert response.json() == {"message": "User is not Adult"}
        assert client.get(f"/users/{stored_user['id']}").json() == stored_user

    def test_patch_missing_user_before_validation(self, client: TestClient):
        response = client.patch("/users/5", json={"email": "broken"})

        assert response.status_code == 404


class TestDeleteUser:
    def test_delete_twice(self, client: TestClient, stored_user):
        user_id = stored_user["id"]

        first = client.delete(f"/users/{user_id}")
        second = client.delete(f"/users/{user_id}")

        assert first.status_code == 200
        assert first.json() == {"message": f"User with id {user_id} successfully deleted"}
        assert second.status_code == 404
        assert second.json() == {"message": f"User with id {user_id} not found"}
        assert client.get(f"/users/{user_id}").status_code == 404


class TestSearchUsers:
    @pytest.fixture
    def population(self, client: TestClient, valid_user_data) -> list[dict[str, Any]]:
        birth_dates = ["1995-10-06", "2000-06-13", "2001-09-22", "2005-02-16"]
        return [
            client.post(
                "/users",
                json={**valid_user_data, "email": f"u{i}@b.com", "birthDate": birth_date},
            ).json()
            for i, birth_date in enumerate(birth_dates)
        ]

    def test_search_inclusive_range(self, client: TestClient, population):
        response = client.get("/users/search", params={"from": "2000-06-13", "to": "2005-02-16"})

        assert response.status_code == 200
        assert response.json() == population[1:]

    def test_search_without_matches(self, client: TestClient, population):
        response = client.get("/users/search", params={"from": "1950-01-01", "to": "1960-01-01"})

        assert response.status_code == 200
        assert response.json() == []

    def test_search_inverted_range(self, client: TestClient, population):
        response = client.get("/users/search", params={"from": "2002-01-01", "to": "2000-01-01"})

        assert response.status_code == 400
        assert "cannot be higher" in response.json()["message"]

    def test_search_inverted_range_on_empty_store(self, client: TestClient):
        response = client.get("/users/search", params={"from": "2002-01-01", "to": "2000-12-31"})

        assert response.status_code == 400

    def test_search_requires_both_bounds(self, client: TestClient):
        response = client.get("/users/search", params={"from": "2000-01-01"})

        assert response.status_code == 400
        assert "to" in response.json()["message"]

    def test_search_rejects_malformed_dates(self, client: TestClient):
        response = client.get("/users/search", params={"from": "yesterday", "to": "2000-01-01"})

        assert response.status_code == 400
