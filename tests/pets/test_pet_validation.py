"""Integration tests: pet business validation."""

from __future__ import annotations

from starlette.testclient import TestClient

from tests._helpers import create_owner, create_pet


def test_future_birth_date_is_rejected(client: TestClient) -> None:
    owner_id = create_owner(client=client)
    # Far-future date avoids flakiness around time zones / midnight boundaries.
    res = client.post(
        f"/owners/{owner_id}/pets",
        json={"name": "Leo", "birth_date": "2999-01-01", "type": "cat"},
    )
    assert res.status_code == 400
    assert "birth_date" in res.json()["detail"]


def test_unknown_pet_type_is_rejected(client: TestClient) -> None:
    owner_id = create_owner(client=client)
    res = client.post(
        f"/owners/{owner_id}/pets",
        json={"name": "Nessie", "birth_date": "2020-01-01", "type": "dragon"},
    )
    assert res.status_code == 400
    assert "Invalid pet type" in res.json()["detail"]


def test_duplicate_pet_name_for_same_owner_is_rejected(client: TestClient) -> None:
    owner_id = create_owner(client=client)
    create_pet(client=client, owner_id=owner_id, name="Leo")

    res = client.post(
        f"/owners/{owner_id}/pets",
        json={"name": "leo", "birth_date": "2021-01-01", "type": "dog"},
    )
    assert res.status_code == 400
    assert res.json()["detail"] == "Owner already has a pet with this name."


def test_same_pet_name_under_different_owners_is_allowed(client: TestClient) -> None:
    first = create_owner(client=client)
    second = create_owner(client=client, first_name="Betty", last_name="Davis")
    create_pet(client=client, owner_id=first, name="Leo")
    create_pet(client=client, owner_id=second, name="Leo")


def test_rename_to_sibling_name_is_rejected(client: TestClient) -> None:
    owner_id = create_owner(client=client)
    create_pet(client=client, owner_id=owner_id, name="Max")
    pet_id = create_pet(client=client, owner_id=owner_id, name="Samantha")

    res = client.put(f"/owners/{owner_id}/pets/{pet_id}", json={"name": "MAX"})
    assert res.status_code == 400


def test_blank_pet_name_is_rejected_on_create(client: TestClient) -> None:
    owner_id = create_owner(client=client)

    res = client.post(
        f"/owners/{owner_id}/pets",
        json={"name": "   ", "birth_date": "2020-01-01", "type": "cat"},
    )

    assert res.status_code == 400
    assert res.json()["detail"] == "name must not be blank."
    assert client.get(f"/owners/{owner_id}/pets").json()["items"] == []


def test_blank_pet_name_is_rejected_on_update(client: TestClient) -> None:
    owner_id = create_owner(client=client)
    pet_id = create_pet(client=client, owner_id=owner_id, name="Leo")

    res = client.put(f"/owners/{owner_id}/pets/{pet_id}", json={"name": "  "})

    assert res.status_code == 400
    assert client.get(f"/owners/{owner_id}/pets/{pet_id}").json()["name"] == "Leo"
