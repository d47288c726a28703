"""Test helpers shared by the owner, pet and visit slices."""

from __future__ import annotations

from starlette.testclient import TestClient


def create_owner(
    *,
    client: TestClient,
    first_name: str = "George",
    last_name: str = "Franklin",
    telephone: str = "6085551023",
) -> str:
    """Create an owner and return its id."""
    # Never follow redirects on POST: a 307/308 would re-POST and create duplicates.
    res = client.post(
        "/owners",
        json={
            "first_name": first_name,
            "last_name": last_name,
            "address": "110 W. Liberty St.",
            "city": "Madison",
            "telephone": telephone,
        },
        follow_redirects=False,
    )
    assert res.status_code == 201, res.text
    return res.json()["id"]


def create_pet(
    *,
    client: TestClient,
    owner_id: str,
    name: str = "Leo",
    birth_date: str = "2020-09-07",
    pet_type: str = "cat",
) -> str:
    """Create a pet for `owner_id` and return its id."""
    res = client.post(
        f"/owners/{owner_id}/pets",
        json={"name": name, "birth_date": birth_date, "type": pet_type},
        follow_redirects=False,
    )
    assert res.status_code == 201, res.text
    return res.json()["id"]


def visits_url(*, owner_id: str, pet_id: str) -> str:
    return f"/owners/{owner_id}/pets/{pet_id}/visits"
