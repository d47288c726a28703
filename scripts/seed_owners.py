"""Seed owners, pets and visits for local development.

Safe to run multiple times:
- It only runs when APP_ENV=development
- It inserts rows only when the owners table is empty
"""

# ruff: noqa: I001
# pyright: reportMissingImports=false
from __future__ import annotations

import asyncio
import os
import uuid
from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import async_sessionmaker

from petclinic.core.db import create_engine
from petclinic.owners.models import Owner
from petclinic.pets.models import Pet
from petclinic.visits.models import Visit
from petclinic.visits.validators import get_visit_validation_pipeline

# Deterministic UUIDs so concurrent seeds agree on ids.
_NS = uuid.UUID("8f6f2a3c-5d7e-4b1a-9c0e-2f4d6b8a1e3c")

_OWNERS = [
    ("George", "Franklin", "110 W. Liberty St.", "Madison", "6085551023"),
    ("Betty", "Davis", "638 Cardinal Ave.", "Sun Prairie", "6085551749"),
    ("Eduardo", "Rodriquez", "2693 Commerce St.", "McFarland", "6085558763"),
    ("Harold", "Davis", "563 Friendly St.", "Windsor", "6085553198"),
    ("Peter", "McTavish", "2387 S. Fair Way", "Madison", "6085552765"),
    ("Jean", "Coleman", "105 N. Lake St.", "Monona", "6085552654"),
]

# (owner last+first, pet name, birth date, type)
_PETS = [
    ("Franklin George", "Leo", date(2020, 9, 7), "cat"),
    ("Davis Betty", "Basil", date(2022, 8, 6), "hamster"),
    ("Rodriquez Eduardo", "Rosy", date(2021, 4, 17), "dog"),
    ("Rodriquez Eduardo", "Jewel", date(2020, 3, 7), "dog"),
    ("Davis Harold", "Iggy", date(2020, 11, 30), "lizard"),
    ("McTavish Peter", "George", date(2020, 1, 20), "snake"),
    ("Coleman Jean", "Samantha", date(2022, 9, 4), "cat"),
    ("Coleman Jean", "Max", date(2022, 9, 4), "cat"),
]

# (pet name, visit date, description); every date is a weekday.
_VISITS = [
    ("Samantha", date(2023, 3, 6), "rabies shot"),
    ("Max", date(2023, 3, 7), "rabies shot"),
    ("Max", date(2023, 6, 8), "neutered"),
    ("Samantha", date(2023, 9, 4), "spayed"),
]


def _seed_objects() -> list[Owner | Pet | Visit]:
    """Return a deterministic graph of owners, pets and visits."""
    owners: dict[str, Owner] = {}
    for first, last, address, city, telephone in _OWNERS:
        key = f"{last} {first}"
        owners[key] = Owner(
            id=uuid.uuid5(_NS, key),
            first_name=first,
            last_name=last,
            address=address,
            city=city,
            telephone=telephone,
        )

    pets: dict[str, Pet] = {}
    for owner_key, name, birth_date, pet_type in _PETS:
        owner = owners[owner_key]
        pets[name] = Pet(
            id=uuid.uuid5(_NS, f"{owner_key}/{name}"),
            owner_id=owner.id,
            name=name,
            birth_date=birth_date,
            type=pet_type,
        )

    pipeline = get_visit_validation_pipeline()
    visits: list[Visit] = []
    for pet_name, visit_date, description in _VISITS:
        visit = Visit(pet_id=pets[pet_name].id, date=visit_date, description=description)
        pipeline.validate_or_raise(visit)
        visits.append(visit)

    return [*owners.values(), *pets.values(), *visits]


async def seed_owners_if_empty(*, database_url: str) -> None:
    """Seed the sample clinic if the owners table is empty."""
    engine = create_engine(database_url=database_url)
    sessionmaker = async_sessionmaker(engine, expire_on_commit=False)

    async with sessionmaker() as session:
        total = int((await session.execute(select(func.count()).select_from(Owner))).scalar_one())
        if total > 0:
            print(f"Seed skipped: owners table already has {total} row(s).")
            await engine.dispose()
            return

        objects = _seed_objects()
        # Parents first: flush owners, then pets, then visits.
        for kind in (Owner, Pet, Visit):
            session.add_all([o for o in objects if isinstance(o, kind)])
            await session.flush()
        await session.commit()
        print(f"Seeded {len(_OWNERS)} owners, {len(_PETS)} pets and {len(_VISITS)} visits.")

    await engine.dispose()


def main() -> None:
    """Entry point."""
    app_env = os.getenv("APP_ENV", "production").strip().lower()
    if app_env != "development":
        print(f"Seed skipped: APP_ENV={app_env!r} (seeding only runs in development).")
        return

    database_url = os.getenv("DATABASE_URL", "")
    if not database_url:
        raise SystemExit("DATABASE_URL is not set")

    asyncio.run(seed_owners_if_empty(database_url=database_url))


if __name__ == "__main__":
    main()
