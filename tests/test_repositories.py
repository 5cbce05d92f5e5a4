"""
Tests for the repositories against an in-memory SQLite database.
"""

from datetime import date

import pytest

from petclinic.domain.entities import Owner, Pet, Visit
from petclinic.exceptions import DatabaseError, NotFoundError
from petclinic.repositories import OwnerRepository, PetRepository, VisitRepository


@pytest.fixture
def owners(db_session):
    return OwnerRepository(db_session)


@pytest.fixture
def pets(db_session):
    return PetRepository(db_session)


@pytest.fixture
def visits(db_session):
    return VisitRepository(db_session)


@pytest.fixture
def types(pets):
    return {pet_type.name: pet_type for pet_type in pets.find_pet_types()}


def new_owner(last_name: str = "Franklin", first_name: str = "George") -> Owner:
    return Owner(
        first_name=first_name,
        last_name=last_name,
        address="110 W. Liberty St.",
        city="Madison",
        telephone="6085551023",
    )


class TestOwnerRepository:

    def test_save_new_owner_assigns_ids(self, owners, types):
        owner = new_owner()
        owner.add_pet(Pet(name="Leo", birth_date=date(2010, 9, 7), type=types["cat"]))

        saved = owners.save(owner)

        assert saved is owner
        assert owner.id is not None
        assert owner.pets[0].id is not None

    def test_find_by_id_lists_pets_by_name_with_owner(self, owners, types):
        owner = new_owner()
        owner.add_pet(Pet(name="Zed", birth_date=date(2012, 1, 1), type=types["dog"]))
        owner.add_pet(Pet(name="Abby", birth_date=date(2013, 1, 1), type=types["cat"]))
        owners.save(owner)

        found = owners.find_by_id(owner.id)

        assert found.last_name == "Franklin"
        assert [p.name for p in found.pets] == ["Abby", "Zed"]
        assert all(p.owner is found for p in found.pets)
        assert found.pets[1].type.name == "dog"

    def test_find_by_id_does_not_load_visits(self, owners, types):
        owner = new_owner()
        pet = Pet(name="Leo", birth_date=date(2010, 9, 7), type=types["cat"])
        pet.add_visit(Visit(date=date(2021, 3, 4), description="rabies shot"))
        owner.add_pet(pet)
        owners.save(owner)

        found = owners.find_by_id(owner.id)

        assert found.pets[0].visits == []

    def test_find_by_unknown_id(self, owners):
        with pytest.raises(NotFoundError) as exc_info:
            owners.find_by_id(999)

        assert exc_info.value.details == {"entity": "Owner", "id": 999}

    def test_find_by_last_name_is_a_prefix_match_ordered_by_id(self, owners):
        for last_name in ("Davis", "Franklin", "Davison"):
            owners.save(new_owner(last_name))

        found = owners.find_by_last_name("Dav")

        assert [o.last_name for o in found] == ["Davis", "Davison"]
        assert found[0].id < found[1].id

    def test_empty_last_name_matches_everyone(self, owners):
        for last_name in ("Davis", "Franklin"):
            owners.save(new_owner(last_name))

        assert len(owners.find_by_last_name("")) == 2

    def test_wildcards_in_last_name_are_literal(self, owners):
        owners.save(new_owner("Davis"))

        assert owners.find_by_last_name("%") == []
        assert owners.find_by_last_name("D_vis") == []

    def test_save_existing_owner_keeps_pets(self, owners, types):
        owner = new_owner()
        owner.add_pet(Pet(name="Leo", birth_date=date(2010, 9, 7), type=types["cat"]))
        owners.save(owner)

        edited = Owner(id=owner.id, first_name="Georgina", last_name="Franklin",
                       address="1 Main St.", city="Sun Prairie", telephone="6085551749")
        owners.save(edited)
        found = owners.find_by_id(owner.id)

        assert (found.first_name, found.address, found.city) == ("Georgina", "1 Main St.", "Sun Prairie")
        assert [p.name for p in found.pets] == ["Leo"]

    def test_save_unknown_existing_owner(self, owners):
        with pytest.raises(NotFoundError):
            owners.save(Owner(id=42, first_name="A", last_name="B", address="C", city="D", telephone="1"))


class TestPetRepository:

    def test_pet_types_ordered_by_name(self, pets):
        assert [t.name for t in pets.find_pet_types()] == [
            "bird", "cat", "dog", "hamster", "lizard", "snake"
        ]

    def test_save_new_pet_for_owner(self, owners, pets, types):
        owner = owners.save(new_owner())
        pet = Pet(name="Basil", birth_date=date(2012, 8, 6), type=types["hamster"])
        owner.add_pet(pet)

        pets.save(pet)
        found = owners.find_by_id(owner.id)

        assert pet.id is not None
        assert [(p.id, p.name) for p in found.pets] == [(pet.id, "Basil")]

    def test_find_by_id_returns_pet_listed_under_its_owner(self, owners, pets, types):
        owner = new_owner()
        owner.add_pet(Pet(name="Rosy", birth_date=date(2011, 4, 17), type=types["dog"]))
        owner.add_pet(Pet(name="Jewel", birth_date=date(2010, 3, 7), type=types["dog"]))
        owners.save(owner)
        jewel_id = next(p.id for p in owner.pets if p.name == "Jewel")

        pet = pets.find_by_id(jewel_id)

        assert pet.name == "Jewel"
        assert pet.owner.id == owner.id
        assert any(p is pet for p in pet.owner.pets)

    def test_find_by_id_loads_visits_in_date_order(self, owners, pets, visits, types):
        owner = new_owner()
        pet = Pet(name="Leo", birth_date=date(2010, 9, 7), type=types["cat"])
        owner.add_pet(pet)
        owners.save(owner)
        visits.save(Visit(date=date(2022, 5, 1), description="second", pet_id=pet.id))
        visits.save(Visit(date=date(2021, 5, 1), description="first", pet_id=pet.id))

        found = pets.find_by_id(pet.id)

        assert [v.description for v in found.visits] == ["first", "second"]

    def test_find_by_unknown_id(self, pets):
        with pytest.raises(NotFoundError):
            pets.find_by_id(999)

    def test_update_pet_keeps_visits(self, owners, pets, visits, types):
        owner = new_owner()
        pet = Pet(name="Leo", birth_date=date(2010, 9, 7), type=types["cat"])
        pet.add_visit(Visit(date=date(2021, 3, 4), description="rabies shot"))
        owner.add_pet(pet)
        owners.save(owner)

        edited = Pet(id=pet.id, name="Leonard", birth_date=date(2010, 9, 8))
        owner.add_pet(edited)
        pets.save(edited)
        found = pets.find_by_id(pet.id)

        assert (found.name, found.birth_date) == ("Leonard", date(2010, 9, 8))
        assert found.type.name == "cat"
        assert [v.description for v in visits.find_by_pet_id(pet.id)] == ["rabies shot"]


class TestVisitRepository:

    @pytest.fixture
    def pet(self, owners, types):
        owner = new_owner()
        pet = Pet(name="Samantha", birth_date=date(2012, 9, 4), type=types["cat"])
        owner.add_pet(pet)
        owners.save(owner)
        return pet

    def test_find_by_pet_id_orders_by_date_then_id(self, visits, pet):
        for day, description in ((3, "c"), (1, "a"), (3, "d"), (2, "b")):
            visits.save(Visit(date=date(2023, 1, day), description=description, pet_id=pet.id))

        assert [v.description for v in visits.find_by_pet_id(pet.id)] == ["a", "b", "c", "d"]

    def test_find_by_pet_id_without_visits(self, visits, pet):
        assert visits.find_by_pet_id(pet.id) == []

    def test_save_new_visit(self, visits, pet):
        visit = visits.save(Visit(date=date(2013, 1, 1), description="rabies shot", pet_id=pet.id))

        assert visit.id is not None
        assert visits.find_by_pet_id(pet.id) == [visit]

    def test_failed_write_raises_database_error(self, visits, db_session):
        with pytest.raises(DatabaseError) as exc_info:
            visits.save(Visit(date=date(2013, 1, 1), description="orphan"))

        assert exc_info.value.details == {"operation": "Save visit"}
        # The session is usable again after the rollback
        assert visits.find_by_pet_id(1) == []
