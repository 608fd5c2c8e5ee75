"""Tests for characters, worlds, writing entries and catalogue items."""

from datetime import datetime, timedelta, timezone

import pytest

from app.errors import ForbiddenError, NotFoundError
from app.models import (
    CatalogueItemCreate,
    CatalogueItemUpdate,
    CharacterCreate,
    CharacterTrait,
    CharacterUpdate,
    WorldCreate,
    WorldUpdate,
    WritingCreate,
    WritingUpdate,
)
from app.services import entities as entity_service

from conftest import INTRUDER, OWNER, run


class TestCharacters:
    """Tests for the character collection."""

    def make_character(self, entities, project, **fields):
        data = CharacterCreate(
            name=fields.pop("name", "Aria"),
            species="Elf",
            traits=[CharacterTrait(id="appearance", label="Appearance", value="Tall")],
            **fields,
        )
        return run(entities.create_character(project.id, data, OWNER))

    def test_create_fills_link_defaults(self, entities, project):
        character = self.make_character(entities, project)

        assert character.id
        assert character.linked_world_id is None
        assert character.linked_event_ids == []
        assert character.linked_writing_ids == []

    def test_create_keeps_supplied_links(self, entities, project):
        character = self.make_character(entities, project, linked_world_id="w1", linked_event_ids=["e1"])

        assert character.linked_world_id == "w1"
        assert character.linked_event_ids == ["e1"]

    def test_round_trip(self, entities, project):
        character = self.make_character(entities, project)

        listed = run(entities.list_characters(project.id, OWNER))

        assert len(listed) == 1
        stored = listed[0]
        assert stored == character
        assert stored.traits[0].label == "Appearance"

    def test_update_preserves_identity(self, entities, project):
        character = self.make_character(entities, project)
        patch = CharacterUpdate.model_validate({"id": "forged", "name": "Aria Vale"})

        updated = run(entities.update_character(project.id, character.id, patch, OWNER))

        assert updated.id == character.id
        stored = run(entities.list_characters(project.id, OWNER))[0]
        assert stored.id == character.id
        assert stored.name == "Aria Vale"

    def test_update_overlays_only_sent_fields(self, entities, project):
        character = self.make_character(entities, project, linked_world_id="w1")
        patch = CharacterUpdate.model_validate({"species": "Half-elf"})

        updated = run(entities.update_character(project.id, character.id, patch, OWNER))

        assert updated.species == "Half-elf"
        assert updated.name == "Aria"
        assert updated.linked_world_id == "w1"
        assert updated.traits == character.traits

    def test_update_can_clear_world_link(self, entities, project):
        character = self.make_character(entities, project, linked_world_id="w1")
        patch = CharacterUpdate.model_validate({"linkedWorldId": None})

        updated = run(entities.update_character(project.id, character.id, patch, OWNER))

        assert updated.linked_world_id is None

    def test_update_missing_character(self, entities, project):
        with pytest.raises(NotFoundError):
            run(entities.update_character(project.id, "missing", CharacterUpdate(name="X"), OWNER))

    def test_delete(self, entities, project):
        keep = self.make_character(entities, project, name="Keep")
        drop = self.make_character(entities, project, name="Drop")

        run(entities.delete_character(project.id, drop.id, OWNER))

        assert [c.id for c in run(entities.list_characters(project.id, OWNER))] == [keep.id]

    def test_delete_missing_leaves_collection_unchanged(self, entities, project):
        character = self.make_character(entities, project)

        with pytest.raises(NotFoundError):
            run(entities.delete_character(project.id, "missing", OWNER))

        assert run(entities.list_characters(project.id, OWNER)) == [character]

    def test_non_owner_is_forbidden_everywhere(self, entities, project):
        character = self.make_character(entities, project)

        with pytest.raises(ForbiddenError):
            run(entities.create_character(project.id, CharacterCreate(name="Spy"), INTRUDER))
        with pytest.raises(ForbiddenError):
            run(entities.list_characters(project.id, INTRUDER))
        with pytest.raises(ForbiddenError):
            run(entities.update_character(project.id, character.id, CharacterUpdate(name="X"), INTRUDER))
        with pytest.raises(ForbiddenError):
            run(entities.delete_character(project.id, character.id, INTRUDER))

        assert run(entities.list_characters(project.id, OWNER)) == [character]

    def test_missing_project(self, entities):
        with pytest.raises(NotFoundError):
            run(entities.list_characters("missing", OWNER))


class TestWorlds:
    """Tests for the world collection."""

    def test_create_and_update(self, entities, project):
        world = run(entities.create_world(
            project.id,
            WorldCreate(name="Eldoria", theme="High Fantasy", setting="Third Age"),
            OWNER,
        ))
        assert world.linked_character_ids == []

        updated = run(entities.update_world(
            project.id, world.id, WorldUpdate(description="A land of rivers"), OWNER,
        ))

        assert updated.description == "A land of rivers"
        assert updated.theme == "High Fantasy"
        assert run(entities.list_worlds(project.id, OWNER)) == [updated]

    def test_deleting_world_keeps_dangling_links(self, entities, project):
        world = run(entities.create_world(project.id, WorldCreate(name="Eldoria"), OWNER))
        character = run(entities.create_character(
            project.id, CharacterCreate(name="Aria", linked_world_id=world.id), OWNER,
        ))

        run(entities.delete_world(project.id, world.id, OWNER))

        stored = run(entities.list_characters(project.id, OWNER))[0]
        assert stored.linked_world_id == world.id == character.linked_world_id

    def test_delete_missing_world(self, entities, project):
        with pytest.raises(NotFoundError):
            run(entities.delete_world(project.id, "missing", OWNER))


class TestWritings:
    """Tests for writing entries and their timestamps."""

    def test_create_sets_matching_timestamps(self, entities, project):
        entry = run(entities.create_writing(
            project.id, WritingCreate(title="Chapter 1", content="It began."), OWNER,
        ))

        assert entry.created_at == entry.updated_at
        stored = run(entities.list_writings(project.id, OWNER))[0]
        assert stored.created_at == stored.updated_at == entry.created_at

    def test_update_refreshes_updated_at(self, entities, project):
        entry = run(entities.create_writing(project.id, WritingCreate(title="Chapter 1"), OWNER))

        first = run(entities.update_writing(project.id, entry.id, WritingUpdate(content="Draft"), OWNER))
        second = run(entities.update_writing(project.id, entry.id, WritingUpdate(content="Final"), OWNER))

        assert first.updated_at > entry.updated_at
        assert second.updated_at > first.updated_at
        assert second.created_at == entry.created_at
        stored = run(entities.list_writings(project.id, OWNER))[0]
        assert stored.updated_at == second.updated_at
        assert stored.content == "Final"

    def test_failed_update_does_not_touch_timestamp(self, entities, project):
        entry = run(entities.create_writing(project.id, WritingCreate(title="Chapter 1"), OWNER))

        with pytest.raises(ForbiddenError):
            run(entities.update_writing(project.id, entry.id, WritingUpdate(content="x"), INTRUDER))

        assert run(entities.list_writings(project.id, OWNER))[0].updated_at == entry.updated_at

    def test_updated_at_advances_when_clock_stalls(self, entities, project, monkeypatch):
        frozen = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        monkeypatch.setattr(entity_service, "_now", lambda: frozen)
        entry = run(entities.create_writing(project.id, WritingCreate(title="Chapter 1"), OWNER))

        first = run(entities.update_writing(project.id, entry.id, WritingUpdate(content="Draft"), OWNER))
        second = run(entities.update_writing(project.id, entry.id, WritingUpdate(content="Final"), OWNER))

        assert entry.updated_at == frozen
        assert first.updated_at == frozen + timedelta(microseconds=1)
        assert second.updated_at == frozen + timedelta(microseconds=2)

    def test_delete_writing(self, entities, project):
        entry = run(entities.create_writing(project.id, WritingCreate(title="Chapter 1"), OWNER))

        run(entities.delete_writing(project.id, entry.id, OWNER))

        assert run(entities.list_writings(project.id, OWNER)) == []


class TestCatalogue:
    """Tests for catalogue items."""

    def test_create_with_links(self, entities, project):
        item = run(entities.create_catalogue_item(
            project.id,
            CatalogueItemCreate(name="Gryphon", category="Creatures", linked_world_id="w1"),
            OWNER,
        ))

        assert item.linked_world_id == "w1"
        assert item.linked_character_ids == []
        assert item.linked_writing_ids == []

    def test_update_and_delete(self, entities, project):
        item = run(entities.create_catalogue_item(
            project.id, CatalogueItemCreate(name="Gryphon", category="Creatures"), OWNER,
        ))

        updated = run(entities.update_catalogue_item(
            project.id, item.id, CatalogueItemUpdate(category="Beasts"), OWNER,
        ))
        assert updated.category == "Beasts"
        assert updated.name == "Gryphon"

        run(entities.delete_catalogue_item(project.id, item.id, OWNER))
        assert run(entities.list_catalogue_items(project.id, OWNER)) == []

    def test_collections_are_independent(self, entities, project):
        run(entities.create_catalogue_item(
            project.id, CatalogueItemCreate(name="Gryphon", category="Creatures"), OWNER,
        ))

        assert run(entities.list_characters(project.id, OWNER)) == []
        assert run(entities.list_worlds(project.id, OWNER)) == []


class TestOwnership:
    """Every collection operation rejects a non-owner and leaves data untouched."""

    def test_worlds(self, entities, project):
        world = run(entities.create_world(project.id, WorldCreate(name="Eldoria"), OWNER))

        with pytest.raises(ForbiddenError):
            run(entities.create_world(project.id, WorldCreate(name="Spyland"), INTRUDER))
        with pytest.raises(ForbiddenError):
            run(entities.list_worlds(project.id, INTRUDER))
        with pytest.raises(ForbiddenError):
            run(entities.update_world(project.id, world.id, WorldUpdate(name="X"), INTRUDER))
        with pytest.raises(ForbiddenError):
            run(entities.delete_world(project.id, world.id, INTRUDER))

        assert run(entities.list_worlds(project.id, OWNER)) == [world]

    def test_writings(self, entities, project):
        entry = run(entities.create_writing(project.id, WritingCreate(title="Chapter 1"), OWNER))

        with pytest.raises(ForbiddenError):
            run(entities.create_writing(project.id, WritingCreate(title="Forgery"), INTRUDER))
        with pytest.raises(ForbiddenError):
            run(entities.list_writings(project.id, INTRUDER))
        with pytest.raises(ForbiddenError):
            run(entities.delete_writing(project.id, entry.id, INTRUDER))

        assert run(entities.list_writings(project.id, OWNER)) == [entry]

    def test_catalogue(self, entities, project):
        item = run(entities.create_catalogue_item(
            project.id, CatalogueItemCreate(name="Gryphon", category="Creatures"), OWNER,
        ))

        with pytest.raises(ForbiddenError):
            run(entities.create_catalogue_item(
                project.id, CatalogueItemCreate(name="Mimic", category="Creatures"), INTRUDER,
            ))
        with pytest.raises(ForbiddenError):
            run(entities.list_catalogue_items(project.id, INTRUDER))
        with pytest.raises(ForbiddenError):
            run(entities.update_catalogue_item(
                project.id, item.id, CatalogueItemUpdate(category="Beasts"), INTRUDER,
            ))
        with pytest.raises(ForbiddenError):
            run(entities.delete_catalogue_item(project.id, item.id, INTRUDER))

        assert run(entities.list_catalogue_items(project.id, OWNER)) == [item]
