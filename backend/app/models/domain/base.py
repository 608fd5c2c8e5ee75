"""Shared base models for the project aggregate."""

from typing import Iterable, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

ItemT = TypeVar("ItemT", bound="ProjectItem")


class CamelModel(BaseModel):
    """Model serialised with camelCase keys on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProjectItem(CamelModel):
    """An entity embedded in a project document, addressed by id only."""

    id: str


def overlay(entity: ItemT, patch: BaseModel, nullable: Iterable[str] = ()) -> ItemT:
    """
    Apply the fields explicitly set on ``patch`` on top of ``entity``.

    Only attributes declared on the patch model are considered. A field sent as
    ``null`` is ignored unless it is listed in ``nullable``. The returned copy
    always keeps the original ``id``.

    :param entity: The stored entity
    :param patch: A validated update payload
    :param nullable: Field names that may be cleared with ``None``
    :return: A new entity value
    """
    allowed_nulls = set(nullable)
    changes = {}
    for name in patch.model_fields_set:
        if name not in type(entity).model_fields or name == "id":
            continue
        value = getattr(patch, name)
        if value is None and name not in allowed_nulls:
            continue
        changes[name] = value
    changes["id"] = entity.id
    return entity.model_copy(update=changes)
