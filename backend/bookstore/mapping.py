"""
Bookstore Backend — Transfer-Object Mapping
=============================================

What:  Conversion between persisted entities (ORM models) and wire DTOs.
How:   DTO → entity copies the DTO's fields into a new, detached ORM
       instance. Entity → DTO uses pydantic's from_attributes validation.

    AuthorCreate  ──to_entity──▶  Author (no id, ready to insert)
    AuthorUpdate  ──to_entity──▶  Author (detached, carries the id to replace)
    Author        ──to_dto─────▶  AuthorResponse
"""

from typing import Iterable, List, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import inspect

from bookstore.database import Base

ModelT = TypeVar("ModelT", bound=Base)
SchemaT = TypeVar("SchemaT", bound=BaseModel)


def to_entity(model: Type[ModelT], dto: BaseModel) -> ModelT:
    """
    Build a detached ORM instance from a create or update DTO.

    Only DTO fields that are mapped columns of `model` are copied.

    Raises:
        ValueError: the DTO carries no field that `model` maps
    """
    columns = {attr.key for attr in inspect(model).column_attrs}
    values = {key: value for key, value in dto.model_dump().items() if key in columns}
    if not values:
        raise ValueError(f"{type(dto).__name__} has no fields mapped by {model.__name__}")
    return model(**values)


def to_dto(schema: Type[SchemaT], entity: Base) -> SchemaT:
    """Read an ORM instance into its read-shaped DTO."""
    return schema.model_validate(entity)


def to_dtos(schema: Type[SchemaT], entities: Iterable[Base]) -> List[SchemaT]:
    return [to_dto(schema, entity) for entity in entities]
