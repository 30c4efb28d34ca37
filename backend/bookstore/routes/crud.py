"""
Bookstore Backend — Generic CRUD Router
=========================================

What:  Builds the five REST endpoints of one entity from a CrudResource
       description: list, get by id, create, update, delete.
How:   build_crud_router() defines the endpoints as closures over the
       resource, so each entity gets concrete DTO types in its OpenAPI schema
       while the request logic exists once.
Who:   routes/authors.py and routes/books.py.

Endpoint contract (E = resource.path):

    GET    /api/E          200 list   | 404 | 500
    GET    /api/E/{id}     200 object | 404 | 500
    POST   /api/E          201 object | 400 | 500
    PUT    /api/E/{id}     204        | 400 | 500
    DELETE /api/E/{id}     204        | 400 | 404 | 500

Request bodies are received as raw JSON and validated here against the
create/update DTO, so a missing or invalid body is answered with 400 and
logged under the operation's location like every other rejected check.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type

from fastapi import APIRouter, Body, Depends, Response
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.database import get_db_session
from bookstore.exceptions import BadRequestError, NotFoundError, PersistenceError
from bookstore.mapping import to_dto, to_dtos, to_entity
from bookstore.repositories.base import Repository
from bookstore.routes.handlers import handle_request
from bookstore.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CrudResource:
    """
    Everything the generic router needs to know about one entity.

    Attributes:
        name:            Singular display name ("Author")
        plural:          Plural display name, used in locations and tags ("Authors")
        path:            URL segment under /api ("authors")
        repository:      Repository subclass bound to the ORM model
        create_schema:   DTO accepted by POST
        update_schema:   DTO accepted by PUT (must declare `id`)
        response_schema: DTO returned by GET and POST
    """
    name: str
    plural: str
    path: str
    repository: Type[Repository]
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    response_schema: Type[BaseModel]


def validation_details(exc: PydanticValidationError) -> Dict[str, Any]:
    """Compact, JSON-safe summary of pydantic errors for the 400 body."""
    return {
        "errors": [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
    }


def request_body_schema(schema: Type[BaseModel]) -> Dict[str, Any]:
    """OpenAPI requestBody for an endpoint that validates its body by hand."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema()}},
        }
    }


def build_crud_router(resource: CrudResource) -> APIRouter:
    """Create the APIRouter serving /api/<resource.path>."""
    router = APIRouter(prefix=f"/api/{resource.path}", tags=[resource.plural])
    name = resource.name
    plural = resource.plural
    lower = name.lower()

    # ── List ──────────────────────────────────────────────────────────────
    list_location = f"{plural} - List"

    @router.get(
        "",
        response_model=List[resource.response_schema],
        responses={
            404: {"description": f"No {lower} collection", "model": ErrorResponse},
            500: {"description": "Server error", "model": ErrorResponse},
        },
        summary=f"List all {plural.lower()}",
    )
    @handle_request(list_location)
    async def list_entities(db: AsyncSession = Depends(get_db_session)):
        logger.info("%s: Attempting to retrieve all %s records...", list_location, lower)
        entities = await resource.repository(db).find_all()
        if entities is None:
            raise NotFoundError(
                resource=name,
                message=f"{list_location}: Attempted to retrieve all {plural.lower()}, but none were found.",
            )
        response = to_dtos(resource.response_schema, entities)
        logger.info("%s: Retrieved %d %s records.", list_location, len(response), lower)
        return response

    # ── Get by id ─────────────────────────────────────────────────────────
    get_location = f"{plural} - Get"

    @router.get(
        "/{entity_id}",
        response_model=resource.response_schema,
        responses={
            404: {"description": f"{name} not found", "model": ErrorResponse},
            500: {"description": "Server error", "model": ErrorResponse},
        },
        summary=f"Get one {lower} by id",
    )
    @handle_request(get_location)
    async def get_entity(entity_id: int, db: AsyncSession = Depends(get_db_session)):
        logger.info("%s: Attempting to retrieve %s record: %d...", get_location, lower, entity_id)
        if entity_id < 1:
            logger.warning("%s: %s retrieval requested with invalid id %d.", get_location, name, entity_id)
        entity = await resource.repository(db).find_by_id(entity_id)
        if entity is None:
            raise NotFoundError(
                resource=name,
                resource_id=entity_id,
                message=f"{get_location}: No {lower} record found with id {entity_id}.",
            )
        logger.info("%s: Successfully retrieved %s record: %d.", get_location, lower, entity_id)
        return to_dto(resource.response_schema, entity)

    # ── Create ────────────────────────────────────────────────────────────
    create_location = f"{plural} - Create"

    @router.post(
        "",
        status_code=201,
        response_model=resource.response_schema,
        responses={
            400: {"description": f"Invalid {lower} data", "model": ErrorResponse},
            500: {"description": "Server error", "model": ErrorResponse},
        },
        summary=f"Create a {lower}",
        openapi_extra=request_body_schema(resource.create_schema),
    )
    @handle_request(create_location)
    async def create_entity(
        payload: Optional[Dict[str, Any]] = Body(default=None),
        db: AsyncSession = Depends(get_db_session),
    ):
        logger.info("%s: Attempting to create %s...", create_location, lower)
        if payload is None:
            raise BadRequestError(
                message=f"{create_location}: {name} creation failed due to a bad data request."
            )
        try:
            dto = resource.create_schema.model_validate(payload)
        except PydanticValidationError as exc:
            raise BadRequestError(
                message=f"{create_location}: {name} data was incomplete or not valid.",
                context=validation_details(exc),
            )

        entity = to_entity(resource.repository.model, dto)
        success = await resource.repository(db).create(entity)
        if not success:
            raise PersistenceError(message=f"{create_location}: {name} creation failed.")
        logger.info("%s: %s created successfully with id %d.", create_location, name, entity.id)
        return to_dto(resource.response_schema, entity)

    # ── Update ────────────────────────────────────────────────────────────
    update_location = f"{plural} - Update"

    @router.put(
        "/{entity_id}",
        status_code=204,
        response_class=Response,
        responses={
            400: {"description": f"Invalid {lower} data or id", "model": ErrorResponse},
            500: {"description": "Server error", "model": ErrorResponse},
        },
        summary=f"Replace a {lower}",
        openapi_extra=request_body_schema(resource.update_schema),
    )
    @handle_request(update_location)
    async def update_entity(
        entity_id: int,
        payload: Optional[Dict[str, Any]] = Body(default=None),
        db: AsyncSession = Depends(get_db_session),
    ):
        logger.info("%s: Attempting to update %s record: %d...", update_location, lower, entity_id)
        bad_request = f"{update_location}: {name} update failed due to a bad data request."
        if entity_id < 1 or payload is None:
            raise BadRequestError(message=bad_request, context={"id": entity_id})
        try:
            dto = resource.update_schema.model_validate(payload)
        except PydanticValidationError as exc:
            raise BadRequestError(
                message=f"{update_location}: {name} data was incomplete or not valid.",
                context=validation_details(exc),
            )
        if dto.id != entity_id:
            raise BadRequestError(message=bad_request, context={"id": entity_id, "body_id": dto.id})

        entity = to_entity(resource.repository.model, dto)
        success = await resource.repository(db).update(entity)
        if not success:
            raise PersistenceError(message=f"{update_location}: {name} update failed.")
        logger.info("%s: %s %d updated successfully.", update_location, name, entity_id)
        return Response(status_code=204)

    # ── Delete ────────────────────────────────────────────────────────────
    delete_location = f"{plural} - Delete"

    @router.delete(
        "/{entity_id}",
        status_code=204,
        response_class=Response,
        responses={
            400: {"description": "Invalid id", "model": ErrorResponse},
            404: {"description": f"{name} not found", "model": ErrorResponse},
            500: {"description": "Server error", "model": ErrorResponse},
        },
        summary=f"Delete a {lower}",
    )
    @handle_request(delete_location)
    async def delete_entity(entity_id: int, db: AsyncSession = Depends(get_db_session)):
        logger.info("%s: Attempting to delete %s record: %d...", delete_location, lower, entity_id)
        if entity_id < 1:
            raise BadRequestError(
                message=f"{delete_location}: {name} deletion failed due to a bad data request.",
                context={"id": entity_id},
            )
        repository = resource.repository(db)
        if not await repository.does_exist(entity_id):
            raise NotFoundError(
                resource=name,
                resource_id=entity_id,
                message=(
                    f"{delete_location}: Attempted to delete {lower} with id {entity_id}, "
                    f"but there is no {lower} with this id."
                ),
            )
        entity = await repository.find_by_id(entity_id)
        success = await repository.delete(entity)
        if not success:
            raise PersistenceError(message=f"{delete_location}: {name} deletion failed.")
        logger.info("%s: %s %d deleted successfully.", delete_location, name, entity_id)
        return Response(status_code=204)

    return router
