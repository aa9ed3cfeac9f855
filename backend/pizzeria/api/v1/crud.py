# pizzeria/api/v1/crud.py
"""
Generic CRUD routes over a Tortoise model.

Every inventory entity exposes the same five routes (list, get, create,
update, delete); `build_crud_router` generates them from a `CrudResource`
description instead of repeating the handlers per entity.
"""
import logging
from dataclasses import dataclass, field
from typing import Any

from fastapi import APIRouter, Body, Depends, Path, Response, status
from tortoise import models
from tortoise.exceptions import IntegrityError
from tortoise.exceptions import ValidationError as OrmValidationError

from pizzeria.api.v1.deps import require_token
from pizzeria.core.errors import Conflict, NotFound, ValidationError

logger = logging.getLogger("uvicorn.error")

# Largest id a signed 64-bit INTEGER column can hold
MAX_ITEM_ID = 2**63 - 1

# Bad column values surface from Tortoise as any of these
_BAD_VALUE_ERRORS = (OrmValidationError, ValueError, TypeError, ArithmeticError)


@dataclass(frozen=True)
class CrudResource:
    """
    Description of one CRUD resource.

    Attributes:
        model: Tortoise model backing the resource
        path: URL segment, e.g. "clientes"
        label: Singular display name used in messages, e.g. "Cliente"
        fields: Writable model fields, in output order
        required: Fields that must be present on create
        auth_required: Guard every route with the Bearer token gate
        field_labels: Display names for fields in messages, e.g. {"descripcion": "descripción"}
    """
    model: type[models.Model]
    path: str
    label: str
    fields: tuple[str, ...]
    required: tuple[str, ...] = ()
    auth_required: bool = False
    field_labels: dict[str, str] = field(default_factory=dict)

    def not_found(self) -> NotFound:
        return NotFound(f"{self.label} no encontrado.")


def _is_missing(value: Any) -> bool:
    # Zero is a real price/stock/salary; only absent, null and blank values are missing
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _missing_fields_message(resource: CrudResource, names: list[str]) -> str:
    labels = [resource.field_labels.get(name, name) for name in names]
    listed = labels[0] if len(labels) == 1 else ", ".join(labels[:-1]) + " y " + labels[-1]
    listed = listed[0].upper() + listed[1:]
    if len(labels) == 1:
        return f"{listed} es un campo obligatorio."
    return f"{listed} son campos obligatorios."


def serialize(resource: CrudResource, obj: models.Model) -> dict:
    data = {"id": obj.pk}
    for name in resource.fields:
        data[name] = getattr(obj, name)
    data["createdAt"] = obj.created_at
    data["updatedAt"] = obj.updated_at
    return data


def writable_values(resource: CrudResource, body: dict) -> dict:
    """Keep only the resource's writable fields; unknown keys are ignored."""
    return {k: v for k, v in body.items() if k in resource.fields}


# Ids past the column range would overflow the driver; reject them as bad input
ItemId = Path(..., ge=1, le=MAX_ITEM_ID)


def build_crud_router(resource: CrudResource) -> APIRouter:
    """
    Build list/get/create/update/delete routes for a resource.

    Status codes:
        GET    /{path}       200 list
        GET    /{path}/{id}  200 record | 404
        POST   /{path}       201 record | 400 missing/invalid field | 409 duplicate
        PUT    /{path}/{id}  200 merged record | 400 | 404 | 409
        DELETE /{path}/{id}  204 | 404
    Protected resources additionally answer 401 (no token) and 403 (bad token).
    """
    dependencies = [Depends(require_token)] if resource.auth_required else []
    router = APIRouter(prefix=f"/{resource.path}", tags=[resource.path], dependencies=dependencies)
    model = resource.model

    @router.get("")
    async def list_items():
        rows = await model.all().order_by("id")
        return [serialize(resource, row) for row in rows]

    @router.get("/{item_id}")
    async def get_item(item_id: int = ItemId):
        obj = await model.get_or_none(id=item_id)
        if not obj:
            raise resource.not_found()
        return serialize(resource, obj)

    @router.post("", status_code=status.HTTP_201_CREATED)
    async def create_item(body: dict = Body(...)):
        missing = [name for name in resource.required if _is_missing(body.get(name))]
        if missing:
            raise ValidationError(_missing_fields_message(resource, missing))
        try:
            obj = await model.create(**writable_values(resource, body))
        except IntegrityError as exc:
            raise Conflict(f"{resource.label} duplicado o inválido.", reason=str(exc)) from exc
        except _BAD_VALUE_ERRORS as exc:
            raise ValidationError(str(exc) or ValidationError.default_message) from exc
        logger.info("[crud] created %s id=%s", resource.path, obj.pk)
        return serialize(resource, obj)

    @router.put("/{item_id}")
    async def update_item(item_id: int = ItemId, body: dict = Body(...)):
        values = writable_values(resource, body)
        if not values:
            raise ValidationError("No se enviaron campos para actualizar.")
        cleared = [name for name in resource.required if name in values and _is_missing(values[name])]
        if cleared:
            raise ValidationError(_missing_fields_message(resource, cleared))

        obj = await model.get_or_none(id=item_id)
        if not obj:
            raise resource.not_found()
        try:
            obj.update_from_dict(values)
            await obj.save()
        except IntegrityError as exc:
            raise Conflict(f"{resource.label} duplicado o inválido.", reason=str(exc)) from exc
        except _BAD_VALUE_ERRORS as exc:
            raise ValidationError(str(exc) or ValidationError.default_message) from exc
        logger.info("[crud] updated %s id=%s fields=%s", resource.path, item_id, sorted(values))

        # Re-fetch so the response reflects what was stored
        updated = await model.get_or_none(id=item_id)
        if not updated:
            raise resource.not_found()
        return serialize(resource, updated)

    @router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_item(item_id: int = ItemId):
        deleted = await model.filter(id=item_id).delete()
        if not deleted:
            raise resource.not_found()
        logger.info("[crud] deleted %s id=%s", resource.path, item_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
