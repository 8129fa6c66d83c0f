"""Route factory shared by the entity routers.

Every entity exposes the same surface: get by key, get by each unique field,
list all, create, update and delete. Service results map onto HTTP statuses
here so that routers stay declarative.
"""

from collections.abc import Callable, Sequence

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import BaseModel

from src.orders_api.core.services.versioning import (
    OperationResult,
    OperationStatus,
    VersionedEntityService,
)

FAILURE_STATUS_CODES = {
    OperationStatus.INVALID: status.HTTP_400_BAD_REQUEST,
    OperationStatus.BUSINESS_RULE_VIOLATION: status.HTTP_400_BAD_REQUEST,
    OperationStatus.REFERENTIAL_INTEGRITY_VIOLATION: status.HTTP_400_BAD_REQUEST,
    OperationStatus.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    OperationStatus.CONFLICT: status.HTTP_409_CONFLICT,
}


def raise_for_result(result: OperationResult) -> None:
    """Raise the HTTP error matching a failed result; successes pass through."""
    if not result.succeeded:
        raise HTTPException(
            status_code=FAILURE_STATUS_CODES[result.status], detail=result.message
        )


def key_route_name(label: str) -> str:
    return f"get_{label.lower()}_by_key"


def add_versioned_routes(
    router: APIRouter,
    *,
    label: str,
    plural: str,
    get_service: Callable[..., VersionedEntityService],
    create_model: type[BaseModel],
    update_model: type[BaseModel],
    read_model: type[BaseModel],
    lookups: Sequence[str] = (),
) -> APIRouter:
    """Register the standard endpoints for one entity on ``router``.

    Args:
        label: Singular display name, e.g. ``"Category"``.
        plural: Plural display name used when the list is empty.
        get_service: FastAPI dependency returning the entity's service.
        create_model: Request body for POST.
        update_model: Request body for PUT; carries ``key`` and ``row_version``.
        read_model: Response body.
        lookups: Unique fields served under ``/<field>/{value}`` through the
            service's ``get_by_<field>`` method.
    """

    def to_read(record: BaseModel) -> BaseModel:
        return read_model.model_validate(record.model_dump())

    @router.get("/all", response_model=list[read_model])
    async def list_all(service: VersionedEntityService = Depends(get_service)):
        records = await service.list_all()
        if not records:
            raise HTTPException(status_code=404, detail=f"{plural} not found.")
        return [to_read(record) for record in records]

    for field in lookups:
        add_lookup_route(router, label, field, get_service, to_read, read_model)

    @router.get("/{key}", response_model=read_model, name=key_route_name(label))
    async def get_by_key(key: int, service: VersionedEntityService = Depends(get_service)):
        record = await service.get(key)
        if record is None:
            raise HTTPException(status_code=404, detail=f"{label} with key {key} not found.")
        return to_read(record)

    @router.post("", response_model=read_model, status_code=status.HTTP_201_CREATED)
    async def create(
        command: create_model,
        request: Request,
        response: Response,
        service: VersionedEntityService = Depends(get_service),
    ):
        result = await service.create(command)
        raise_for_result(result)
        response.headers["Location"] = str(
            request.url_for(key_route_name(label), key=result.value.key)
        )
        return to_read(result.value)

    @router.put("/{key}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
    async def update(
        key: int,
        command: update_model,
        service: VersionedEntityService = Depends(get_service),
    ):
        raise_for_result(await service.update(key, command))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete("/{key}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
    async def delete(key: int, service: VersionedEntityService = Depends(get_service)):
        raise_for_result(await service.delete(key))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


def add_lookup_route(
    router: APIRouter,
    label: str,
    field: str,
    get_service: Callable[..., VersionedEntityService],
    to_read: Callable[[BaseModel], BaseModel],
    read_model: type[BaseModel],
) -> None:
    @router.get(
        f"/{field}/{{value}}",
        response_model=read_model,
        name=f"get_{label.lower()}_by_{field}",
    )
    async def get_by_field(value: str, service: VersionedEntityService = Depends(get_service)):
        record = await getattr(service, f"get_by_{field}")(value)
        if record is None:
            raise HTTPException(status_code=404, detail=f"{label} with {field} {value} not found.")
        return to_read(record)
