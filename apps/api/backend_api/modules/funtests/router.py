from __future__ import annotations

import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response

from backend_api.dependencies import get_funtest_service, request_id

from .schemas import FuntestDTO
from .service import FuntestService

router = APIRouter(prefix="/api/funtest", tags=["funtest"])


@router.get("", response_model=List[FuntestDTO])
def api_list_funtests(service: FuntestService = Depends(get_funtest_service)) -> List[FuntestDTO]:
    return service.list_funtests()


@router.get("/{funtest_id}", response_model=FuntestDTO)
def api_get_funtest(
    funtest_id: uuid.UUID = Path(...),
    service: FuntestService = Depends(get_funtest_service),
):
    f = service.get_funtest(funtest_id)
    if f is None:
        return Response(status_code=404)
    return f


@router.post("", response_model=FuntestDTO, status_code=201)
def api_create_funtest(
    body: FuntestDTO,
    response: Response,
    rid: Optional[str] = Depends(request_id),
    service: FuntestService = Depends(get_funtest_service),
) -> FuntestDTO:
    created = service.create_funtest(body, request_id=rid)
    response.headers["Location"] = f"/api/funtest/{created.id}"
    return created


@router.put("", response_model=FuntestDTO)
def api_update_funtest(
    body: FuntestDTO,
    rid: Optional[str] = Depends(request_id),
    service: FuntestService = Depends(get_funtest_service),
):
    updated = service.update_funtest(body, request_id=rid)
    if updated is None:
        return Response(status_code=404)
    return updated


@router.delete("", status_code=204)
def api_delete_funtest(
    funtest_id: uuid.UUID = Query(..., alias="id"),
    rid: Optional[str] = Depends(request_id),
    service: FuntestService = Depends(get_funtest_service),
) -> Response:
    if not service.delete_funtest(funtest_id, request_id=rid):
        return Response(status_code=404)
    return Response(status_code=204)
