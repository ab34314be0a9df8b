from __future__ import annotations

import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response

from backend_api.dependencies import get_character_service, request_id

from .schemas import CharacterDTO
from .service import CharacterService

router = APIRouter(prefix="/api/character", tags=["characters"])


@router.get("", response_model=List[CharacterDTO])
def api_list_characters(service: CharacterService = Depends(get_character_service)) -> List[CharacterDTO]:
    return service.list_characters()


# declared before /{character_id} so "sql" is not parsed as an id
@router.get("/sql", response_model=List[CharacterDTO])
def api_list_characters_sql(service: CharacterService = Depends(get_character_service)) -> List[CharacterDTO]:
    return service.list_characters_sql()


@router.get("/{character_id}", response_model=CharacterDTO)
def api_get_character(
    character_id: uuid.UUID = Path(...),
    service: CharacterService = Depends(get_character_service),
):
    c = service.get_character(character_id)
    if c is None:
        return Response(status_code=404)
    return c


@router.post("", response_model=CharacterDTO, status_code=201)
def api_create_character(
    body: CharacterDTO,
    response: Response,
    rid: Optional[str] = Depends(request_id),
    service: CharacterService = Depends(get_character_service),
) -> CharacterDTO:
    created = service.create_character(body, request_id=rid)
    response.headers["Location"] = f"/api/character/{created.id}"
    return created


@router.put("", response_model=CharacterDTO)
def api_update_character(
    body: CharacterDTO,
    rid: Optional[str] = Depends(request_id),
    service: CharacterService = Depends(get_character_service),
):
    updated = service.update_character(body, request_id=rid)
    if updated is None:
        return Response(status_code=404)
    return updated


@router.delete("", status_code=204)
def api_delete_character(
    character_id: uuid.UUID = Query(..., alias="id"),
    rid: Optional[str] = Depends(request_id),
    service: CharacterService = Depends(get_character_service),
) -> Response:
    if not service.delete_character(character_id, request_id=rid):
        return Response(status_code=404)
    return Response(status_code=204)
