from __future__ import annotations

import uuid
from typing import List, Optional

from backend_api.core.errors import ValidationError
from backend_api.core.observability import emit
from backend_api.core.schemas import is_blank_id
from backend_api.core.store import EntityStore

from .models import Funtest
from .schemas import FuntestDTO


def _to_dto(entity: Funtest) -> FuntestDTO:
    return FuntestDTO(id=entity.id, name=entity.name, info=entity.info)


class FuntestService:
    def __init__(self, store: EntityStore[Funtest]):
        self.store = store

    def list_funtests(self) -> List[FuntestDTO]:
        return [_to_dto(e) for e in self.store.list_all()]

    def get_funtest(self, funtest_id: uuid.UUID) -> Optional[FuntestDTO]:
        entity = self.store.get(funtest_id)
        return _to_dto(entity) if entity is not None else None

    def create_funtest(self, dto: FuntestDTO, *, request_id: Optional[str] = None) -> FuntestDTO:
        if not is_blank_id(dto.id):
            raise ValidationError("Id must be empty when creating a funtest.", field="id")

        entity = self.store.add(Funtest(name=dto.name, info=dto.info))
        emit("info", "funtest.created", f"funtest {entity.id} created", request_id, __name__, funtest_id=str(entity.id))
        return _to_dto(entity)

    def update_funtest(self, dto: FuntestDTO, *, request_id: Optional[str] = None) -> Optional[FuntestDTO]:
        if is_blank_id(dto.id):
            raise ValidationError("Id is required to update a funtest.", field="id")

        entity = self.store.get(dto.id)
        if entity is None:
            return None

        entity.name = dto.name
        entity.info = dto.info
        entity = self.store.save(entity)
        emit("info", "funtest.updated", f"funtest {entity.id} updated", request_id, __name__, funtest_id=str(entity.id))
        return _to_dto(entity)

    def delete_funtest(self, funtest_id: uuid.UUID, *, request_id: Optional[str] = None) -> bool:
        entity = self.store.get(funtest_id)
        if entity is None:
            return False
        self.store.delete(entity)
        emit("info", "funtest.deleted", f"funtest {funtest_id} deleted", request_id, __name__, funtest_id=str(funtest_id))
        return True
