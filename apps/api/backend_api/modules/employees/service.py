from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from backend_api.core.errors import ValidationError
from backend_api.core.observability import emit
from backend_api.core.schemas import is_blank_id
from backend_api.core.store import EntityStore

from .models import Employee
from .schemas import EmployeeDTO

# fields replaced wholesale by PUT (id and timestamps excluded)
_MUTABLE_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "job_title",
    "salary",
    "hire_date",
    "is_active",
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _to_dto(entity: Employee) -> EmployeeDTO:
    return EmployeeDTO(id=entity.id, **{k: getattr(entity, k) for k in _MUTABLE_FIELDS})


class EmployeeService:
    def __init__(self, store: EntityStore[Employee]):
        self.store = store

    def list_employees(self) -> List[EmployeeDTO]:
        return [_to_dto(e) for e in self.store.list_all()]

    def get_employee(self, employee_id: uuid.UUID) -> Optional[EmployeeDTO]:
        entity = self.store.get(employee_id)
        return _to_dto(entity) if entity is not None else None

    def create_employee(self, dto: EmployeeDTO, *, request_id: Optional[str] = None) -> EmployeeDTO:
        if not is_blank_id(dto.id):
            raise ValidationError("Id must be empty when creating an employee.", field="id")

        now = _now()
        entity = Employee(**{k: getattr(dto, k) for k in _MUTABLE_FIELDS}, created_at=now, updated_at=now)
        entity = self.store.add(entity)
        emit("info", "employee.created", f"employee {entity.id} created", request_id, __name__, employee_id=str(entity.id))
        return _to_dto(entity)

    def update_employee(self, dto: EmployeeDTO, *, request_id: Optional[str] = None) -> Optional[EmployeeDTO]:
        if is_blank_id(dto.id):
            raise ValidationError("Id is required to update an employee.", field="id")

        entity = self.store.get(dto.id)
        if entity is None:
            return None

        for k in _MUTABLE_FIELDS:
            setattr(entity, k, getattr(dto, k))
        entity.updated_at = _now()
        entity = self.store.save(entity)
        emit("info", "employee.updated", f"employee {entity.id} updated", request_id, __name__, employee_id=str(entity.id))
        return _to_dto(entity)

    def delete_employee(self, employee_id: uuid.UUID, *, request_id: Optional[str] = None) -> bool:
        entity = self.store.get(employee_id)
        if entity is None:
            return False
        self.store.delete(entity)
        emit("info", "employee.deleted", f"employee {employee_id} deleted", request_id, __name__, employee_id=str(employee_id))
        return True
