from __future__ import annotations

import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response

from backend_api.dependencies import get_employee_service, request_id

from .schemas import EmployeeDTO
from .service import EmployeeService

router = APIRouter(prefix="/api/employee", tags=["employees"])


@router.get("", response_model=List[EmployeeDTO])
def api_list_employees(service: EmployeeService = Depends(get_employee_service)) -> List[EmployeeDTO]:
    return service.list_employees()


@router.get("/{employee_id}", response_model=EmployeeDTO)
def api_get_employee(
    employee_id: uuid.UUID = Path(...),
    service: EmployeeService = Depends(get_employee_service),
):
    e = service.get_employee(employee_id)
    if e is None:
        return Response(status_code=404)
    return e


@router.post("", response_model=EmployeeDTO, status_code=201)
def api_create_employee(
    body: EmployeeDTO,
    response: Response,
    rid: Optional[str] = Depends(request_id),
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeDTO:
    created = service.create_employee(body, request_id=rid)
    response.headers["Location"] = f"/api/employee/{created.id}"
    return created


@router.put("", response_model=EmployeeDTO)
def api_update_employee(
    body: EmployeeDTO,
    rid: Optional[str] = Depends(request_id),
    service: EmployeeService = Depends(get_employee_service),
):
    updated = service.update_employee(body, request_id=rid)
    if updated is None:
        return Response(status_code=404)
    return updated


@router.delete("", status_code=204)
def api_delete_employee(
    employee_id: uuid.UUID = Query(..., alias="id"),
    rid: Optional[str] = Depends(request_id),
    service: EmployeeService = Depends(get_employee_service),
) -> Response:
    if not service.delete_employee(employee_id, request_id=rid):
        return Response(status_code=404)
    return Response(status_code=204)
