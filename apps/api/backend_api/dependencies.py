"""
Dependency injection providers for FastAPI.

Each service is built per request from a session-bound SqlModelStore, so the
services only see the EntityStore port. Tests swap the session through
app.dependency_overrides[get_session].
"""
from __future__ import annotations

from typing import Optional

from fastapi import Depends, Request
from sqlmodel import Session

from backend_api.core.db import get_session
from backend_api.core.store import SqlModelStore
from backend_api.modules.characters.models import Character
from backend_api.modules.characters.service import CharacterService
from backend_api.modules.employees.models import Employee
from backend_api.modules.employees.service import EmployeeService
from backend_api.modules.funtests.models import Funtest
from backend_api.modules.funtests.service import FuntestService


def get_character_service(session: Session = Depends(get_session)) -> CharacterService:
    return CharacterService(SqlModelStore(session, Character))


def get_employee_service(session: Session = Depends(get_session)) -> EmployeeService:
    return EmployeeService(SqlModelStore(session, Employee))


def get_funtest_service(session: Session = Depends(get_session)) -> FuntestService:
    return FuntestService(SqlModelStore(session, Funtest))


def request_id(request: Request) -> Optional[str]:
    # set by the request-id middleware in main.py
    st = getattr(request, "state", None)
    rid = getattr(st, "request_id", None) if st is not None else None
    return str(rid) if rid else None
