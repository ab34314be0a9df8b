from __future__ import annotations

import uuid
from typing import Optional

from backend_api.core.schemas import CamelModel


class FuntestDTO(CamelModel):
    id: Optional[uuid.UUID] = None
    name: str = ""
    info: str = ""
