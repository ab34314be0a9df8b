from contextlib import asynccontextmanager
import os

from fastapi import FastAPI

from backend_api.core.db import auto_create_enabled, db_health, init_db

APP_VERSION = os.getenv("APP_VERSION", "0.1.0")


@asynccontextmanager
async def _lifespan(_app: FastAPI):
    # alembic owns the schema unless DB_AUTO_CREATE is on
    if auto_create_enabled():
        init_db()
    yield


app = FastAPI(title="Backend RPG API", version=APP_VERSION, lifespan=_lifespan)

# === OBSERVABILITY ===
# - X-Request-Id in/out (missing -> generated; always echoed back; also on errors)
# - Error body keys: Message, Timestamp
# - Not-found answers are bodiless 404s built by the routers, not errors
import uuid
from typing import Optional
from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend_api.core.errors import ApplicationError
from backend_api.core.observability import emit, now_iso


def _error_body(message: str, request_id: Optional[str], status_code: int) -> JSONResponse:
    headers = {}
    if request_id:
        headers["X-Request-Id"] = request_id
    return JSONResponse(
        status_code=status_code,
        content={"Message": message, "Timestamp": now_iso()},
        headers=headers,
    )


def _first_error_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "request validation failed"
    e = errors[0]
    loc = ".".join(str(p) for p in e.get("loc", ()) if p != "body")
    msg = str(e.get("msg", "invalid value"))
    return f"{loc}: {msg}" if loc else msg


@app.middleware("http")
async def _request_id_mw(request: Request, call_next):
    rid = request.headers.get("X-Request-Id") or uuid.uuid4().hex.upper()
    request.state.request_id = rid
    emit("info", "http.request.start", f"{request.method} {request.url.path}", rid, __name__)
    try:
        resp = await call_next(request)
    except Exception as e:
        emit("error", "http.request.exception", str(e), rid, __name__, type=type(e).__name__)
        raise
    resp.headers["X-Request-Id"] = rid
    emit("info", "http.request.end", f"{request.method} {request.url.path} -> {getattr(resp,'status_code',None)}", rid, __name__)
    return resp


@app.exception_handler(ApplicationError)
async def _app_error_handler(request: Request, exc: ApplicationError):
    rid = getattr(request.state, "request_id", None)
    return _error_body(exc.message, rid, 400)


@app.exception_handler(StarletteHTTPException)
async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
    rid = getattr(request.state, "request_id", None)
    return _error_body(str(exc.detail), rid, exc.status_code)


@app.exception_handler(RequestValidationError)
async def _validation_exc_handler(request: Request, exc: RequestValidationError):
    rid = getattr(request.state, "request_id", None)
    return _error_body(_first_error_message(exc), rid, 400)


@app.exception_handler(Exception)
async def _unhandled_exc_handler(request: Request, exc: Exception):
    rid = getattr(request.state, "request_id", None)
    return _error_body("internal server error", rid, 500)
# === END OBSERVABILITY ===


from backend_api.modules.characters.router import router as characters_router
from backend_api.modules.employees.router import router as employees_router
from backend_api.modules.funtests.router import router as funtests_router

app.include_router(characters_router)
app.include_router(employees_router)
app.include_router(funtests_router)


@app.get("/health")
def health():
    db = db_health()
    return {
        "status": "ok" if db.get("status") == "ok" else "degraded",
        "version": APP_VERSION,
        "db": db,
        "last_error_summary": db.get("error"),
    }
