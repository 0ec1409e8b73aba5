from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .db import init_db
from .errors import NotFoundError, StorageError, ValidationError
from .logging_utils import configure_root_logger, get_logger
from .logic import require_fields
from .models import TransactionPayload
from .repo import (
    create_txn,
    delete_txn,
    get_summary,
    get_txn,
    list_txns,
    update_txn,
)
from .settings import Settings, get_settings

LOGGER = get_logger(__name__)

router = APIRouter()


def get_db_path(request: Request):
    return request.app.state.settings.db_path


@router.post("/transactions", status_code=201)
def create_transaction(
    payload: TransactionPayload, db_path=Depends(get_db_path)
) -> dict:
    try:
        fields = require_fields(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"id": create_txn(db_path, **fields)}


@router.get("/transactions")
def list_transactions(db_path=Depends(get_db_path)) -> list[dict]:
    return [txn.as_dict() for txn in list_txns(db_path)]


@router.get("/transactions/{txn_id}")
def get_transaction(txn_id: int, db_path=Depends(get_db_path)) -> dict:
    try:
        return get_txn(db_path, txn_id).as_dict()
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.put("/transactions/{txn_id}")
def update_transaction(
    txn_id: int, payload: TransactionPayload, db_path=Depends(get_db_path)
) -> dict:
    try:
        fields = require_fields(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    try:
        update_txn(db_path, txn_id, **fields)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {"message": "Transaction updated successfully"}


@router.delete("/transactions/{txn_id}")
def delete_transaction(txn_id: int, db_path=Depends(get_db_path)) -> dict:
    try:
        delete_txn(db_path, txn_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {"message": "Transaction deleted successfully"}


@router.get("/summary")
def summary(db_path=Depends(get_db_path)) -> dict:
    return get_summary(db_path)


async def _storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    LOGGER.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=400, content={"detail": jsonable_encoder(exc.errors())}
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the ledger API around the database named by ``settings``.

    The table is created before the app is returned, so a store that cannot
    be opened stops startup with StorageError.
    """
    settings = settings or get_settings()
    configure_root_logger(settings.log_level)
    init_db(settings)

    app = FastAPI(title="Ledger")
    app.state.settings = settings
    app.include_router(router, prefix=settings.api_prefix)
    app.add_exception_handler(StorageError, _storage_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    LOGGER.info("ledger api ready (db=%s)", settings.db_path)
    return app
