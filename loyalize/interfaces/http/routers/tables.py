"""Restaurant table and seating endpoints."""
from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from loyalize.interfaces.http.deps import get_db_session
from loyalize.modules.customers import CustomerNotFoundError
from loyalize.modules.tables import (
    TableNotFoundError,
    TableOccupiedError,
    TableSessionClosedError,
    TableSessionNotFoundError,
)
from loyalize.modules.tables.service import TableService
from loyalize.schemas import (
    TableCreate,
    TableResponse,
    TableSessionCreate,
    TableSessionResponse,
    TableSessionUpdate,
    TableUpdate,
)

router = APIRouter()
sessions_router = APIRouter()

_NULLABLE_TABLE_FIELDS = {"current_customer_id", "notes"}


def _table_changes(payload: TableUpdate) -> dict[str, Any]:
    return {
        key: value
        for key, value in payload.model_dump(exclude_unset=True).items()
        if value is not None or key in _NULLABLE_TABLE_FIELDS
    }


@router.get("", response_model=List[TableResponse])
async def list_tables(db: AsyncSession = Depends(get_db_session)):
    tables = await TableService.with_session(db).list_tables()
    return [TableResponse.model_validate(table) for table in tables]


@router.get("/{table_id}", response_model=TableResponse)
async def get_table(
    table_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        table = await TableService.with_session(db).get_table(table_id)
    except TableNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Table not found") from exc
    return TableResponse.model_validate(table)


@router.post("", response_model=TableResponse, status_code=status.HTTP_201_CREATED)
async def create_table(payload: TableCreate, db: AsyncSession = Depends(get_db_session)):
    try:
        table = await TableService.with_session(db).create_table(payload.model_dump())
    except CustomerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found") from exc
    await db.commit()
    return TableResponse.model_validate(table)


@router.patch("/{table_id}", response_model=TableResponse)
async def update_table(
    payload: TableUpdate,
    table_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        table = await TableService.with_session(db).update_table(table_id, _table_changes(payload))
    except TableNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Table not found") from exc
    except CustomerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found") from exc
    await db.commit()
    return TableResponse.model_validate(table)


@router.delete("/{table_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_table(
    table_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        await TableService.with_session(db).delete_table(table_id)
    except TableNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Table not found") from exc
    except TableOccupiedError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Table is occupied") from exc
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@sessions_router.get("", response_model=List[TableSessionResponse])
async def list_table_sessions(
    active: bool = False,
    db: AsyncSession = Depends(get_db_session),
):
    sessions = await TableService.with_session(db).list_sessions(active_only=active)
    return [TableSessionResponse.model_validate(session) for session in sessions]


@sessions_router.post("", response_model=TableSessionResponse, status_code=status.HTTP_201_CREATED)
async def seat_table(payload: TableSessionCreate, db: AsyncSession = Depends(get_db_session)):
    service = TableService.with_session(db)
    try:
        session = await service.seat(
            table_id=payload.table_id,
            customer_id=payload.customer_id,
            party_size=payload.party_size,
        )
    except TableNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Table not found") from exc
    except CustomerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found") from exc
    except TableOccupiedError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Table is occupied") from exc
    await db.commit()
    return TableSessionResponse.model_validate(session)


@sessions_router.patch("/{session_id}", response_model=TableSessionResponse)
async def update_table_session(
    payload: TableSessionUpdate,
    session_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        session = await TableService.with_session(db).update_session(
            session_id, payload.model_dump(exclude_unset=True, exclude_none=True)
        )
    except TableSessionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found") from exc
    except TableSessionClosedError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Session already cleared") from exc
    await db.commit()
    return TableSessionResponse.model_validate(session)
