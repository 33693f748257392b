"""Wallet and ledger endpoints."""
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from loyalize.interfaces.http.deps import get_db_session
from loyalize.modules.customers import CustomerNotFoundError
from loyalize.modules.wallets import (
    InvalidTransactionError,
    InvalidWalletStatusError,
    WalletAlreadyExistsError,
    WalletNotFoundError,
)
from loyalize.modules.wallets.ledger import LedgerService
from loyalize.modules.wallets.service import WalletService
from loyalize.schemas import (
    WalletCreate,
    WalletResponse,
    WalletStatusUpdate,
    WalletSummaryResponse,
    WalletTransactionCreate,
    WalletTransactionResponse,
)

router = APIRouter()


@router.get("", response_model=List[WalletResponse], summary="List wallets")
async def list_wallets(db: AsyncSession = Depends(get_db_session)):
    wallets = await WalletService.with_session(db).list_wallets()
    return [WalletResponse.model_validate(wallet) for wallet in wallets]


@router.get("/summary", response_model=WalletSummaryResponse, summary="Points totals with customer names")
async def wallet_summary(db: AsyncSession = Depends(get_db_session)):
    summary = await WalletService.with_session(db).summarize()
    return WalletSummaryResponse.model_validate(summary)


@router.get(
    "/customer/{customer_id}",
    response_model=Optional[WalletResponse],
    summary="Wallet of a customer, null when none exists",
)
async def get_customer_wallet(
    customer_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db_session),
):
    wallet = await WalletService.with_session(db).get_wallet_by_customer(customer_id)
    return WalletResponse.model_validate(wallet) if wallet else None


@router.get("/{wallet_id}", response_model=WalletResponse, summary="Get a wallet")
async def get_wallet(
    wallet_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        wallet = await WalletService.with_session(db).get_wallet(wallet_id)
    except WalletNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Wallet not found") from exc
    return WalletResponse.model_validate(wallet)


@router.post("", response_model=WalletResponse, status_code=status.HTTP_201_CREATED, summary="Open a wallet")
async def create_wallet(
    payload: WalletCreate,
    db: AsyncSession = Depends(get_db_session),
):
    service = WalletService.with_session(db)
    try:
        wallet = await service.create_wallet(payload.customer_id, payload.balance, payload.status)
    except CustomerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found") from exc
    except WalletAlreadyExistsError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Customer already has a wallet",
        ) from exc
    await db.commit()
    return WalletResponse.model_validate(wallet)


@router.patch("/{wallet_id}", response_model=WalletResponse, summary="Activate or deactivate a wallet")
async def update_wallet_status(
    payload: WalletStatusUpdate,
    wallet_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        wallet = await WalletService.with_session(db).set_status(wallet_id, payload.status)
    except InvalidWalletStatusError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except WalletNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Wallet not found") from exc
    await db.commit()
    return WalletResponse.model_validate(wallet)


@router.get(
    "/{wallet_id}/transactions",
    response_model=List[WalletTransactionResponse],
    summary="Ledger entries, newest first",
)
async def list_wallet_transactions(
    wallet_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db_session),
):
    records = await WalletService.with_session(db).list_transactions(wallet_id)
    return [WalletTransactionResponse.model_validate(record) for record in records]


@router.post(
    "/{wallet_id}/transactions",
    response_model=WalletTransactionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Post a credit or debit",
)
async def create_wallet_transaction(
    payload: WalletTransactionCreate,
    wallet_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db_session),
):
    ledger = LedgerService.with_session(db)
    try:
        record = await ledger.record_transaction(
            wallet_id,
            payload.type,
            payload.amount,
            payload.description,
        )
    except InvalidTransactionError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except WalletNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Wallet not found") from exc
    await db.commit()
    return WalletTransactionResponse.model_validate(record)
