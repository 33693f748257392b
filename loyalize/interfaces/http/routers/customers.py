"""Customer endpoints."""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from loyalize.interfaces.http.deps import get_db_session
from loyalize.modules.activities.service import ActivityService
from loyalize.modules.customers import (
    CustomerAlreadyExistsError,
    CustomerCreateInput,
    CustomerHasWalletError,
    CustomerNotFoundError,
)
from loyalize.modules.customers.service import CustomerService
from loyalize.schemas import ActivityResponse, CustomerCreate, CustomerResponse, CustomerUpdate

router = APIRouter()


@router.get("", response_model=List[CustomerResponse])
async def list_customers(db: AsyncSession = Depends(get_db_session)):
    customers = await CustomerService.with_session(db).list_customers()
    return [CustomerResponse.model_validate(customer) for customer in customers]


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        customer = await CustomerService.with_session(db).get_customer(customer_id)
    except CustomerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found") from exc
    return CustomerResponse.model_validate(customer)


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(
    payload: CustomerCreate,
    db: AsyncSession = Depends(get_db_session),
):
    service = CustomerService.with_session(db)
    try:
        customer = await service.create_customer(CustomerCreateInput(**payload.model_dump()))
    except CustomerAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered") from exc
    await db.commit()
    return CustomerResponse.model_validate(customer)


@router.patch("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    payload: CustomerUpdate,
    customer_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db_session),
):
    service = CustomerService.with_session(db)
    try:
        customer = await service.update_customer(customer_id, payload.model_dump(exclude_unset=True))
    except CustomerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found") from exc
    except CustomerAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered") from exc
    await db.commit()
    return CustomerResponse.model_validate(customer)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(
    customer_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        await CustomerService.with_session(db).delete_customer(customer_id)
    except CustomerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found") from exc
    except CustomerHasWalletError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Customer has a wallet") from exc
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{customer_id}/activities", response_model=List[ActivityResponse])
async def list_customer_activities(
    customer_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db_session),
):
    activities = await ActivityService.with_session(db).list_for_customer(customer_id)
    return [ActivityResponse.model_validate(activity) for activity in activities]
