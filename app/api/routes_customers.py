# app/api/routes_customers.py
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from app.core.errors import CustomerStoreError
from app.schemas.customer_schemas import CustomerCreate, CustomerUpdate
from app.services import customer_service

router = APIRouter(prefix="/customers", tags=["customers"])

logger = logging.getLogger(__name__)


@router.post("", status_code=201)
def create_customer(payload: CustomerCreate):
    try:
        return customer_service.create_customer(payload)
    except CustomerStoreError:
        logger.exception("Error creating customer")
        raise HTTPException(status_code=500, detail="Failed to create customer")


@router.get("")
def list_customers():
    try:
        return customer_service.list_customers()
    except CustomerStoreError:
        logger.exception("Error retrieving customers")
        raise HTTPException(status_code=500, detail="Failed to retrieve customers")


# declared before the /{customer_id} routes
@router.get("/search")
def search_customer(
    id: Optional[str] = Query(None),
    name: Optional[str] = Query(None),
    alias: Optional[str] = Query(None),
):
    try:
        return customer_service.search_customer(id=id, name=name, alias=alias)
    except CustomerStoreError:
        logger.exception("Error searching for customer")
        raise HTTPException(status_code=500, detail="Failed to search for customer")


@router.put("/{customer_id}")
def update_customer(customer_id: str, payload: CustomerUpdate):
    try:
        return customer_service.update_customer(customer_id, payload)
    except CustomerStoreError:
        logger.exception("Error updating customer")
        raise HTTPException(status_code=500, detail="Failed to update customer")


@router.delete("/{customer_id}")
def delete_customer(customer_id: str):
    try:
        return customer_service.delete_customer(customer_id)
    except CustomerStoreError:
        logger.exception("Error deleting customer")
        raise HTTPException(status_code=500, detail="Failed to delete customer")
