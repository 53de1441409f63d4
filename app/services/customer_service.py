# app/services/customer_service.py
import logging
import threading
from datetime import datetime, timezone
from typing import Dict, Any, List, Optional
from uuid import uuid4

from fastapi import HTTPException

from app.schemas.customer_schemas import CustomerCreate, CustomerUpdate
from app.services.customer_store import read_data, write_data

logger = logging.getLogger(__name__)

# one writer at a time across the read-modify-write of the data file
_write_lock = threading.Lock()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _find_index(customers: List[Dict[str, Any]], field: str, value: str) -> Optional[int]:
    for i, c in enumerate(customers):
        if c.get(field) == value:
            return i
    return None


def create_customer(payload: CustomerCreate) -> Dict[str, Any]:
    if not payload.name or not payload.alias or not payload.dob:
        raise HTTPException(status_code=400, detail="Name, alias, and date of birth are required")

    with _write_lock:
        data = read_data()

        if _find_index(data["customers"], "alias", payload.alias) is not None:
            raise HTTPException(status_code=409, detail="Customer with this alias already exists")

        customer = {
            "id": uuid4().hex,
            "name": payload.name,
            "alias": payload.alias,
            "dob": payload.dob,
            "createdAt": _now(),
        }
        data["customers"].append(customer)
        write_data(data)

    logger.info(f"Created customer {customer['id']} ({customer['alias']})")
    return customer


def list_customers() -> List[Dict[str, Any]]:
    return read_data()["customers"]


def search_customer(
    id: Optional[str] = None,
    name: Optional[str] = None,
    alias: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Finds the first customer matching exactly one criterion.

    Only the highest-precedence parameter supplied is used: id, then alias,
    then name. The others are ignored.
    """
    if not id and not name and not alias:
        raise HTTPException(
            status_code=400,
            detail="At least one search parameter (id, name, or alias) is required",
        )

    logger.debug(f"Search request: id={id}, name={name}, alias={alias}")

    if id:
        field, value = "id", id
    elif alias:
        field, value = "alias", alias
    else:
        field, value = "name", name

    customers = read_data()["customers"]
    idx = _find_index(customers, field, value)
    if idx is None:
        logger.debug(f"No customer with {field}={value}")
        raise HTTPException(status_code=404, detail="Customer not found")

    return customers[idx]


def update_customer(customer_id: str, payload: CustomerUpdate) -> Dict[str, Any]:
    """
    Overwrites the supplied fields of a customer.

    Empty values count as "not supplied", so a field can never be cleared.
    """
    if not payload.name and not payload.alias and not payload.dob:
        raise HTTPException(status_code=400, detail="At least one field to update is required")

    with _write_lock:
        data = read_data()
        customers = data["customers"]

        idx = _find_index(customers, "id", customer_id)
        if idx is None:
            raise HTTPException(status_code=404, detail="Customer not found")

        current = customers[idx]
        if payload.alias and payload.alias != current.get("alias"):
            taken = any(
                i != idx and c.get("alias") == payload.alias
                for i, c in enumerate(customers)
            )
            if taken:
                raise HTTPException(status_code=409, detail="Customer with this alias already exists")

        customers[idx] = {
            **current,
            "name": payload.name or current.get("name"),
            "alias": payload.alias or current.get("alias"),
            "dob": payload.dob or current.get("dob"),
            "updatedAt": _now(),
        }
        write_data(data)

    logger.info(f"Updated customer {customer_id}")
    return customers[idx]


def delete_customer(customer_id: str) -> Dict[str, Any]:
    with _write_lock:
        data = read_data()

        idx = _find_index(data["customers"], "id", customer_id)
        if idx is None:
            raise HTTPException(status_code=404, detail="Customer not found")

        deleted = data["customers"].pop(idx)
        write_data(data)

    logger.info(f"Deleted customer {customer_id}")
    return {"message": "Customer deleted successfully", "customer": deleted}
