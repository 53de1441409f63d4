# app/schemas/customer_schemas.py
from pydantic import BaseModel
from typing import Optional, List


class CustomerCreate(BaseModel):
    # presence is checked by the service so missing fields answer 400, not 422
    name: Optional[str] = None
    alias: Optional[str] = None
    dob: Optional[str] = None


class CustomerUpdate(BaseModel):
    name: Optional[str] = None
    alias: Optional[str] = None
    dob: Optional[str] = None


class CustomerCollection(BaseModel):
    customers: List[dict]


class HealthResponse(BaseModel):
    status: str
