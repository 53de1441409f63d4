# app/api/routes_health.py
from fastapi import APIRouter

from app.schemas.customer_schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health():
    return {"status": "healthy"}
