"""Secured data endpoint, guarded by the synced API key."""

from fastapi import APIRouter, Depends

from myapp.auth import require_api_key

router = APIRouter(prefix="/api", tags=["data"])


@router.get("/data", dependencies=[Depends(require_api_key)])
def secured_data():
    return {
        "data": {"users": 42, "orders": 156},
        "source": "secured-endpoint",
        "authenticatedWith": "External Secrets + AWS Secrets Manager",
    }
