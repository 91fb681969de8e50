"""Kubernetes probes. Both are constant and touch no dependencies."""

from fastapi import APIRouter

router = APIRouter(tags=["probes"])


@router.get("/health")
def health():
    return {"status": "healthy"}


@router.get("/ready")
def ready():
    return {"status": "ready"}
