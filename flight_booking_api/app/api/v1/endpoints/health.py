"""
Health endpoint.

Reports which service answered and how many records its store holds.
The service to inspect is whichever one the application registered
in ``app.state.service``.
"""

from typing import Any, Dict

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health", response_model=Dict[str, Any])
async def health(request: Request) -> Dict[str, Any]:
    service = request.app.state.service
    return {
        "status": "ok",
        "service": f"{service.entity_name}-service",
        "records": service.count(),
    }
