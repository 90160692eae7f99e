"""Split/extract endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ...properties import NODE_DESCRIPTION, NodeDescription
from ...transform import transform_records
from ..config import ServerRuntimeConfig
from ..deps import get_config
from ..schemas import ErrorResponse, TransformRequest, TransformResponse

router = APIRouter(tags=["transform"])


@router.get("/properties", response_model=NodeDescription)
async def properties():
    return NODE_DESCRIPTION


@router.post(
    "/transform",
    response_model=TransformResponse,
    responses={422: {"model": ErrorResponse}},
)
def transform(
    request: TransformRequest,
    config: ServerRuntimeConfig = Depends(get_config),
):
    if len(request.items) > config.max_items:
        raise HTTPException(
            status_code=413,
            detail=f"Too many items: {len(request.items)} > {config.max_items}",
        )

    items = transform_records(
        request.items,
        request.parameters,
        on_error=request.on_error or config.default_on_error,
        regex_timeout=config.regex_timeout,
    )
    return TransformResponse(items=items, count=len(items))
