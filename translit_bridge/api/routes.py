import logging
from typing import Any, Dict
from fastapi import APIRouter, Body, HTTPException, Request
from translit_bridge.api.schemas import MethodCall, MethodResult, TranslitBatchResponse
from translit_bridge.core.errors import InvalidArgument, TransformError, UnsupportedPlatform
from translit_bridge.services.channel import TRANSLIT_BATCH

router = APIRouter()

HTTP_STATUS_BY_CODE = {
    UnsupportedPlatform.code: 503,
    TransformError.code: 422,
    InvalidArgument.code: 400,
}


def _rid(request: Request) -> str:
    return getattr(request.state, "request_id", "n/a")


@router.get("/health")
async def health(request: Request):
    state = request.app.state
    transliterator = state.bridge.transliterator
    return {
        "ok": True,
        "channel": state.channel.name,
        "methods": state.channel.methods,
        "backend": transliterator.name,
        "backend_supported": transliterator.is_supported(),
        "metrics": state.metrics.snapshot(),
    }


@router.post("/channels/{channel_name:path}", response_model=MethodResult, response_model_exclude_none=True)
def invoke_channel(channel_name: str, call: MethodCall, request: Request):
    channel = request.app.state.channel
    if channel_name != channel.name:
        logging.warning("[CHANNEL] request_id=%s unknown_channel=%s", _rid(request), channel_name)
        raise HTTPException(status_code=404, detail=f"No channel named {channel_name}")
    return channel.invoke(call, _rid(request))


@router.post("/translit/batch", response_model=TranslitBatchResponse)
def translit_batch(request: Request, arguments: Dict[str, Any] = Body(...)):
    # arguments are validated by the channel so malformed bodies map to INVALID_ARGUMENT
    channel = request.app.state.channel
    result = channel.invoke(MethodCall(method=TRANSLIT_BATCH, arguments=arguments), _rid(request))
    if result.status == "error":
        status = HTTP_STATUS_BY_CODE.get(result.error.code, 500)
        raise HTTPException(status_code=status, detail=result.error.model_dump())
    return TranslitBatchResponse(success=True, outputs=result.result)
