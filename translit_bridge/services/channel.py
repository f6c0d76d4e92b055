"""
Named method channel carrying calls from the application to the bridge.

Handlers are plain callables taking the call arguments. Whatever a handler
raises is turned into a structured ``MethodResult``; nothing escapes
``invoke``.
"""
import logging
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError

from translit_bridge.api.schemas import MethodCall, MethodResult, TranslitBatchArguments
from translit_bridge.core.errors import BridgeError, InvalidArgument, TransformError
from translit_bridge.services.bridge import TransliterationBridge

TRANSLIT_BATCH = "translitBatch"

Handler = Callable[[Dict[str, Any], str], Any]


class MethodChannel:
    def __init__(self, name: str):
        self.name = name
        self._handlers: Dict[str, Handler] = {}

    def set_method_call_handler(self, method: str, handler: Optional[Handler]) -> None:
        if handler is None:
            self._handlers.pop(method, None)
        else:
            self._handlers[method] = handler

    @property
    def methods(self):
        return sorted(self._handlers)

    def invoke(self, call: MethodCall, request_id: str = "n/a") -> MethodResult:
        handler = self._handlers.get(call.method)
        if handler is None:
            logging.warning(
                "[CHANNEL] request_id=%s channel=%s method=%s event=not_implemented",
                request_id,
                self.name,
                call.method,
            )
            return MethodResult.not_implemented()
        try:
            result = handler(call.arguments or {}, request_id)
        except ValidationError as e:
            logging.warning("[CHANNEL] request_id=%s method=%s event=invalid_argument", request_id, call.method)
            return MethodResult.failure(InvalidArgument.code, _describe(e))
        except BridgeError as e:
            return MethodResult.failure(e.code, e.message)
        except Exception as e:
            logging.exception("[CHANNEL] request_id=%s method=%s event=handler_crash", request_id, call.method)
            return MethodResult.failure(TransformError.code, str(e) or e.__class__.__name__)
        try:
            return MethodResult.success(result)
        except ValidationError:
            logging.exception("[CHANNEL] request_id=%s method=%s event=bad_result", request_id, call.method)
            return MethodResult.failure(TransformError.code, f"{call.method} returned a malformed result")


def _describe(err: ValidationError) -> str:
    first = err.errors()[0]
    loc = ".".join(str(p) for p in first.get("loc", ()))
    return f"{loc}: {first.get('msg')}" if loc else first.get("msg", "invalid arguments")


def register_translit_handler(
    channel: MethodChannel,
    bridge: TransliterationBridge,
    max_batch_size: int = 500,
    max_text_len: int = 4096,
) -> None:
    def handle(arguments: Dict[str, Any], request_id: str):
        args = TranslitBatchArguments.model_validate(arguments)
        if len(args.texts) > max_batch_size:
            raise InvalidArgument(f"texts: at most {max_batch_size} items per batch")
        if any(len(t) > max_text_len for t in args.texts):
            raise InvalidArgument(f"texts: items longer than {max_text_len} characters")
        return bridge.translit_batch(args.texts, args.script, request_id)

    channel.set_method_call_handler(TRANSLIT_BATCH, handle)
    logging.info("[CHANNEL] channel=%s event=registered method=%s", channel.name, TRANSLIT_BATCH)
