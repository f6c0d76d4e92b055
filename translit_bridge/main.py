import logging
from typing import Optional
from fastapi import FastAPI
from translit_bridge.adapters.base import ScriptTransliterator
from translit_bridge.adapters.registry import build_transliterator
from translit_bridge.api.routes import router as api_router
from translit_bridge.core.config import settings
from translit_bridge.core.logging import configure_logging
from translit_bridge.core.metrics import Metrics
from translit_bridge.core.security import build_registry
from translit_bridge.middleware.auth import AuthMiddleware
from translit_bridge.middleware.metrics import MetricsMiddleware
from translit_bridge.middleware.request_id import RequestIDMiddleware
from translit_bridge.services.bridge import TransliterationBridge
from translit_bridge.services.channel import MethodChannel, register_translit_handler


def create_app(transliterator: Optional[ScriptTransliterator] = None) -> FastAPI:
    configure_logging(settings.LOG_LEVEL)
    app = FastAPI(title="Transliteration Bridge", version="1.0.0")

    if transliterator is None:
        transliterator = build_transliterator(settings.TRANSLIT_BACKEND, settings.MIN_ICU_VERSION)
    bridge = TransliterationBridge(transliterator, default_script=settings.DEFAULT_SCRIPT)
    channel = MethodChannel(settings.TRANSLIT_CHANNEL)
    register_translit_handler(
        channel, bridge, max_batch_size=settings.MAX_BATCH_SIZE, max_text_len=settings.MAX_TEXT_LEN
    )

    app.state.bridge = bridge
    app.state.channel = channel
    app.state.metrics = Metrics()

    # last added runs first: request id, then metrics, then auth
    app.add_middleware(AuthMiddleware, client_registry=build_registry(settings), rate_limit_per_min=settings.RATE_LIMIT_PER_MIN)
    app.add_middleware(MetricsMiddleware, metrics=app.state.metrics)
    app.add_middleware(RequestIDMiddleware)

    logging.info(
        "transliteration_backend backend=%s supported=%s channel=%s",
        transliterator.name,
        transliterator.is_supported(),
        channel.name,
    )

    app.include_router(api_router, prefix="/api/v1")
    return app


def run():
    import uvicorn

    app = create_app()
    logging.info("translit-bridge starting on port %s", settings.PORT)
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
