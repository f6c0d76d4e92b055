import logging
import time
from typing import List, Optional, Sequence

from translit_bridge.adapters.base import ScriptTransliterator, transform_id_for
from translit_bridge.core.errors import TransformError, UnsupportedPlatform

DEFAULT_SCRIPT = "Devanagari"


class TransliterationBridge:
    """
    Dispatches a batch of texts to the host transliteration backend.

    The whole batch fails only when the backend is unsupported or the
    transform cannot be built. A single item that fails to convert is
    returned unchanged so the output always lines up with the input.
    """

    def __init__(self, transliterator: ScriptTransliterator, default_script: str = DEFAULT_SCRIPT):
        self.transliterator = transliterator
        self.default_script = default_script

    def translit_batch(
        self, texts: Sequence[str], script: Optional[str] = None, request_id: str = "n/a"
    ) -> List[str]:
        backend = self.transliterator.name
        if not self.transliterator.is_supported():
            logging.error("[BRIDGE] request_id=%s event=unsupported backend=%s", request_id, backend)
            raise UnsupportedPlatform(f"Backend {backend} does not provide transliteration on this host")

        transform_id = transform_id_for(self.default_script if script is None else script)
        start = time.perf_counter()
        try:
            apply = self.transliterator.open(transform_id)
        except UnsupportedPlatform:
            raise
        except TransformError as e:
            logging.error(
                "[BRIDGE] request_id=%s event=transform_error id=%s err=%s", request_id, transform_id, e.message
            )
            raise
        except Exception as e:
            logging.error(
                "[BRIDGE] request_id=%s event=transform_error id=%s err=%s", request_id, transform_id, e
            )
            raise TransformError(str(e)) from e

        output: List[str] = []
        fallbacks = 0
        for text in texts:
            try:
                converted = apply(text)
            except Exception as e:
                logging.warning(
                    "[BRIDGE] request_id=%s event=item_fallback id=%s err=%s", request_id, transform_id, e
                )
                converted = None
            if converted is None:
                fallbacks += 1
                converted = text
            output.append(converted)

        logging.info(
            "[BRIDGE] request_id=%s event=ok backend=%s id=%s items=%d fallbacks=%d latency_ms=%.2f",
            request_id,
            backend,
            transform_id,
            len(output),
            fallbacks,
            (time.perf_counter() - start) * 1000,
        )
        return output
