import logging

from translit_bridge.adapters.base import ScriptTransliterator, Transform, target_of
from translit_bridge.core.errors import TransformError, UnsupportedPlatform

try:
    from indic_transliteration import sanscript
except ImportError:
    sanscript = None

logger = logging.getLogger(__name__)


def _schemes():
    return {
        "Devanagari": sanscript.DEVANAGARI,
        "Bengali": sanscript.BENGALI,
        "Gujarati": sanscript.GUJARATI,
        "Gurmukhi": sanscript.GURMUKHI,
        "Kannada": sanscript.KANNADA,
        "Malayalam": sanscript.MALAYALAM,
        "Oriya": sanscript.ORIYA,
        "Tamil": sanscript.TAMIL,
        "Telugu": sanscript.TELUGU,
    }


class SanscriptTransliterator(ScriptTransliterator):
    name = "sanscript"

    def is_supported(self) -> bool:
        if sanscript is None:
            logger.error("[SANSCRIPT] library missing")
            return False
        return True

    def open(self, transform_id: str) -> Transform:
        if sanscript is None:
            raise UnsupportedPlatform("indic_transliteration is not installed")
        target = _schemes().get(target_of(transform_id))
        if target is None:
            raise TransformError(f"No transliterator for ID {transform_id}")

        def apply(text: str) -> str:
            # plain lowercase Latin reads as ITRANS without the capital long vowels
            return sanscript.transliterate(text.lower(), sanscript.ITRANS, target)

        return apply
