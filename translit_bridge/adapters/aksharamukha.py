import logging

from translit_bridge.adapters.base import ScriptTransliterator, Transform, target_of
from translit_bridge.core.errors import TransformError, UnsupportedPlatform

try:
    from aksharamukha.transliterate import process
except ImportError:
    process = None

logger = logging.getLogger(__name__)

SOURCE_SCHEME = "ISO"

# transform target -> aksharamukha script name
SCRIPTS = {
    "Devanagari": "Devanagari",
    "Bengali": "Bengali",
    "Gujarati": "Gujarati",
    "Gurmukhi": "Gurmukhi",
    "Kannada": "Kannada",
    "Malayalam": "Malayalam",
    "Oriya": "Oriya",
    "Tamil": "Tamil",
    "Telugu": "Telugu",
    "Sinhala": "Sinhala",
}


class AksharaTransliterator(ScriptTransliterator):
    """
    String-transform style backend: a text that converts to nothing comes
    back as ``None`` so the caller keeps the original.
    """

    name = "aksharamukha"

    def is_supported(self) -> bool:
        if process is None:
            logger.error("[AKSHARA] library missing")
            return False
        return True

    def open(self, transform_id: str) -> Transform:
        if process is None:
            raise UnsupportedPlatform("aksharamukha is not installed")
        target = SCRIPTS.get(target_of(transform_id))
        if target is None:
            raise TransformError(f"No transliterator for ID {transform_id}")

        def apply(text: str):
            # aksharamukha is sync; a bounded string is cheap enough to run inline
            output = process(SOURCE_SCHEME, target, text)
            return output or None

        return apply
