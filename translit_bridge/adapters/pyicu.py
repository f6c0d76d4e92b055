import logging

from translit_bridge.adapters.base import ScriptTransliterator, Transform
from translit_bridge.core.errors import TransformError, UnsupportedPlatform

try:
    import icu
except ImportError:
    icu = None

logger = logging.getLogger(__name__)


def icu_major_version() -> int:
    if icu is None:
        return 0
    return int(icu.ICU_VERSION.split(".")[0])


class ICUTransliterator(ScriptTransliterator):
    """ICU ``Transliterator`` through PyICU; unknown IDs fail at construction."""

    name = "icu"

    def __init__(self, min_version: int = 56):
        self.min_version = min_version

    def is_supported(self) -> bool:
        if icu is None:
            logger.error("[ICU] PyICU missing")
            return False
        version = icu_major_version()
        if version < self.min_version:
            logger.error("[ICU] version too low have=%d need=%d", version, self.min_version)
            return False
        return True

    def open(self, transform_id: str) -> Transform:
        if icu is None:
            raise UnsupportedPlatform("PyICU is not installed")
        try:
            transliterator = icu.Transliterator.createInstance(transform_id)
        except icu.ICUError as e:
            raise TransformError(str(e)) from e
        return transliterator.transliterate
