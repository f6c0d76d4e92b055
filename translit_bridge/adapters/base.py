"""
Interface shared by every host transliteration backend.

A backend answers two questions: whether the host exposes the capability at
all (``is_supported``), and how to build a transform for a transform ID such
as ``Latin-Devanagari`` (``open``). Construction failures raise
``TransformError``; the returned callable may raise or return ``None`` for a
single text, which callers treat as "keep the original".
"""
import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from translit_bridge.core.errors import TransformError

SOURCE_PREFIX = "Latin-"

Transform = Callable[[str], Optional[str]]

logger = logging.getLogger(__name__)


def transform_id_for(script: str) -> str:
    return f"{SOURCE_PREFIX}{script}"


def target_of(transform_id: str) -> str:
    if not transform_id.startswith(SOURCE_PREFIX):
        raise TransformError(f"Unsupported source in transform ID {transform_id!r}")
    target = transform_id[len(SOURCE_PREFIX):]
    if not target:
        raise TransformError(f"Missing target in transform ID {transform_id!r}")
    return target


class ScriptTransliterator(ABC):
    name = "base"

    @abstractmethod
    def is_supported(self) -> bool:
        ...

    @abstractmethod
    def open(self, transform_id: str) -> Transform:
        ...

    def transform(self, text: str, script_id: str) -> str:
        """Transliterate one text, keeping it unchanged if the item fails."""
        apply = self.open(transform_id_for(script_id))
        try:
            out = apply(text)
        except Exception as e:
            logger.warning("[BACKEND] backend=%s event=item_fallback err=%s", self.name, e)
            return text
        return text if out is None else out
