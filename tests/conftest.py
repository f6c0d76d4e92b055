import pytest

from translit_bridge.adapters.base import ScriptTransliterator, target_of
from translit_bridge.core.errors import TransformError

REFUSED = "<refuse>"
KNOWN_SCRIPTS = {"Devanagari", "Tamil"}


class FakeTransliterator(ScriptTransliterator):
    """
    Upper-cases text and tags it with the target script. Raises for the
    REFUSED item and fails construction for unknown scripts.
    """

    name = "fake"

    def __init__(self, supported=True, none_for=()):
        self.supported = supported
        self.none_for = set(none_for)
        self.opened = []
        self.seen = []

    def is_supported(self) -> bool:
        return self.supported

    def open(self, transform_id):
        self.opened.append(transform_id)
        target = target_of(transform_id)
        if target not in KNOWN_SCRIPTS:
            raise TransformError(f"Invalid transform ID {transform_id}")

        def apply(text):
            self.seen.append(text)
            if text == REFUSED:
                raise ValueError("cannot convert")
            if text in self.none_for:
                return None
            return f"{target}:{text.upper()}"

        return apply


@pytest.fixture
def fake_backend():
    return FakeTransliterator()


@pytest.fixture
def anyio_backend():
    return "asyncio"
