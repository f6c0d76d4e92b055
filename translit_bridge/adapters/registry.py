from translit_bridge.adapters.aksharamukha import AksharaTransliterator
from translit_bridge.adapters.base import ScriptTransliterator
from translit_bridge.adapters.pyicu import ICUTransliterator
from translit_bridge.adapters.sanscript import SanscriptTransliterator

BACKENDS = {
    AksharaTransliterator.name: AksharaTransliterator,
    SanscriptTransliterator.name: SanscriptTransliterator,
    ICUTransliterator.name: ICUTransliterator,
}


def build_transliterator(name: str, min_icu_version: int = 56) -> ScriptTransliterator:
    cls = BACKENDS.get(name)
    if cls is None:
        raise ValueError(f"Unknown transliteration backend {name!r}; expected one of {sorted(BACKENDS)}")
    if cls is ICUTransliterator:
        return ICUTransliterator(min_version=min_icu_version)
    return cls()
