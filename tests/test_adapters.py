import re

import pytest

from translit_bridge.adapters.base import target_of, transform_id_for
from translit_bridge.adapters.registry import BACKENDS, build_transliterator
from translit_bridge.core.errors import TransformError, UnsupportedPlatform

DEVANAGARI = re.compile(r"^[ऀ-ॿ\s]+$")
TAMIL = re.compile(r"^[஀-௿\s]+$")


def test_transform_id():
    assert transform_id_for("Tamil") == "Latin-Tamil"
    assert target_of("Latin-Tamil") == "Tamil"
    with pytest.raises(TransformError):
        target_of("Cyrillic-Tamil")
    with pytest.raises(TransformError):
        target_of("Latin-")


def test_registry():
    assert set(BACKENDS) == {"aksharamukha", "sanscript", "icu"}
    assert build_transliterator("icu", min_icu_version=70).min_version == 70
    with pytest.raises(ValueError):
        build_transliterator("morse")


def test_aksharamukha_backend():
    pytest.importorskip("aksharamukha")
    backend = build_transliterator("aksharamukha")
    assert backend.is_supported()
    assert DEVANAGARI.match(backend.open("Latin-Devanagari")("namaste"))
    assert TAMIL.match(backend.transform("vanakkam", "Tamil"))
    with pytest.raises(TransformError):
        backend.open("Latin-Klingon")


def test_sanscript_backend():
    pytest.importorskip("indic_transliteration")
    backend = build_transliterator("sanscript")
    assert backend.is_supported()
    assert DEVANAGARI.match(backend.open("Latin-Devanagari")("namaste"))
    with pytest.raises(TransformError):
        backend.open("Latin-Klingon")


def test_icu_backend():
    pytest.importorskip("icu")
    backend = build_transliterator("icu", min_icu_version=1)
    assert backend.is_supported()
    assert DEVANAGARI.match(backend.open("Latin-Devanagari")("namaste"))
    with pytest.raises(TransformError):
        backend.open("Latin-Klingon")


def test_icu_gate_rejects_old_version():
    pytest.importorskip("icu")
    assert not build_transliterator("icu", min_icu_version=10_000).is_supported()


@pytest.mark.parametrize(
    "module, attr, name",
    [
        ("translit_bridge.adapters.pyicu", "icu", "icu"),
        ("translit_bridge.adapters.aksharamukha", "process", "aksharamukha"),
        ("translit_bridge.adapters.sanscript", "sanscript", "sanscript"),
    ],
)
def test_missing_library_fails_open_as_unsupported(monkeypatch, module, attr, name):
    monkeypatch.setattr(f"{module}.{attr}", None)
    backend = build_transliterator(name)
    assert not backend.is_supported()
    with pytest.raises(UnsupportedPlatform):
        backend.open("Latin-Devanagari")
    with pytest.raises(UnsupportedPlatform):
        backend.transform("namaste", "Devanagari")
