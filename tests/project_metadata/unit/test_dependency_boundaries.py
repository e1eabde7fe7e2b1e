"""Boundary tests for internal package dependencies."""

from __future__ import annotations

from pathlib import Path


def _package_root() -> Path:
    return Path(__file__).resolve().parents[3] / "src" / "speck"


def _assert_no_imports(package: str, forbidden_import_fragments: tuple[str, ...]) -> None:
    for module_path in (_package_root() / package).glob("*.py"):
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden dependency in {module_path}: {fragment}"


def test_codec_engine_does_not_depend_on_specks_or_generation() -> None:
    _assert_no_imports(
        "decoding",
        ("speck.specks", "speck.api", "speck.generation", "hypothesis"),
    )


def test_generation_does_not_depend_on_codecs_or_specks() -> None:
    _assert_no_imports("generation", ("speck.decoding", "speck.specks", "speck.api"))


def test_speck_construction_does_not_depend_on_api() -> None:
    _assert_no_imports("specks", ("speck.api", "speck.configuration", "speck.error_reporting"))
