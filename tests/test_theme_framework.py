"""Tests for theme document loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from forumtheme.errors import ErrorCode, ThemeLoadError
from forumtheme.themes.loader import load_theme_document, parse_theme_document
from forumtheme.themes.models import ThemeValidationError

_CLASSIC = """<?xml version="1.0" encoding="utf-8"?>
<Theme name="Classic" dir="classic">
  <page name="common">
    <Resource tag="logo" language="en">~images/logo.png</Resource>
    <Resource tag="LOGO" language="de">~images/logo_de.png</Resource>
    <Resource tag="LOGO">~images/logo_any.png</Resource>
    <Resource tag="TITLE">Forum <b>home</b></Resource>
  </page>
  <page name="ICONS">
    <Resource tag="PANEL_EXPAND">~images/expand.gif</Resource>
  </page>
  <page name="COMMON">
    <Resource tag="FOOTER">Powered by forumtheme</Resource>
  </page>
</Theme>
"""


def _write_theme(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_load_theme_document_valid(tmp_path: Path) -> None:
    path = _write_theme(tmp_path / "classic.xml", _CLASSIC)

    document = load_theme_document(path)
    assert document.theme_file == "classic.xml"
    assert document.directory == "classic"
    assert set(document.pages) == {"COMMON", "ICONS"}
    assert document.resource_count == 6


def test_names_tags_and_languages_are_upper_cased() -> None:
    document = parse_theme_document(_CLASSIC, theme_file="classic.xml")

    page = document.page("common")
    assert page is not None
    first = page.resources[0]
    assert first.tag == "LOGO"
    assert first.language == "EN"
    assert first.value == "~images/logo.png"


def test_pages_with_same_name_are_merged_in_document_order() -> None:
    document = parse_theme_document(_CLASSIC, theme_file="classic.xml")

    tags = [resource.tag for resource in document.pages["COMMON"].resources]
    assert tags == ["LOGO", "LOGO", "LOGO", "TITLE", "FOOTER"]


def test_resource_value_includes_nested_text() -> None:
    document = parse_theme_document(_CLASSIC, theme_file="classic.xml")

    title = document.pages["COMMON"].find("TITLE")
    assert title is not None
    assert title.value == "Forum home"


def test_page_find_exact_language_and_any_language() -> None:
    document = parse_theme_document(_CLASSIC, theme_file="classic.xml")
    page = document.pages["COMMON"]

    assert page.find("LOGO", "DE").value == "~images/logo_de.png"
    assert page.find("LOGO", "FR") is None
    assert page.find("LOGO").value == "~images/logo.png"


def test_missing_dir_attribute_is_allowed_at_load() -> None:
    document = parse_theme_document('<Theme><page name="A"/></Theme>', theme_file="nodir.xml")
    assert document.directory is None


def test_blank_language_is_treated_as_language_agnostic() -> None:
    document = parse_theme_document(
        '<Theme dir="d"><page name="A"><Resource tag="X" language=" ">v</Resource></page></Theme>',
        theme_file="blank.xml",
    )
    assert document.pages["A"].resources[0].language is None


def test_missing_file_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(ThemeLoadError) as info:
        load_theme_document(tmp_path / "absent.xml")
    assert info.value.code is ErrorCode.DOCUMENT_NOT_FOUND


def test_malformed_xml_rejected(tmp_path: Path) -> None:
    path = _write_theme(tmp_path / "broken.xml", "<Theme dir='x'><page name='A'>")

    with pytest.raises(ThemeLoadError) as info:
        load_theme_document(path)
    assert info.value.code is ErrorCode.DOCUMENT_MALFORMED


def test_entity_declarations_rejected() -> None:
    content = (
        '<?xml version="1.0"?>\n'
        '<!DOCTYPE Theme [<!ENTITY boom "boom">]>\n'
        '<Theme dir="x"><page name="A"><Resource tag="B">&boom;</Resource></page></Theme>'
    )
    with pytest.raises(ThemeLoadError) as info:
        parse_theme_document(content, theme_file="entity.xml")
    assert info.value.code is ErrorCode.DOCUMENT_MALFORMED


def test_page_without_name_rejected() -> None:
    with pytest.raises(ThemeValidationError) as info:
        parse_theme_document('<Theme dir="x"><page><Resource tag="A">a</Resource></page></Theme>', theme_file="t.xml")
    assert info.value.code is ErrorCode.DOCUMENT_INVALID
    assert "'name'" in info.value.message


def test_resource_without_tag_rejected() -> None:
    with pytest.raises(ThemeValidationError):
        parse_theme_document('<Theme dir="x"><page name="A"><Resource>a</Resource></page></Theme>', theme_file="t.xml")


class TestDuplicateResources:
    _CONTENT = (
        '<Theme dir="x"><page name="A">'
        '<Resource tag="B" language="EN">first</Resource>'
        '<Resource tag="b" language="en">second</Resource>'
        "</page></Theme>"
    )

    def test_duplicates_recorded_and_first_wins(self) -> None:
        document = parse_theme_document(self._CONTENT, theme_file="dup.xml")

        assert document.duplicates == (("A", "B", "EN"),)
        assert document.pages["A"].find("B", "EN").value == "first"

    def test_duplicates_rejected_when_strict(self) -> None:
        with pytest.raises(ThemeValidationError) as info:
            parse_theme_document(self._CONTENT, theme_file="dup.xml", reject_duplicates=True)
        assert info.value.code is ErrorCode.DUPLICATE_RESOURCE
        assert "A.B[EN]" in info.value.message

    def test_same_tag_in_different_languages_is_not_a_duplicate(self) -> None:
        document = parse_theme_document(_CLASSIC, theme_file="classic.xml", reject_duplicates=True)
        assert document.duplicates == ()
