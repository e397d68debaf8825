"""
Unit tests for text splitting and rendering.
"""

import pytest

from kor_gloss import (
    Def,
    Dictionary,
    MissingMeaningError,
    Translated,
    TranslationMode,
    Untranslated,
    clean_lines,
    render_part,
    retranslate_lines,
    translate,
    translate_document,
    translate_lines,
    translate_split,
)


class TestTranslateSplit:
    """Test splitting text into parts."""

    def test_sentence(self, dictionary: Dictionary) -> None:
        parts = list(translate_split("나는 학교에 간다", dictionary))
        assert [type(p) for p in parts] == [
            Untranslated, Translated, Untranslated, Translated, Untranslated,
        ]
        assert [p.text for p in parts] == ["나는 ", "학교", "에 ", "간", "다"]

    def test_offsets(self, dictionary: Dictionary) -> None:
        text = "나는 학교에 간다"
        for part in translate_split(text, dictionary):
            assert text[part.start:part.end] == part.text

    def test_parts_join_to_source(self, dictionary: Dictionary) -> None:
        text = "어제 학교에서 공부했다. Then I went home 🏠 가!"
        assert "".join(p.text for p in translate_split(text, dictionary)) == text

    def test_translated_parts_carry_definition(self, dictionary: Dictionary) -> None:
        translated = [p for p in translate_split("학교 가", dictionary) if isinstance(p, Translated)]
        assert [p.definition.meanings[0] for p in translated] == ["school", "go"]

    def test_adjacent_matches(self, dictionary: Dictionary) -> None:
        parts = list(translate_split("학교학교", dictionary))
        assert [p.text for p in parts] == ["학교", "학교"]
        assert all(isinstance(p, Translated) for p in parts)

    def test_empty_text(self, dictionary: Dictionary) -> None:
        assert list(translate_split("", dictionary)) == []

    def test_is_lazy(self, dictionary: Dictionary) -> None:
        parts = translate_split("학교", dictionary)
        assert next(parts).text == "학교"
        with pytest.raises(StopIteration):
            next(parts)


class TestRenderPart:
    """Test rendering single parts."""

    def test_untranslated(self) -> None:
        assert render_part(Untranslated("에 ", 0, 2)) == "에 "

    def test_bracketed_meaning(self) -> None:
        part = Translated("간", 0, 1, Def("가다", meanings=["go", "leave"]))
        assert render_part(part) == "[go]"

    def test_brace_keeps_source(self) -> None:
        part = Translated("서울", 0, 2, Def("서울", meanings=["{Seoul"]))
        assert render_part(part) == "{서울"

    def test_angle_is_literal(self) -> None:
        part = Translated("씨", 0, 1, Def("씨", meanings=["<-ssi>"]))
        assert render_part(part) == "<-ssi>"

    def test_missing_meaning_is_fatal(self) -> None:
        part = Translated("가", 0, 1, Def("가다"))
        with pytest.raises(MissingMeaningError):
            render_part(part)


class TestTranslate:
    """Test whole-text translation."""

    def test_sentence(self, dictionary: Dictionary) -> None:
        assert translate("나는 학교에 간다", dictionary) == "나는 [school]에 [go]다"

    def test_no_match_text_unchanged(self, dictionary: Dictionary) -> None:
        text = "안녕하세요, world!\n  새 줄\t탭"
        assert translate(text, dictionary) == text

    def test_sentinel_meanings(self) -> None:
        d = Dictionary()
        d.add_definitions([
            Def("서울", meanings=["{Seoul"]),
            Def("씨", meanings=["<Mr.>"]),
        ])
        assert translate("서울에서 김씨", d) == "{서울에서 김<Mr.>"

    def test_longest_match_preferred(self) -> None:
        d = Dictionary()
        d.add_definitions([
            Def("학", meanings=["learning"]),
            Def("학교", meanings=["school"]),
        ])
        assert translate("학교", d) == "[school]"
        assert translate("학생", d) == "[learning]생"

    def test_empty_meanings_in_dictionary_is_fatal(self) -> None:
        d = Dictionary()
        d.add_definitions([Def("학교")])
        with pytest.raises(MissingMeaningError):
            translate("학교", d)


class TestLineModes:
    """Test line-by-line document modes."""

    def test_translate_lines(self, dictionary: Dictionary) -> None:
        text = "학교에 간다\n\n안녕\n"
        assert translate_lines(text, dictionary) == [
            "학교에 간다",
            "-> [school]에 [go]다",
            "-| ",
            "-| ",
            "-| ",
            "",
            "안녕",
            "-| ",
            "-| ",
            "-| ",
        ]

    def test_retranslate_lines(self, dictionary: Dictionary) -> None:
        text = "\n".join([
            "학교에 간다",
            "-> stale",
            "-| I go to school",
            "-| ",
            "",
            "안녕",
            "-> stale",
        ])
        assert retranslate_lines(text, dictionary) == [
            "학교에 간다",
            "-> [school]에 [go]다",
            "-| I go to school",
            "-| ",
            "",
            "안녕",
        ]

    def test_clean_lines(self) -> None:
        text = "\n".join([
            "학교에 간다",
            "-> [school]에 [go]다",
            "-|   I go to school  ",
            "-| ",
            "   ",
            "안녕",
            "-| Hello",
        ])
        assert clean_lines(text) == [
            "I go to school",
            "-| ",
            "",
            "Hello",
        ]

    def test_translate_document_modes(self, dictionary: Dictionary) -> None:
        text = "학교\n-> old"
        assert translate_document(text, dictionary) == "[school]\n-> old"
        assert translate_document(text, dictionary, TranslationMode.RETRANSLATE) == "학교\n-> [school]"
        assert translate_document("학교", dictionary, TranslationMode.LINE_BY_LINE) == (
            "학교\n-> [school]\n-| \n-| \n-| "
        )
