"""Tests for line normalization and the ID-card noise filter."""

from visitor_ocr.extraction.lines import (
    clean_id_line,
    clean_plate_line,
    is_noise_line,
    meaningful_lines,
    split_lines,
)
from visitor_ocr.utils.config import LineFilterConfig


class TestSplitLines:
    """Tests for split_lines."""

    def test_trims_and_drops_empty_lines(self) -> None:
        assert split_lines("  first \n\n   \n second\r\n") == ["first", "second"]

    def test_empty_text(self) -> None:
        assert split_lines("") == []

    def test_keeps_source_order(self) -> None:
        assert split_lines("c\nb\na") == ["c", "b", "a"]


class TestCleanLines:
    """Tests for the per-line character cleaning."""

    def test_id_line_strips_punctuation(self) -> None:
        assert clean_id_line("J0hn, O'Neil!") == "J0hn ONeil"

    def test_id_line_keeps_period_and_hyphen(self) -> None:
        assert clean_id_line("ID_No: 12.3-4") == "IDNo 12.3-4"

    def test_plate_line_drops_lowercase_before_upper(self) -> None:
        assert clean_plate_line("KA 01-ab 1234!") == "KA 01- 1234"

    def test_plate_line_trims(self) -> None:
        assert clean_plate_line("  XY 99  ") == "XY 99"


class TestIsNoiseLine:
    """Tests for the boilerplate / junk detection."""

    def setup_method(self) -> None:
        self.config = LineFilterConfig()

    def _noise(self, line: str) -> bool:
        return is_noise_line(line, clean_id_line(line), self.config)

    def test_too_short(self) -> None:
        assert self._noise("AB")

    def test_too_long(self) -> None:
        assert self._noise("A" * 51)

    def test_boundary_lengths_kept(self) -> None:
        assert not self._noise("Abe")
        assert not self._noise("B" * 50)

    def test_boilerplate_keywords_case_insensitive(self) -> None:
        assert self._noise("Republic of Examplamd")
        assert self._noise("valid until 2030")
        assert self._noise("Date of issue")
        assert self._noise("Sex: F")

    def test_bare_date_filtered(self) -> None:
        assert self._noise("12/05/1990")
        assert self._noise("1/2/2020")

    def test_symbols_only_filtered(self) -> None:
        assert self._noise("----")
        assert self._noise(". . .")

    def test_name_kept(self) -> None:
        assert not self._noise("Jane Doe")

    def test_custom_keywords(self) -> None:
        config = LineFilterConfig(boilerplate_keywords=["ACME"])
        assert not is_noise_line("Republic Road", "Republic Road", config)
        assert is_noise_line("Acme Corp", "Acme Corp", config)


class TestMeaningfulLines:
    """Tests for the full normalizer + filter."""

    def test_filters_boilerplate(self, id_card_text: str) -> None:
        lines = meaningful_lines(id_card_text, LineFilterConfig())
        assert lines == ["John Michael Smith", "A1B2C3D4E5"]

    def test_republic_line_never_meaningful(self) -> None:
        lines = meaningful_lines("REPUBLIC OF EXAMPLAND\nJane Doe", LineFilterConfig())
        assert "REPUBLIC OF EXAMPLAND" not in lines
        assert lines == ["Jane Doe"]

    def test_date_line_filtered(self) -> None:
        assert meaningful_lines("12/05/1990", LineFilterConfig()) == []

    def test_returns_cleaned_text(self) -> None:
        assert meaningful_lines("Smith, John;", LineFilterConfig()) == ["Smith John"]

    def test_empty_input(self) -> None:
        assert meaningful_lines("", LineFilterConfig()) == []
