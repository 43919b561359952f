from __future__ import annotations

import pytest

from blogprint.errors import MeasurementError
from blogprint.layout.measure import TextMeasurer

_SENTENCE = (
    "Greedy wrapping packs as many whole words as possible onto every line "
    "before starting the next one, and it never breaks a word in half."
)


def test_wrap_is_deterministic_and_respects_width() -> None:
    measurer = TextMeasurer()

    first = measurer.wrap(_SENTENCE, 10, 50)
    second = measurer.wrap(_SENTENCE, 10, 50)

    assert first == second
    assert len(first) > 1
    assert all(line.width <= 50 for line in first)


def test_wrap_preserves_every_word_in_order() -> None:
    lines = TextMeasurer().wrap(_SENTENCE, 12, 40, font="hebo")

    assert " ".join(line.text for line in lines) == _SENTENCE


def test_wrap_keeps_overlong_word_on_its_own_line() -> None:
    lines = TextMeasurer().wrap("tiny Pneumonoultramicroscopicsilicovolcanoconiosis end", 10, 20)

    assert [line.text for line in lines] == ["tiny", "Pneumonoultramicroscopicsilicovolcanoconiosis", "end"]
    assert lines[1].width > 20


def test_wrap_of_blank_text_is_empty() -> None:
    assert TextMeasurer().wrap("   ", 10, 100) == []


def test_bold_text_measures_wider_than_regular() -> None:
    measurer = TextMeasurer()

    regular = measurer.text_width("Measured heading", 14)
    bold = measurer.text_width("Measured heading", 14, font="hebo")

    assert bold > regular > 0


def test_unknown_font_raises_measurement_error() -> None:
    with pytest.raises(MeasurementError, match="no-such-font"):
        TextMeasurer().text_width("text", 10, font="no-such-font")


def test_non_positive_font_size_raises_measurement_error() -> None:
    with pytest.raises(MeasurementError, match="font size"):
        TextMeasurer().wrap("some words", 0, 50)


def test_typographic_punctuation_has_real_glyph_widths() -> None:
    measurer = TextMeasurer()

    em_dash = measurer.text_width("—", 10)
    hyphen = measurer.text_width("-", 10)
    ellipsis = measurer.text_width("…", 10)
    period = measurer.text_width(".", 10)

    assert em_dash > hyphen > 0
    assert ellipsis > period > 0
