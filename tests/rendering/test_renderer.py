from __future__ import annotations

from datetime import datetime

import pytest

from blogprint.config import LayoutSettings
from blogprint.layout.pagination import PaginationEngine
from blogprint.models import Block, BlockKind, CoverMeta, Page
from blogprint.rendering.renderer import DocumentRenderer, format_cover_date


def _meta(**overrides: object) -> CoverMeta:
    values: dict[str, object] = {
        "title": "Writing Printable Posts",
        "author": "Ada Writer",
        "category": "perspective",
        "date": datetime(2024, 3, 5, 14, 45),
    }
    values.update(overrides)
    return CoverMeta(**values)


def _pages(settings: LayoutSettings, count: int) -> list[Page]:
    body = " ".join(f"token{index}" for index in range(80))
    blocks = [Block(kind=BlockKind.PARAGRAPH, text=f"Paragraph {number} {body}") for number in range(count)]
    return PaginationEngine(settings).paginate(blocks)


def test_footers_number_every_content_page() -> None:
    settings = LayoutSettings()
    pages = _pages(settings, 25)
    total = len(pages)

    document = DocumentRenderer(settings).render(pages, _meta())

    assert total > 1
    assert [page.footer.right for page in document.pages] == [f"Page {i} of {total}" for i in range(1, total + 1)]
    assert all(page.footer.left == "QuestMeraki" for page in document.pages)
    assert all(page.footer.y == settings.page_height - 8 for page in document.pages)


def test_header_band_is_on_every_content_page() -> None:
    settings = LayoutSettings(brand_name="Acme Journal", header_label="Members Edition")
    pages = _pages(settings, 25)

    document = DocumentRenderer(settings).render(pages, _meta())

    for page in document.pages:
        assert page.header is not None
        assert page.header.left == "Acme Journal"
        assert page.header.right == "Members Edition"
        assert page.header.y == settings.header_baseline


def test_header_band_can_be_disabled() -> None:
    settings = LayoutSettings(header_band=False)

    document = DocumentRenderer(settings).render(_pages(settings, 1), _meta())

    assert document.pages[0].header is None
    assert document.pages[0].footer is not None


def test_cover_holds_title_author_date_and_category() -> None:
    settings = LayoutSettings()

    document = DocumentRenderer(settings).render(_pages(settings, 1), _meta())

    cover = document.cover
    assert [line.role for line in cover.lines] == ["title", "author", "date", "category"]
    assert cover.lines[0].text == "Writing Printable Posts"
    assert cover.lines[0].y == settings.page_height / 3
    assert cover.lines[1].text == "By Ada Writer"
    assert cover.lines[2].text == "March 5, 2024"
    assert cover.lines[3].text == "PERSPECTIVE"
    ys = [line.y for line in cover.lines]
    assert ys == sorted(ys)


def test_cover_wraps_long_title_within_content_width() -> None:
    settings = LayoutSettings()
    title = "An Unreasonably Long Title About Pagination Engines That Cannot Fit On One Line"

    cover = DocumentRenderer(settings).build_cover(_meta(title=title))

    title_lines = [line for line in cover.lines if line.role == "title"]
    assert len(title_lines) > 1
    assert " ".join(line.text for line in title_lines) == title
    assert all(line.width <= settings.content_width for line in title_lines)
    assert title_lines[1].y - title_lines[0].y == 10


def test_cover_includes_subtitle_between_title_and_author() -> None:
    cover = DocumentRenderer(LayoutSettings()).build_cover(_meta(subtitle="Notes from the print shop"))

    roles = [line.role for line in cover.lines]
    assert roles.index("subtitle") == roles.index("title") + 1
    assert roles.index("author") == roles.index("subtitle") + 1


def test_render_requires_at_least_one_page() -> None:
    with pytest.raises(ValueError, match="without content pages"):
        DocumentRenderer(LayoutSettings()).render([], _meta())


def test_format_cover_date_has_no_leading_zero() -> None:
    assert format_cover_date(datetime(2023, 11, 9)) == "November 9, 2023"


def test_cover_caps_runaway_title_and_subtitle() -> None:
    settings = LayoutSettings()
    title = " ".join(f"Chapter{index}" for index in range(120))
    subtitle = " ".join(f"aside{index}" for index in range(120))

    cover = DocumentRenderer(settings).build_cover(_meta(title=title, subtitle=subtitle))

    title_lines = [line for line in cover.lines if line.role == "title"]
    subtitle_lines = [line for line in cover.lines if line.role == "subtitle"]
    assert len(title_lines) == 6
    assert len(subtitle_lines) == 4
    assert title_lines[-1].text.endswith("…")
    assert subtitle_lines[-1].text.endswith("…")
    assert all(line.width <= settings.content_width for line in title_lines + subtitle_lines)
    assert max(line.y for line in cover.lines) <= settings.content_bottom


def test_cover_moves_up_when_it_would_run_past_bottom_margin() -> None:
    settings = LayoutSettings(page_height=200)
    title = " ".join(f"Chapter{index}" for index in range(120))

    cover = DocumentRenderer(settings).build_cover(_meta(title=title, subtitle="A " * 200))

    assert cover.lines[0].y < settings.page_height / 3
    assert cover.lines[0].y >= settings.margin
    assert cover.lines[-1].role == "category"
    assert cover.lines[-1].y <= settings.content_bottom
