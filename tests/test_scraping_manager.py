"""Тесты пайплайна: профиль -> страница аниме."""

import pytest

from tests.pages import ANIME_HTML, BASE_URL, EMPTY_PROFILE_HTML, PROFILE_HTML, PROFILE_URL, FakeFetcher
from core.exceptions import (NoCurrentlyWatchingError, PageFetchError, PageParseError,
                             UpstreamStatusError)
from core.scraping_manager import ScrapingManager

NARUTO_URL = f"{BASE_URL}/anime/naruto-123"


def make_manager(pages):
    fetcher = FakeFetcher(pages)
    return ScrapingManager(profile_url=PROFILE_URL, base_url=BASE_URL, fetcher=fetcher), fetcher


def profile_with(*slugs):
    entries = "".join(f'<div class="status"><a href="/anime/{slug}">{slug}</a></div>' for slug in slugs)
    return f"<html><body>{entries}</body></html>"


@pytest.mark.asyncio
async def test_returns_anime_from_profile():
    manager, fetcher = make_manager({PROFILE_URL: PROFILE_HTML, NARUTO_URL: ANIME_HTML})

    anime = await manager.get_currently_watching()

    assert anime.title == "Naruto"
    assert anime.image_url == "https://cdn/x.jpg"
    assert anime.description == "A ninja."
    assert anime.episode_count == "220"
    assert anime.source_url == NARUTO_URL
    assert fetcher.requested == [PROFILE_URL, NARUTO_URL]


@pytest.mark.asyncio
async def test_later_entries_are_not_fetched():
    pages = {
        PROFILE_URL: profile_with("first", "second"),
        f"{BASE_URL}/anime/first": ANIME_HTML,
        f"{BASE_URL}/anime/second": ANIME_HTML,
    }
    manager, fetcher = make_manager(pages)

    anime = await manager.get_currently_watching()

    assert anime.source_url == f"{BASE_URL}/anime/first"
    assert fetcher.requested == [PROFILE_URL, f"{BASE_URL}/anime/first"]


@pytest.mark.asyncio
async def test_broken_anime_page_moves_to_next_entry():
    broken = f"{BASE_URL}/anime/broken"
    empty = f"{BASE_URL}/anime/empty"
    good = f"{BASE_URL}/anime/good"
    pages = {
        PROFILE_URL: profile_with("broken", "empty", "good"),
        broken: UpstreamStatusError(broken, 502),
        empty: "",
        good: ANIME_HTML,
    }
    manager, fetcher = make_manager(pages)

    anime = await manager.get_currently_watching()

    assert anime.source_url == good
    assert fetcher.requested == [PROFILE_URL, broken, empty, good]


@pytest.mark.asyncio
async def test_no_entries_raises_not_found():
    manager, _ = make_manager({PROFILE_URL: EMPTY_PROFILE_HTML})

    with pytest.raises(NoCurrentlyWatchingError):
        await manager.get_currently_watching()


@pytest.mark.asyncio
async def test_all_anime_pages_failing_is_not_found():
    first = f"{BASE_URL}/anime/first"
    second = f"{BASE_URL}/anime/second"
    pages = {
        PROFILE_URL: profile_with("first", "second"),
        first: PageFetchError("connection refused", url=first),
        second: "",
    }
    manager, fetcher = make_manager(pages)

    with pytest.raises(NoCurrentlyWatchingError):
        await manager.get_currently_watching()

    assert fetcher.requested == [PROFILE_URL, first, second]


@pytest.mark.asyncio
async def test_profile_fetch_error_propagates():
    manager, fetcher = make_manager({PROFILE_URL: UpstreamStatusError(PROFILE_URL, 503)})

    with pytest.raises(UpstreamStatusError) as exc_info:
        await manager.get_currently_watching()

    assert exc_info.value.status == 503
    assert fetcher.requested == [PROFILE_URL]


@pytest.mark.asyncio
async def test_profile_parse_error_propagates():
    manager, _ = make_manager({PROFILE_URL: "   "})

    with pytest.raises(PageParseError):
        await manager.get_currently_watching()


def test_defaults_come_from_config():
    import config

    manager = ScrapingManager()

    assert manager.profile_url == config.PROFILE_URL
    assert manager.base_url == config.ANIMEKAI_BASE_URL
