# core/scraping_manager.py
import config
from core.exceptions import NoCurrentlyWatchingError, PageFetchError, PageParseError
from scrapers.anime_scraper import parse_anime_page
from scrapers.page_fetcher import PageFetcher, parse_html
from scrapers.profile_scraper import iter_watching_urls


class ScrapingManager:
    def __init__(self, profile_url=None, base_url=None, fetcher=None):
        self.profile_url = profile_url or config.PROFILE_URL
        self.base_url = base_url or config.ANIMEKAI_BASE_URL
        self.fetcher = fetcher or PageFetcher()

    async def _load_profile(self):
        html = await self.fetcher.fetch_html(self.profile_url)
        return parse_html(html, self.profile_url)

    async def _load_anime(self, anime_url):
        html = await self.fetcher.fetch_html(anime_url)
        return parse_anime_page(html, anime_url)

    async def get_currently_watching(self):
        """
        Находит в профиле аниме, которое пользователь смотрит сейчас, и
        возвращает данные с его страницы.

        Ошибки загрузки профиля пробрасываются сразу. Если страница аниме не
        загрузилась, проверяется следующая запись профиля. Если ни одна
        запись не дала данных - NoCurrentlyWatchingError.
        """
        print(f"[START] Поиск текущего аниме в профиле: {self.profile_url}")
        profile = await self._load_profile()

        last_error = None
        for anime_url in iter_watching_urls(profile, self.base_url):
            try:
                anime = await self._load_anime(anime_url)
            except (PageFetchError, PageParseError) as e:
                print(f"  [!] Пропуск {anime_url}: {e}")
                last_error = e
                continue
            print(f"[SUCCESS] Найдено: '{anime.title}' ({anime_url})")
            return anime

        if last_error is not None:
            print(f"[INFO] Ни одна страница аниме не загрузилась, последняя ошибка: {last_error}")
        else:
            print("[INFO] В профиле нет аниме со статусом просмотра.")
        raise NoCurrentlyWatchingError("No currently watching anime found")
