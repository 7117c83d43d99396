# scrapers/page_fetcher.py
import asyncio
import aiohttp
from bs4 import BeautifulSoup
import config
from core.exceptions import PageFetchError, PageParseError, UpstreamStatusError


class PageFetcher:
    """
    Загружает HTML-страницы animekai.to через aiohttp.
    Каждый запрос отправляется с браузерным User-Agent, иначе сайт его отклоняет.
    """
    def __init__(self, user_agent=None):
        self.headers = {'User-Agent': user_agent or config.USER_AGENT}

    async def fetch_html(self, url):
        """
        Возвращает тело страницы. Ошибки сети и статусы кроме 200 - PageFetchError,
        тело, которое не декодируется в заявленной кодировке - PageParseError.
        """
        print(f"[*] Загрузка страницы: {url}")
        try:
            async with aiohttp.ClientSession(headers=self.headers) as session:
                async with session.get(url) as response:
                    if response.status != 200:
                        raise UpstreamStatusError(url, response.status)
                    try:
                        return await response.text()
                    except UnicodeDecodeError as e:
                        raise PageParseError(f"Не удалось декодировать тело {url}: {e}", url=url) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise PageFetchError(f"Ошибка запроса к {url}: {e}", url=url) from e


def parse_html(html, url=None):
    """
    Разбирает HTML в BeautifulSoup.
    Пустое тело или документ без единого элемента считается ошибкой разбора.
    """
    if not html or not html.strip():
        raise PageParseError("Пустое тело страницы", url=url)
    try:
        soup = BeautifulSoup(html, 'html.parser')
    except Exception as e:
        raise PageParseError(f"Не удалось разобрать HTML: {e}", url=url) from e
    if soup.find() is None:
        raise PageParseError("В документе нет HTML-элементов", url=url)
    return soup
