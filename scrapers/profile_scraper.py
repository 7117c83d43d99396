# scrapers/profile_scraper.py
from urllib.parse import urljoin


def iter_watching_urls(soup, base_url):
    """
    Перебирает записи div.status профиля в порядке документа и отдает
    абсолютные ссылки на страницы аниме. Записи без ссылки пропускаются.

    Генератор ленивый: если вызывающий остановился на первой ссылке,
    остальные записи не просматриваются. Пустой генератор означает, что
    пользователь сейчас ничего не смотрит - это не ошибка.
    """
    for status in soup.select('div.status'):
        link = status.find('a')
        href = link.get('href') if link else None
        if href:
            yield urljoin(base_url, href)
