# scrapers/anime_scraper.py
from bs4 import NavigableString
from models.anime import AnimeRecord
from scrapers.page_fetcher import parse_html

# Подпись на странице -> поле AnimeRecord
LABEL_FIELDS = (
    ('Episodes', 'episode_count'),
    ('Duration', 'duration'),
    ('Genres', 'genres'),
)


def _text(elements):
    return ''.join(el.get_text() for el in elements).strip()


def _first_text_node(element):
    # Учитывается только первый дочерний узел, и только если это текст
    first = next(iter(element.contents), None)
    return str(first) if isinstance(first, NavigableString) else ''


def find_labeled_value(soup, label):
    """
    Ищет значение поля по текстовой подписи вида "Episodes:".

    Блоки .detail > div просматриваются по порядку, внутри каждого - его
    прямые дочерние div. Подпись ищется только в первом текстовом узле
    дочернего div (с учетом регистра), значение берется из вложенных span.
    Побеждает первое совпадение в порядке документа. Если подпись не
    найдена, возвращается пустая строка.
    """
    marker = f"{label}:"
    for container in soup.select('.detail > div'):
        for row in container.find_all('div', recursive=False):
            if marker in _first_text_node(row):
                return _text(row.find_all('span'))
    return ''


def extract_anime(soup, url):
    """Собирает AnimeRecord со страницы аниме. Ненайденные поля остаются пустыми."""
    poster = soup.select_one('.poster img')
    title_el = soup.select_one('.title')
    type_el = soup.select_one('.info span b')

    data = {
        'title': poster.get('alt', '') if poster else '',
        'image_url': poster.get('src', '') if poster else '',
        'original_title': title_el.get('data-jp', '') if title_el else '',
        'description': _text(soup.select('.desc')),
        'rating': _text(soup.select('.info .rating')),
        'type': type_el.get_text().strip() if type_el else '',
        'source_url': url,
    }
    for label, field in LABEL_FIELDS:
        data[field] = find_labeled_value(soup, label)

    return AnimeRecord(**data)


def parse_anime_page(html, url):
    """Разбирает HTML страницы аниме. Неразбираемый документ - PageParseError, а не пустая запись."""
    return extract_anime(parse_html(html, url), url)
