# core/exceptions.py
"""Исключения пайплайна скрапинга."""


class ScrapeError(Exception):
    """Базовая ошибка при получении или разборе страницы."""

    def __init__(self, message, url=None):
        super().__init__(message)
        self.url = url


class PageFetchError(ScrapeError):
    """Не удалось выполнить запрос к странице."""

    pass


class UpstreamStatusError(PageFetchError):
    """Сайт ответил статусом, отличным от 200."""

    def __init__(self, url, status):
        super().__init__(f"{url} вернул статус {status}", url=url)
        self.status = status


class PageParseError(ScrapeError):
    """Тело ответа не удалось разобрать как HTML-документ."""

    pass


class NoCurrentlyWatchingError(Exception):
    """В профиле нет аниме, которое пользователь смотрит сейчас."""

    pass
