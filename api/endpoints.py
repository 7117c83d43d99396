# api/endpoints.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse
from core.exceptions import (NoCurrentlyWatchingError, PageParseError,
                             ScrapeError, UpstreamStatusError)
from core.scraping_manager import ScrapingManager

router = APIRouter()
manager = ScrapingManager()


def get_manager():
    return manager


def _error_message(error):
    # До эндпоинта доходят только ошибки загрузки профиля
    if isinstance(error, UpstreamStatusError):
        return f"Failed to fetch profile: upstream returned status {error.status}"
    if isinstance(error, PageParseError):
        return "Failed to parse profile HTML"
    return "Failed to fetch profile"


@router.get("/")
async def get_currently_watching(current_manager: ScrapingManager = Depends(get_manager)):
    """
    Возвращает аниме, которое пользователь смотрит сейчас.
    404 - в профиле нет текущего аниме, 500 - ошибка загрузки или разбора профиля.
    """
    try:
        anime = await current_manager.get_currently_watching()
    except NoCurrentlyWatchingError as e:
        return PlainTextResponse(str(e), status_code=404)
    except ScrapeError as e:
        print(f"[!] Ошибка скрапинга: {e}")
        return PlainTextResponse(_error_message(e), status_code=500)
    return JSONResponse(content=anime.model_dump(by_alias=True))
