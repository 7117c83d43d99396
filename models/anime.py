# models/anime.py
from pydantic import BaseModel, ConfigDict, Field


class AnimeRecord(BaseModel):
    """
    Данные об аниме со страницы animekai.to.
    Все поля - строки в том виде, в каком они есть на странице.
    Отсутствующее на странице поле остается пустой строкой.
    """
    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    original_title: str = Field(default="", alias="originalTitle")
    description: str = ""
    image_url: str = Field(default="", alias="image")
    source_url: str = Field(default="", alias="url")
    rating: str = ""
    episode_count: str = Field(default="", alias="episodes")
    duration: str = ""
    type: str = ""
    genres: str = ""
