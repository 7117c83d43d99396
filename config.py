# config.py
# Файл для хранения конфигурационных данных
import os

# Настройки для скрапинга
ANIMEKAI_BASE_URL = "https://animekai.to"
PROFILE_URL = f"{ANIMEKAI_BASE_URL}/user/m3nvy/profile"  # Профиль пользователя

# Сайт отклоняет запросы с User-Agent по умолчанию
USER_AGENT = "Mozilla/5.0"

# Настройки сервера
HOST = "0.0.0.0"
DEFAULT_PORT = 8080


def get_port():
    """Порт из переменной окружения PORT, 8080 если она не задана или не число."""
    value = os.getenv("PORT")
    if not value:
        return DEFAULT_PORT
    try:
        return int(value)
    except ValueError:
        print(f"[!] Некорректное значение PORT '{value}', используется {DEFAULT_PORT}")
        return DEFAULT_PORT


PORT = get_port()
