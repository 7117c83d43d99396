# main.py
import uvicorn
from fastapi import FastAPI, Request, Response
import config
from api.endpoints import router as api_router

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

app = FastAPI(
    title="Currently Watching API",
    description="API, которое возвращает аниме, которое пользователь смотрит сейчас на animekai.to.",
    version="1.0.0"
)


@app.middleware("http")
async def cors_middleware(request: Request, call_next):
    """Фронтенд обращается к API с любого домена. OPTIONS всегда отвечает 200 без тела."""
    if request.method == "OPTIONS":
        response = Response(status_code=200)
    else:
        response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


app.include_router(api_router, tags=["Currently Watching"])

if __name__ == "__main__":
    print(f"[START] Сервер запущен на порту {config.PORT}...")
    uvicorn.run(app, host=config.HOST, port=config.PORT)
