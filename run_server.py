import uvicorn
from app.core.config import settings

if __name__ == "__main__":
    print("\n" + "="*70)
    print("   🚀 Сервер поиска репетиторов запущен")
    print("="*70)
    print(f"   📍 URL:         http://{settings.APP_HOST}:{settings.APP_PORT}")
    print(f"   📚 Занятия:     http://{settings.APP_HOST}:{settings.APP_PORT}/classes")
    print(f"   💚 Healthcheck: http://{settings.APP_HOST}:{settings.APP_PORT}/healthcheck")
    print("="*70 + "\n")

    uvicorn.run("app.main:app", host=settings.APP_HOST, port=settings.APP_PORT, reload=True)
