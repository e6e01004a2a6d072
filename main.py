from dotenv import load_dotenv

load_dotenv()

from slowroute.app import create_app
from slowroute.config import settings


app = create_app(settings)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level="info"
    )
