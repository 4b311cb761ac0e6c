"""Start the API with uvicorn on HOST:PORT (see `.env.example`)."""
import uvicorn

from api.core.config import settings

if __name__ == "__main__":
    uvicorn.run("api.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())
