import uvicorn

from placelens.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "placelens.api:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
