import uvicorn

from .config import get_settings

settings = get_settings()
uvicorn.run("transfer_planner.main:app", host=settings.host, port=settings.port)
