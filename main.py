"""Document Translator API 主入口."""

import uvicorn

from api.app import build_session, create_app
from config.logging_config import setup_logging
from config.settings import settings

setup_logging()

# 创建FastAPI应用实例
app = create_app(build_session(settings))


if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.host, port=settings.port)
