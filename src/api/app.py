"""FastAPI 应用工厂."""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from .routes import router
from .ui import INDEX_HTML
from config.logging_config import get_logger
from doc_translator.errors import ConfigurationError
from doc_translator.inference_client import InferenceClient
from doc_translator.orchestrator import TranslationSession

logger = get_logger(__name__)


def build_session(settings) -> TranslationSession:
    """
    根据配置创建翻译会话.

    缺少API密钥不会阻止服务启动，只会让远程请求失败。
    """
    client: Optional[InferenceClient] = None
    try:
        client = InferenceClient.from_settings(settings)
    except ConfigurationError as e:
        logger.error(f"Inference client disabled: {e}")
    return TranslationSession.from_client(client)


def create_app(session: TranslationSession) -> FastAPI:
    """创建FastAPI应用实例."""
    app = FastAPI(
        title="Document Translator API",
        description="Context-aware document translation with knowledge bases",
        version="1.0.0",
    )

    # 添加CORS中间件
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.session = session
    app.include_router(router)

    @app.get("/", response_class=HTMLResponse)
    async def index():
        """返回浏览器界面"""
        return INDEX_HTML

    @app.get("/health")
    async def health():
        return {
            "status": "ok",
            "inference_configured": session.requester.client is not None,
        }

    return app
