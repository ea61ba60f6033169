"""Document Translator API 路由."""

import uuid
import asyncio
from urllib.parse import quote
from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from fastapi.responses import Response, StreamingResponse

from .sse_manager import SSEManager
from config.settings import settings
from config.logging_config import get_logger
from doc_translator.encoding import (
    GLOSSARY_MIME_TYPES,
    TRANSLATION_MIME_TYPES,
    read_upload,
)
from doc_translator.errors import (
    ConfigurationError,
    DocumentTranslatorError,
    FileTooLarge,
    GenerationFailed,
    RequestInProgress,
    UnsupportedFileType,
)
from doc_translator.languages import SUPPORTED_LANGUAGES
from doc_translator.orchestrator import SessionState, TranslationSession
from models.models import (
    InputFileInfo,
    KnowledgeBaseEdit,
    KnowledgeBaseEditResult,
    KnowledgeBaseInfo,
    KnowledgeBaseList,
    KnowledgeBaseSelect,
    LanguageSelection,
    LanguagesResponse,
)

logger = get_logger(__name__)

# 创建路由实例
router = APIRouter(prefix="/api/v1/document-translator")

# 创建SSE管理器实例
sse_manager = SSEManager()

_ERROR_STATUS = [
    (UnsupportedFileType, 415),
    (FileTooLarge, 413),
    (RequestInProgress, 409),
    (ConfigurationError, 500),
    (GenerationFailed, 502),
]


def get_session(request: Request) -> TranslationSession:
    """获取应用级的翻译会话."""
    return request.app.state.session


def to_http_exception(error: DocumentTranslatorError) -> HTTPException:
    for error_type, status_code in _ERROR_STATUS:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=error.message)
    return HTTPException(status_code=400, detail=error.message)


def _languages_response(session: TranslationSession) -> LanguagesResponse:
    return LanguagesResponse(
        languages=SUPPORTED_LANGUAGES,
        selection=LanguageSelection(**session.languages.as_dict()),
    )


def _knowledge_base_list(session: TranslationSession) -> KnowledgeBaseList:
    return KnowledgeBaseList(
        knowledge_bases=[kb.to_dict() for kb in session.knowledge_bases.list()],
        selected_id=session.knowledge_bases.selected_id,
    )


@router.get("/state")
async def get_state(session: TranslationSession = Depends(get_session)):
    """返回会话的可见状态."""
    return session.snapshot()


@router.get("/languages", response_model=LanguagesResponse)
async def list_languages(session: TranslationSession = Depends(get_session)):
    return _languages_response(session)


@router.put("/languages", response_model=LanguagesResponse)
async def set_languages(
    selection: LanguageSelection, session: TranslationSession = Depends(get_session)
):
    try:
        session.set_languages(selection.source, selection.target)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _languages_response(session)


@router.post("/languages/swap", response_model=LanguagesResponse)
async def swap_languages(session: TranslationSession = Depends(get_session)):
    session.swap_languages()
    return _languages_response(session)


@router.post("/input", response_model=InputFileInfo)
async def upload_input(
    file: UploadFile = File(...), session: TranslationSession = Depends(get_session)
):
    """
    上传待翻译文件（PDF或图片）

    Args:
        file: 上传的文件

    Returns:
        文件名和MIME类型
    """
    try:
        encoded = await read_upload(
            file, TRANSLATION_MIME_TYPES, settings.max_file_size
        )
    except DocumentTranslatorError as e:
        raise to_http_exception(e)
    session.set_input_file(encoded)
    return InputFileInfo(name=encoded.name, mime_type=encoded.mime_type)


@router.delete("/input", status_code=204)
async def clear_input(session: TranslationSession = Depends(get_session)):
    session.clear_input_file()
    return Response(status_code=204)


@router.get("/knowledge-bases", response_model=KnowledgeBaseList)
async def list_knowledge_bases(session: TranslationSession = Depends(get_session)):
    return _knowledge_base_list(session)


@router.put("/knowledge-bases/selected", response_model=KnowledgeBaseList)
async def select_knowledge_base(
    selection: KnowledgeBaseSelect, session: TranslationSession = Depends(get_session)
):
    """选择知识库，未知id不做任何修改."""
    session.knowledge_bases.select(selection.id)
    return _knowledge_base_list(session)


@router.put("/knowledge-bases/{kb_id}", response_model=KnowledgeBaseEditResult)
async def edit_knowledge_base(
    kb_id: str,
    edit: KnowledgeBaseEdit,
    session: TranslationSession = Depends(get_session),
):
    entry = session.knowledge_bases.get(kb_id)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"Unknown knowledge base: {kb_id}")
    updated = session.knowledge_bases.edit(kb_id, edit.content)
    return KnowledgeBaseEditResult(updated=updated, knowledge_base=entry.to_dict())


@router.post("/knowledge-bases/generate", response_model=KnowledgeBaseInfo)
async def generate_knowledge_base(
    file: UploadFile = File(...), session: TranslationSession = Depends(get_session)
):
    """
    从参考文件生成知识库

    Args:
        file: 参考文件（PDF、DOCX、TXT或图片）

    Returns:
        新添加并已选中的知识库
    """
    try:
        encoded = await read_upload(file, GLOSSARY_MIME_TYPES, settings.max_file_size)
        entry = await session.generate_glossary(encoded)
    except DocumentTranslatorError as e:
        raise to_http_exception(e)
    return entry.to_dict()


@router.post("/translate")
async def translate_document(session: TranslationSession = Depends(get_session)):
    """
    翻译已上传的文件并返回SSE流式响应

    Returns:
    SSE消息格式：
       - 状态消息：data: {"type": "state", "state": "translating", "message": "..."}
       - 文件内容消息：data: {"type": "file", "filename": "xxx.docx", "content": "base64_encoded_content"}
       - 完成消息：data: {"type": "complete", "message": "Translation complete"}
       - 错误消息：data: {"type": "error", "message": "错误详情"}
    """
    task_id = str(uuid.uuid4())
    return StreamingResponse(
        translate_stream(task_id, session), media_type="text/event-stream"
    )


async def translate_stream(task_id: str, session: TranslationSession):
    """翻译文件并流式返回结果"""
    # 注册客户端连接，确保所有消息都能被发送
    queue = await sse_manager.register_client(task_id)

    async def translation_task():
        try:
            if session.input_file is not None:
                await sse_manager.send_state(
                    task_id, SessionState.TRANSLATING.value, "Translating..."
                )
            artifact = await session.translate()
            await sse_manager.send_file(task_id, artifact.filename, artifact.content)
            await sse_manager.send_complete(task_id, "Translation complete")
        except Exception as e:
            await sse_manager.send_error(task_id, str(e) or "An unknown error occurred.")

    task = asyncio.create_task(translation_task())

    try:
        while True:
            message = await queue.get()
            yield message
            queue.task_done()
            if sse_manager.is_final(message):
                break
        await task
    finally:
        await sse_manager.unregister_client(task_id)


@router.get("/download")
async def download_translation(session: TranslationSession = Depends(get_session)):
    """下载最近一次翻译结果."""
    artifact = session.download()
    if artifact is None:
        raise HTTPException(status_code=404, detail="No translated document available.")
    logger.info(f"Downloading {artifact.filename}")
    return Response(
        content=artifact.content,
        media_type=artifact.mime_type,
        headers={
            "Content-Disposition": f"attachment; filename*=UTF-8''{quote(artifact.filename)}"
        },
    )
