"""API数据模型定义."""

from pydantic import BaseModel
from typing import List


class LanguageInfo(BaseModel):
    """语言信息."""

    code: str
    name: str


class LanguageSelection(BaseModel):
    """源语言和目标语言选择."""

    source: str
    target: str


class LanguagesResponse(BaseModel):
    """支持的语言列表和当前选择."""

    languages: List[LanguageInfo]
    selection: LanguageSelection


class KnowledgeBaseInfo(BaseModel):
    """知识库数据模型."""

    id: str
    name: str
    content: str
    read_only: bool = False


class KnowledgeBaseList(BaseModel):
    """知识库列表."""

    knowledge_bases: List[KnowledgeBaseInfo]
    selected_id: str


class KnowledgeBaseSelect(BaseModel):
    """选择知识库请求."""

    id: str


class KnowledgeBaseEdit(BaseModel):
    """修改知识库内容请求."""

    content: str


class KnowledgeBaseEditResult(BaseModel):
    """修改结果，只读知识库的修改会被忽略."""

    updated: bool
    knowledge_base: KnowledgeBaseInfo


class InputFileInfo(BaseModel):
    """已上传的待翻译文件."""

    name: str
    mime_type: str


class SSEMessageType:
    """SSE消息类型常量."""

    STATE = "state"
    COMPLETE = "complete"
    ERROR = "error"
    FILE = "file"
