"""上传文件编码工具 - 将用户选择的文件转换为 (名称, MIME类型, base64数据) 记录."""

import base64
from dataclasses import dataclass
from typing import Iterable, Optional

from fastapi import UploadFile

from config.logging_config import get_logger
from doc_translator.errors import FileTooLarge, UnsupportedFileType

logger = get_logger(__name__)

PDF_MIME_TYPE = "application/pdf"
TEXT_MIME_TYPE = "text/plain"
DOCX_MIME_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)
IMAGE_MIME_TYPES = ("image/jpeg", "image/png", "image/webp", "image/gif")

# 待翻译文档允许的类型
TRANSLATION_MIME_TYPES = IMAGE_MIME_TYPES + (PDF_MIME_TYPE,)
# 知识库来源文件额外允许纯文本和Word文档
GLOSSARY_MIME_TYPES = TRANSLATION_MIME_TYPES + (TEXT_MIME_TYPE, DOCX_MIME_TYPE)

TRANSLATION_UNSUPPORTED_MESSAGE = (
    "Unsupported file type. Please upload a PDF or an image file "
    "(JPEG, PNG, WEBP, GIF)."
)
GLOSSARY_UNSUPPORTED_MESSAGE = (
    "Unsupported file type for knowledge base generation. "
    "Please use PDF, DOCX, TXT or an image file."
)


@dataclass(frozen=True)
class EncodedFile:
    """一个上传文件的内存表示."""

    name: str
    mime_type: str
    data: str  # base64，不含 data URI 前缀

    @property
    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.data)


def strip_data_uri(value: str) -> str:
    """去掉 "data:<mime>;base64," 前缀（如果存在）."""
    if value.startswith("data:") and "," in value:
        return value.split(",", 1)[1]
    return value


def unsupported_message(allowed: Iterable[str]) -> str:
    if set(allowed) == set(TRANSLATION_MIME_TYPES):
        return TRANSLATION_UNSUPPORTED_MESSAGE
    return GLOSSARY_UNSUPPORTED_MESSAGE


def check_mime_type(mime_type: Optional[str], allowed: Iterable[str]) -> str:
    """
    校验MIME类型.

    Args:
        mime_type: 文件的MIME类型
        allowed: 当前场景允许的MIME类型

    Returns:
        校验通过的MIME类型

    Raises:
        UnsupportedFileType: 类型不在允许列表中
    """
    allowed = tuple(allowed)
    if not mime_type or mime_type not in allowed:
        raise UnsupportedFileType(mime_type or "", unsupported_message(allowed))
    return mime_type


def encode_file(
    name: str, mime_type: Optional[str], content: bytes, allowed: Iterable[str]
) -> EncodedFile:
    """
    将文件内容编码为 EncodedFile.

    Args:
        name: 原始文件名
        mime_type: 文件的MIME类型
        content: 文件的完整二进制内容
        allowed: 当前场景允许的MIME类型

    Returns:
        编码后的文件记录
    """
    mime_type = check_mime_type(mime_type, allowed)
    data = strip_data_uri(base64.b64encode(content).decode("ascii"))
    return EncodedFile(name=name, mime_type=mime_type, data=data)


async def read_upload(
    upload: UploadFile, allowed: Iterable[str], max_size: Optional[int] = None
) -> EncodedFile:
    """读取上传文件并编码，类型不符时不读取文件内容."""
    allowed = tuple(allowed)
    name = upload.filename or "upload"
    try:
        check_mime_type(upload.content_type, allowed)
    except UnsupportedFileType:
        logger.warning(f"Rejected upload {name} with type {upload.content_type}")
        raise
    content = await upload.read()
    if max_size is not None and len(content) > max_size:
        raise FileTooLarge(
            f"File {name} is too large ({len(content)} bytes, limit {max_size})."
        )
    encoded = encode_file(name, upload.content_type, content, allowed)
    logger.info(f"Accepted upload {name} ({encoded.mime_type}, {len(content)} bytes)")
    return encoded
