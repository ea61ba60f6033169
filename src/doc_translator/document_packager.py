"""将翻译文本打包为 Word (DOCX) 文档."""

import io
from dataclasses import dataclass
from typing import List

from docx import Document

from doc_translator.encoding import DOCX_MIME_TYPE

DOCX_EXTENSION = "docx"


@dataclass(frozen=True)
class TranslatedArtifact:
    """翻译结果文件."""

    filename: str
    content: bytes
    mime_type: str = DOCX_MIME_TYPE


def text_to_paragraphs(text: str) -> List[str]:
    return text.split("\n")


def package_text(text: str) -> bytes:
    """每行生成一个段落，不添加任何样式或标题."""
    document = Document()
    for line in text_to_paragraphs(text):
        document.add_paragraph(line)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def build_output_filename(name: str, target_lang: str) -> str:
    """
    生成输出文件名.

    Args:
        name: 原始文件名
        target_lang: 目标语言代码

    Returns:
        形如 "{原文件名去掉扩展名}_{目标语言}_translation.docx" 的文件名
    """
    base_name = name.rsplit(".", 1)[0] if "." in name else ""
    base_name = base_name or name
    return f"{base_name}_{target_lang}_translation.{DOCX_EXTENSION}"
