"""AsyncOpenAI multimodal inference client."""

import io
from typing import Any, Dict, List, Optional

from docx import Document
from openai import AsyncOpenAI

from config.logging_config import get_logger
from doc_translator.encoding import (
    DOCX_MIME_TYPE,
    TEXT_MIME_TYPE,
    EncodedFile,
)
from doc_translator.errors import ConfigurationError

logger = get_logger(__name__)

MISSING_API_KEY_MESSAGE = "OPENAI_API_KEY environment variable is not set."


def extract_docx_text(content: bytes) -> str:
    """Return the paragraph text of a DOCX file, one paragraph per line."""
    document = Document(io.BytesIO(content))
    return "\n".join(paragraph.text for paragraph in document.paragraphs)


def build_file_part(file: EncodedFile) -> Dict[str, Any]:
    """
    Build the chat-completions content part carrying the uploaded file.

    Images travel as data URIs, PDFs as inline file data. Plain text and
    DOCX have no inline file form on the chat API, so their text is sent.
    """
    if file.is_image:
        return {"type": "image_url", "image_url": {"url": file.data_uri}}
    if file.mime_type == TEXT_MIME_TYPE:
        return {"type": "text", "text": file.to_bytes().decode("utf-8", "replace")}
    if file.mime_type == DOCX_MIME_TYPE:
        return {"type": "text", "text": extract_docx_text(file.to_bytes())}
    return {
        "type": "file",
        "file": {"filename": file.name, "file_data": file.data_uri},
    }


class InferenceClient:
    """Issues one "generate content" request per call: one file part, one text part."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        base_url: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        if not api_key:
            raise ConfigurationError(MISSING_API_KEY_MESSAGE)
        self.model = model
        # 不设置超时和重试
        self.client = client or AsyncOpenAI(
            api_key=api_key, base_url=base_url, timeout=None, max_retries=0
        )

    @classmethod
    def from_settings(cls, settings) -> "InferenceClient":
        return cls(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            base_url=settings.openai_base_url,
        )

    def build_messages(self, file: EncodedFile, prompt: str) -> List[Dict[str, Any]]:
        return [
            {
                "role": "user",
                "content": [build_file_part(file), {"type": "text", "text": prompt}],
            }
        ]

    async def generate_content(self, file: EncodedFile, prompt: str) -> str:
        logger.debug(f"Sending {file.name} ({file.mime_type}) to {self.model}")
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=self.build_messages(file, prompt),
        )
        return response.choices[0].message.content or ""
