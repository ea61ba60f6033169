"""翻译会话 - 按用户操作编排知识库生成、翻译和下载."""

from enum import Enum
from typing import Any, Dict, Optional

from config.logging_config import get_logger
from doc_translator.document_packager import (
    TranslatedArtifact,
    build_output_filename,
    package_text,
)
from doc_translator.encoding import EncodedFile
from doc_translator.errors import MissingInput, RequestInProgress
from doc_translator.glossary_synthesizer import GlossarySynthesizer
from doc_translator.inference_client import InferenceClient
from doc_translator.knowledge_base import KnowledgeBase, KnowledgeBaseStore
from doc_translator.languages import LanguagePair
from doc_translator.translation_requester import TranslationRequester

logger = get_logger(__name__)

MISSING_INPUT_MESSAGE = "Please upload a document to translate."
GLOSSARY_FALLBACK_MESSAGE = (
    "AI could not generate a knowledge base from this file. "
    "You can add terms manually."
)


class SessionState(str, Enum):
    """会话状态."""

    IDLE = "idle"
    GENERATING_GLOSSARY = "generating_glossary"
    TRANSLATING = "translating"
    READY = "ready"
    FAILED = "failed"


class TranslationSession:
    """
    单个用户会话的内存状态.

    所有修改都发生在同一个事件循环上，两次挂起点之间不会被打断，因此不需要加锁。
    同类请求在进行中时，再次发起会抛出 RequestInProgress。
    """

    def __init__(
        self,
        synthesizer: GlossarySynthesizer,
        requester: TranslationRequester,
        knowledge_bases: Optional[KnowledgeBaseStore] = None,
        languages: Optional[LanguagePair] = None,
    ):
        self.synthesizer = synthesizer
        self.requester = requester
        self.knowledge_bases = knowledge_bases or KnowledgeBaseStore()
        self.languages = languages or LanguagePair()
        self.input_file: Optional[EncodedFile] = None
        self.artifact: Optional[TranslatedArtifact] = None
        self.error: Optional[str] = None
        self.state = SessionState.IDLE
        self._generating = False
        self._translating = False

    @classmethod
    def from_client(cls, client: Optional[InferenceClient]) -> "TranslationSession":
        return cls(GlossarySynthesizer(client), TranslationRequester(client))

    def set_input_file(self, file: EncodedFile) -> None:
        """新文件替换旧文件，并清除之前的结果和错误."""
        self.input_file = file
        self._reset_result()

    def clear_input_file(self) -> None:
        self.input_file = None
        self._reset_result()

    def swap_languages(self) -> None:
        self.languages.swap()

    def set_languages(self, source: str, target: str) -> None:
        self.languages.set(source, target)

    def download(self) -> Optional[TranslatedArtifact]:
        return self.artifact

    async def generate_glossary(self, file: EncodedFile) -> KnowledgeBase:
        """
        从参考文件生成知识库，成功后添加并选中.

        Args:
            file: 参考文件

        Returns:
            新添加的知识库

        Raises:
            RequestInProgress: 已有知识库生成请求在进行
            ConfigurationError, GenerationFailed: 生成失败，会话进入FAILED状态
        """
        if self._generating:
            raise RequestInProgress("A knowledge base is already being generated.")
        self._generating = True
        self.error = None
        self.artifact = None
        self.state = SessionState.GENERATING_GLOSSARY
        try:
            content = await self.synthesizer.generate(file)
        except Exception as e:
            logger.exception(f"知识库生成失败: {str(e)}")
            self._fail(str(e) or "Failed to generate knowledge base.")
            raise
        finally:
            self._generating = False
        entry = self.knowledge_bases.add(file.name, content or GLOSSARY_FALLBACK_MESSAGE)
        self.state = SessionState.IDLE
        return entry

    async def translate(self) -> TranslatedArtifact:
        """
        翻译当前上传的文件并打包为DOCX.

        请求进行期间保留之前的结果，请求失败时才清除。

        Returns:
            翻译结果文件

        Raises:
            MissingInput: 没有上传文件，不会发起远程请求
            RequestInProgress: 已有翻译请求在进行
        """
        if self.input_file is None:
            self._fail(MISSING_INPUT_MESSAGE)
            raise MissingInput(MISSING_INPUT_MESSAGE)
        if self._translating:
            raise RequestInProgress("A translation is already in progress.")
        self._translating = True
        file = self.input_file
        source, target = self.languages.source, self.languages.target
        glossary = self.knowledge_bases.selected_content or ""
        self.error = None
        self.state = SessionState.TRANSLATING
        try:
            text = await self.requester.translate(file, source, target, glossary)
            artifact = TranslatedArtifact(
                filename=build_output_filename(file.name, target),
                content=package_text(text),
            )
        except Exception as e:
            logger.exception(f"翻译失败: {str(e)}")
            self.artifact = None
            self._fail(str(e) or "An unknown error occurred.")
            raise
        finally:
            self._translating = False
        self.artifact = artifact
        self.state = SessionState.READY
        logger.info(f"翻译完成，结果文件: {artifact.filename}")
        return artifact

    def snapshot(self) -> Dict[str, Any]:
        """返回界面可见状态，loading / error / result 至多一项有值."""
        loading = self.state in (
            SessionState.GENERATING_GLOSSARY,
            SessionState.TRANSLATING,
        )
        error = self.error if not loading else None
        result = None
        if not loading and error is None and self.artifact is not None:
            result = {
                "filename": self.artifact.filename,
                "size": len(self.artifact.content),
            }
        return {
            "state": self.state.value,
            "loading": loading,
            "error": error,
            "result": result,
            "empty": not loading and error is None and result is None,
            "input_file": (
                {"name": self.input_file.name, "mime_type": self.input_file.mime_type}
                if self.input_file
                else None
            ),
            "languages": self.languages.as_dict(),
            "selected_knowledge_base_id": self.knowledge_bases.selected_id,
        }

    def _fail(self, message: str) -> None:
        self.error = message
        self.state = SessionState.FAILED

    def _reset_result(self) -> None:
        self.artifact = None
        self.error = None
        if self.state in (SessionState.READY, SessionState.FAILED):
            self.state = SessionState.IDLE
