"""知识库生成器 - 从参考文件中提取术语并生成术语表模板."""

from typing import Optional

from config.logging_config import get_logger
from doc_translator.encoding import EncodedFile
from doc_translator.errors import ConfigurationError, GenerationFailed
from doc_translator.inference_client import MISSING_API_KEY_MESSAGE, InferenceClient
from doc_translator.prompts import GLOSSARY_PROMPT

logger = get_logger(__name__)


class GlossarySynthesizer:
    """知识库生成器."""

    def __init__(self, client: Optional[InferenceClient]):
        self.client = client

    async def generate(self, file: EncodedFile) -> str:
        """
        从文件生成术语表.

        Args:
            file: 参考文件

        Returns:
            去除首尾空白后的术语表文本，可能为空字符串

        Raises:
            ConfigurationError: 未配置API密钥
            GenerationFailed: 请求失败
        """
        if self.client is None:
            raise ConfigurationError(MISSING_API_KEY_MESSAGE)
        logger.info(f"Generating knowledge base from {file.name}")
        try:
            text = await self.client.generate_content(file, GLOSSARY_PROMPT)
        except Exception as e:
            logger.error(f"Knowledge base generation failed for {file.name}: {e}")
            raise GenerationFailed(str(e)) from e
        return text.strip()
