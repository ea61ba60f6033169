"""Glossary-constrained document translation request."""

from typing import Optional

from config.logging_config import get_logger
from doc_translator.encoding import EncodedFile
from doc_translator.errors import ConfigurationError, MissingInput, TranslationFailed
from doc_translator.inference_client import MISSING_API_KEY_MESSAGE, InferenceClient
from doc_translator.prompts import build_translation_prompt

logger = get_logger(__name__)


class TranslationRequester:
    """Sends one translation request per document."""

    def __init__(self, client: Optional[InferenceClient]):
        self.client = client

    async def translate(
        self,
        file: Optional[EncodedFile],
        source_lang: str,
        target_lang: str,
        glossary: str = "",
    ) -> str:
        """
        Extract and translate all text in the document.

        The response is returned exactly as the service produced it,
        surrounding whitespace included.
        """
        if file is None:
            raise MissingInput("A file must be provided for translation.")
        if self.client is None:
            raise ConfigurationError(MISSING_API_KEY_MESSAGE)
        prompt = build_translation_prompt(source_lang, target_lang, glossary)
        logger.info(f"Translating {file.name} from {source_lang} to {target_lang}")
        try:
            return await self.client.generate_content(file, prompt)
        except Exception as e:
            logger.error(f"Translation failed for {file.name}: {e}")
            raise TranslationFailed(str(e)) from e
