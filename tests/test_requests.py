import unittest

from fakes import FakeInferenceClient

from doc_translator.encoding import EncodedFile
from doc_translator.errors import (
    ConfigurationError,
    GenerationFailed,
    MissingInput,
    TranslationFailed,
)
from doc_translator.glossary_synthesizer import GlossarySynthesizer
from doc_translator.prompts import GLOSSARY_PROMPT, NO_KNOWLEDGE_BASE_TEXT
from doc_translator.translation_requester import TranslationRequester

SAMPLE = EncodedFile(name="report.pdf", mime_type="application/pdf", data="JVBERi0=")


class TestGlossarySynthesizer(unittest.IsolatedAsyncioTestCase):
    async def test_sends_file_with_glossary_prompt_and_trims(self):
        client = FakeInferenceClient(response='\n- "API" should be translated as "API"\n  ')
        result = await GlossarySynthesizer(client).generate(SAMPLE)
        self.assertEqual(result, '- "API" should be translated as "API"')
        self.assertEqual(client.calls, [(SAMPLE, GLOSSARY_PROMPT)])
        self.assertIn("up to 20 key terms", GLOSSARY_PROMPT)

    async def test_failure_is_wrapped(self):
        client = FakeInferenceClient(error=RuntimeError("quota exceeded"))
        with self.assertRaises(GenerationFailed) as ctx:
            await GlossarySynthesizer(client).generate(SAMPLE)
        self.assertEqual(ctx.exception.message, "quota exceeded")

    async def test_missing_client_is_configuration_error(self):
        with self.assertRaises(ConfigurationError):
            await GlossarySynthesizer(None).generate(SAMPLE)


class TestTranslationRequester(unittest.IsolatedAsyncioTestCase):
    async def test_prompt_names_languages_and_embeds_glossary(self):
        client = FakeInferenceClient(response="  Hola\nMundo\n")
        glossary = '- "WebApp" should be translated as "Aplicación Web".'
        result = await TranslationRequester(client).translate(SAMPLE, "en", "es", glossary)
        # 翻译结果不做trim
        self.assertEqual(result, "  Hola\nMundo\n")
        file, prompt = client.calls[0]
        self.assertIs(file, SAMPLE)
        self.assertIn("from English to Spanish", prompt)
        self.assertIn(glossary, prompt)
        self.assertIn("MUST use its corresponding translation", prompt)
        self.assertIn("Output ONLY the final, translated text", prompt)

    async def test_empty_glossary_and_unknown_code(self):
        client = FakeInferenceClient(response="ok")
        await TranslationRequester(client).translate(SAMPLE, "en", "xx", "")
        prompt = client.calls[0][1]
        self.assertIn(NO_KNOWLEDGE_BASE_TEXT, prompt)
        self.assertIn("from English to xx", prompt)

    async def test_missing_file(self):
        client = FakeInferenceClient(response="ok")
        with self.assertRaises(MissingInput):
            await TranslationRequester(client).translate(None, "en", "es")
        self.assertEqual(client.calls, [])

    async def test_missing_client_is_configuration_error(self):
        with self.assertRaises(ConfigurationError):
            await TranslationRequester(None).translate(SAMPLE, "en", "es")

    async def test_failure_is_wrapped(self):
        client = FakeInferenceClient(error=ConnectionError("connection reset"))
        with self.assertRaises(TranslationFailed) as ctx:
            await TranslationRequester(client).translate(SAMPLE, "en", "es")
        self.assertEqual(str(ctx.exception), "connection reset")


if __name__ == "__main__":
    unittest.main()
