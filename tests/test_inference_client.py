import base64
import io
import unittest
from types import SimpleNamespace
from unittest.mock import AsyncMock

from docx import Document

from doc_translator.encoding import DOCX_MIME_TYPE, EncodedFile
from doc_translator.errors import ConfigurationError
from doc_translator.inference_client import (
    MISSING_API_KEY_MESSAGE,
    InferenceClient,
    build_file_part,
)


def _encoded(name, mime_type, content):
    return EncodedFile(name, mime_type, base64.b64encode(content).decode())


def _fake_openai(content):
    response = SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )
    create = AsyncMock(return_value=response)
    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


class TestBuildFilePart(unittest.TestCase):
    def test_image_is_sent_as_data_uri(self):
        file = _encoded("a.png", "image/png", b"png")
        self.assertEqual(
            build_file_part(file),
            {"type": "image_url", "image_url": {"url": file.data_uri}},
        )

    def test_pdf_is_sent_as_inline_file(self):
        file = _encoded("a.pdf", "application/pdf", b"%PDF-1.4")
        self.assertEqual(
            build_file_part(file),
            {"type": "file", "file": {"filename": "a.pdf", "file_data": file.data_uri}},
        )

    def test_text_sources_are_sent_as_text(self):
        file = _encoded("terms.txt", "text/plain", "Término".encode("utf-8"))
        self.assertEqual(build_file_part(file), {"type": "text", "text": "Término"})

        document = Document()
        document.add_paragraph("Backend")
        document.add_paragraph("Frontend")
        buffer = io.BytesIO()
        document.save(buffer)
        docx_file = _encoded("terms.docx", DOCX_MIME_TYPE, buffer.getvalue())
        self.assertEqual(
            build_file_part(docx_file), {"type": "text", "text": "Backend\nFrontend"}
        )


class TestInferenceClient(unittest.IsolatedAsyncioTestCase):
    def test_missing_key_raises(self):
        with self.assertRaises(ConfigurationError) as ctx:
            InferenceClient(api_key="", model="gpt-4o")
        self.assertEqual(ctx.exception.message, MISSING_API_KEY_MESSAGE)

    def test_from_settings_without_key(self):
        settings = SimpleNamespace(
            openai_api_key=None, openai_model="gpt-4o", openai_base_url=None
        )
        with self.assertRaises(ConfigurationError):
            InferenceClient.from_settings(settings)

    async def test_one_file_part_and_one_text_part(self):
        openai_client = _fake_openai("translated")
        client = InferenceClient(api_key="sk-test", model="gpt-4o", client=openai_client)
        file = _encoded("a.jpg", "image/jpeg", b"jpg")
        result = await client.generate_content(file, "Translate this")
        self.assertEqual(result, "translated")
        kwargs = openai_client.chat.completions.create.await_args.kwargs
        self.assertEqual(kwargs["model"], "gpt-4o")
        (message,) = kwargs["messages"]
        self.assertEqual(message["role"], "user")
        self.assertEqual(len(message["content"]), 2)
        self.assertEqual(message["content"][0]["type"], "image_url")
        self.assertEqual(message["content"][1], {"type": "text", "text": "Translate this"})

    async def test_empty_content_becomes_empty_string(self):
        client = InferenceClient(api_key="sk-test", model="m", client=_fake_openai(None))
        file = _encoded("a.png", "image/png", b"x")
        self.assertEqual(await client.generate_content(file, "p"), "")


if __name__ == "__main__":
    unittest.main()
