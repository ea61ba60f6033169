import io
import unittest

from docx import Document

from doc_translator.document_packager import (
    DOCX_MIME_TYPE,
    TranslatedArtifact,
    build_output_filename,
    package_text,
)


class TestDocumentPackager(unittest.TestCase):
    def test_output_filename(self):
        self.assertEqual(build_output_filename("report.pdf", "es"), "report_es_translation.docx")
        self.assertEqual(build_output_filename("readme", "es"), "readme_es_translation.docx")
        self.assertEqual(
            build_output_filename("scan.v2.png", "ja"), "scan.v2_ja_translation.docx"
        )

    def test_each_line_becomes_a_paragraph(self):
        content = package_text("Hola\nMundo")
        paragraphs = [p.text for p in Document(io.BytesIO(content)).paragraphs]
        self.assertEqual(paragraphs, ["Hola", "Mundo"])

    def test_blank_lines_are_kept(self):
        content = package_text("Uno\n\nDos\n")
        paragraphs = [p.text for p in Document(io.BytesIO(content)).paragraphs]
        self.assertEqual(paragraphs, ["Uno", "", "Dos", ""])

    def test_artifact_defaults_to_docx(self):
        artifact = TranslatedArtifact(filename="a.docx", content=b"")
        self.assertEqual(artifact.mime_type, DOCX_MIME_TYPE)


if __name__ == "__main__":
    unittest.main()
