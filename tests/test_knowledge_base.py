import unittest

from doc_translator.knowledge_base import (
    DEFAULT_KNOWLEDGE_BASE_CONTENT,
    DEFAULT_KNOWLEDGE_BASE_ID,
    KnowledgeBaseStore,
)


class TestKnowledgeBaseStore(unittest.TestCase):
    def setUp(self):
        self.store = KnowledgeBaseStore()

    def test_default_entry_first_and_selected(self):
        entries = self.store.list()
        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0].id, DEFAULT_KNOWLEDGE_BASE_ID)
        self.assertTrue(entries[0].read_only)
        self.assertEqual(self.store.selected_content, DEFAULT_KNOWLEDGE_BASE_CONTENT)

    def test_default_entry_cannot_be_edited(self):
        self.store.select(DEFAULT_KNOWLEDGE_BASE_ID)
        self.assertFalse(self.store.edit(DEFAULT_KNOWLEDGE_BASE_ID, "changed"))
        self.assertEqual(
            self.store.get(DEFAULT_KNOWLEDGE_BASE_ID).content, DEFAULT_KNOWLEDGE_BASE_CONTENT
        )

    def test_edit_updates_only_target_entry(self):
        first = self.store.add("a.pdf", "first")
        second = self.store.add("b.pdf", "second")
        self.store.select(first.id)
        self.assertTrue(self.store.edit(first.id, "edited"))
        self.assertEqual(self.store.get(first.id).content, "edited")
        self.assertEqual(self.store.get(second.id).content, "second")
        self.assertEqual(
            self.store.get(DEFAULT_KNOWLEDGE_BASE_ID).content, DEFAULT_KNOWLEDGE_BASE_CONTENT
        )

    def test_add_appends_with_fresh_id_and_selects(self):
        first = self.store.add("terms.txt", "x")
        second = self.store.add("terms.txt", "y")
        self.assertNotEqual(first.id, second.id)
        self.assertEqual([kb.id for kb in self.store.list()],
                         [DEFAULT_KNOWLEDGE_BASE_ID, first.id, second.id])
        self.assertEqual(self.store.selected_id, second.id)

    def test_select_unknown_id_is_noop(self):
        entry = self.store.add("terms.txt", "x")
        self.store.select("missing")
        self.assertEqual(self.store.selected_id, entry.id)


if __name__ == "__main__":
    unittest.main()
