"""知识库管理 - 管理会话内的术语表集合."""

import uuid
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional

from config.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_KNOWLEDGE_BASE_ID = "default"

DEFAULT_KNOWLEDGE_BASE_CONTENT = """- "WebApp" should be translated as "Aplicación Web".
- "Frontend" should be translated as "Interfaz de Usuario".
- "Backend" should be translated as "Servidor".
- "API Key" should be translated as "Clave de API".
- "Knowledge Base" should be translated as "Base de Conocimiento"."""


@dataclass
class KnowledgeBase:
    """术语表."""

    id: str
    name: str
    content: str
    read_only: bool = False

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def default_knowledge_base() -> KnowledgeBase:
    return KnowledgeBase(
        id=DEFAULT_KNOWLEDGE_BASE_ID,
        name="Default",
        content=DEFAULT_KNOWLEDGE_BASE_CONTENT,
        read_only=True,
    )


class KnowledgeBaseStore:
    """按添加顺序保存术语表，默认术语表始终在第一位且只读."""

    def __init__(self):
        default = default_knowledge_base()
        self._entries: Dict[str, KnowledgeBase] = {default.id: default}
        self._selected_id = default.id

    def list(self) -> List[KnowledgeBase]:
        return list(self._entries.values())

    def get(self, kb_id: str) -> Optional[KnowledgeBase]:
        return self._entries.get(kb_id)

    @property
    def selected_id(self) -> str:
        return self._selected_id

    @property
    def selected(self) -> KnowledgeBase:
        return self._entries[self._selected_id]

    @property
    def selected_content(self) -> str:
        return self.selected.content

    def select(self, kb_id: str) -> None:
        """选择术语表，未知id时不做任何操作."""
        if kb_id in self._entries:
            self._selected_id = kb_id

    def edit(self, kb_id: str, content: str) -> bool:
        """
        修改术语表内容.

        Args:
            kb_id: 术语表id
            content: 新内容

        Returns:
            是否实际修改；只读或未知的术语表返回False
        """
        entry = self._entries.get(kb_id)
        if entry is None or entry.read_only:
            return False
        entry.content = content
        return True

    def add(self, name: str, content: str) -> KnowledgeBase:
        """添加新术语表并将其设为当前选择."""
        kb_id = f"kb-{uuid.uuid4().hex}"
        while kb_id in self._entries:
            kb_id = f"kb-{uuid.uuid4().hex}"
        entry = KnowledgeBase(id=kb_id, name=name, content=content)
        self._entries[kb_id] = entry
        self._selected_id = kb_id
        logger.info(f"Added knowledge base {kb_id} ({name})")
        return entry
