"""支持的语言列表及源/目标语言选择."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List


class LanguageCode(str, Enum):
    """支持的语言代码."""

    EN = "en"
    ES = "es"
    FR = "fr"
    DE = "de"
    JA = "ja"
    KO = "ko"
    PT = "pt"


SUPPORTED_LANGUAGES: List[Dict[str, str]] = [
    {"code": LanguageCode.EN.value, "name": "English"},
    {"code": LanguageCode.ES.value, "name": "Spanish"},
    {"code": LanguageCode.FR.value, "name": "French"},
    {"code": LanguageCode.DE.value, "name": "German"},
    {"code": LanguageCode.JA.value, "name": "Japanese"},
    {"code": LanguageCode.KO.value, "name": "Korean"},
    {"code": LanguageCode.PT.value, "name": "Portuguese"},
]

_LANGUAGE_NAMES = {lang["code"]: lang["name"] for lang in SUPPORTED_LANGUAGES}


def get_language_name(code: str) -> str:
    """返回语言的显示名称，未知代码原样返回."""
    return _LANGUAGE_NAMES.get(code, code)


def is_supported(code: str) -> bool:
    return code in _LANGUAGE_NAMES


@dataclass
class LanguagePair:
    """当前选择的源语言和目标语言，两者可以相同."""

    source: str = LanguageCode.EN.value
    target: str = LanguageCode.ES.value

    def __post_init__(self):
        self.set(self.source, self.target)

    def set(self, source: str, target: str) -> None:
        for code in (source, target):
            if not is_supported(code):
                raise ValueError(f"Unsupported language code: {code}")
        self.source = source
        self.target = target

    def swap(self) -> None:
        self.source, self.target = self.target, self.source

    def as_dict(self) -> Dict[str, str]:
        return {"source": self.source, "target": self.target}
