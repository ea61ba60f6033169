"""文档翻译服务的异常定义."""


class DocumentTranslatorError(Exception):
    """所有翻译服务异常的基类."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UnsupportedFileType(DocumentTranslatorError):
    """上传文件的MIME类型不在允许列表中."""

    def __init__(self, mime_type: str, message: str):
        super().__init__(message)
        self.mime_type = mime_type


class MissingInput(DocumentTranslatorError):
    """请求翻译时没有上传文件."""


class ConfigurationError(DocumentTranslatorError):
    """缺少API密钥等必要配置."""


class GenerationFailed(DocumentTranslatorError):
    """知识库生成请求失败."""


class TranslationFailed(DocumentTranslatorError):
    """翻译请求失败."""


class RequestInProgress(DocumentTranslatorError):
    """同类请求仍在进行中."""


class FileTooLarge(DocumentTranslatorError):
    """上传文件超过大小限制."""
