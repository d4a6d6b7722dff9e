from .content_meta import ContentMeta
from .content_record import ContentRecord
from .option import Option
from .translation import TranslationEdge, TranslationStatus

__all__ = [
    "ContentMeta",
    "ContentRecord",
    "Option",
    "TranslationEdge",
    "TranslationStatus",
]
