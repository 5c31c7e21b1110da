from .form_state import FormState
from .serializer import escape_xml, format_timestamp, render, serialize
from .spec import LANGUAGES, TONES, PromptSpecification

__all__ = [
    "FormState",
    "LANGUAGES",
    "PromptSpecification",
    "TONES",
    "escape_xml",
    "format_timestamp",
    "render",
    "serialize",
]
