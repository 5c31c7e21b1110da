from .clipboard import write_to_clipboard
from .download import XML_MIME_TYPE, offer_download

__all__ = ["XML_MIME_TYPE", "offer_download", "write_to_clipboard"]
