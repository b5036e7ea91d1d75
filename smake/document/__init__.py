from smake.document.loader import load_document, parse_document
from smake.document.models import Tag

__all__ = ["Tag", "load_document", "parse_document"]
