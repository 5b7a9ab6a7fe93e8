"""Document parsing."""

from .yaml_parser import DocumentContent, DocumentLoader, document_loader

__all__ = ["DocumentContent", "DocumentLoader", "document_loader"]
