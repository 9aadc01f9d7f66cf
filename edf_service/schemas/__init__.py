from .edf import EdfMetadataDescriptor

__all__ = ["EdfMetadataDescriptor"]
