"""
Serializers between document instances and plain MongoDB documents.
"""
from mongo_mapper.serializers.to_document import to_document
from mongo_mapper.serializers.to_model import to_model

__all__ = ["to_document", "to_model"]
