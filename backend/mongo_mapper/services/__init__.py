"""
Services - repository and mapped cursor.
"""
from mongo_mapper.services.cursor import DocumentCursor
from mongo_mapper.services.repository import Repository

__all__ = ["DocumentCursor", "Repository"]
