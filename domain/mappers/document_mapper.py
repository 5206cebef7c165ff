"""
Document mappers.
Handles transformation between Appwrite SDK responses and domain schemas.
"""

from typing import Any, Dict, List, Mapping, Type, TypeVar

from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=BaseModel)


class DocumentMapper:
    """Mapper from SDK response dicts to response schemas."""

    @staticmethod
    def to_model(model: Type[ModelType], document: Mapping[str, Any]) -> ModelType:
        """
        Validate one document (or file) record into *model*.

        Args:
            model: Response schema class
            document: Record as returned by the SDK, with ``$``-prefixed metadata

        Returns:
            Instance of *model*
        """
        return model.model_validate(dict(document))

    @staticmethod
    def documents(response: Mapping[str, Any]) -> List[Dict[str, Any]]:
        """Raw documents of a ``list_documents`` response."""
        return list(response.get("documents") or [])

    @staticmethod
    def files(response: Mapping[str, Any]) -> List[Dict[str, Any]]:
        """Raw files of a ``list_files`` response."""
        return list(response.get("files") or [])

    @staticmethod
    def to_models(model: Type[ModelType], response: Mapping[str, Any]) -> List[ModelType]:
        """Validate every document of a ``list_documents`` response into *model*."""
        return [
            DocumentMapper.to_model(model, doc)
            for doc in DocumentMapper.documents(response)
        ]
