# llmwire/types/embeddings.py
import logging

from pydantic import BaseModel, ConfigDict, ValidationError

from llmwire.codecs.exceptions import EmbeddingDecodeError

logger = logging.getLogger(__name__)

__all__ = ("EmbeddingObject",)


class EmbeddingObject(BaseModel):
    """An embedding vector returned by the embeddings endpoint.

    See https://platform.openai.com/docs/api-reference/embeddings/object.
    Unknown keys are ignored so newer API responses still decode.
    """
    model_config = ConfigDict(extra="ignore", frozen=True)

    #: The object type, which is always "embedding".
    object: str
    #: The embedding vector. Its length depends on the model.
    embedding: list[float]
    #: The index of the embedding in the list of embeddings.
    index: int

    @property
    def dimensions(self) -> int:
        return len(self.embedding)

    @classmethod
    def from_wire(cls, data: object) -> "EmbeddingObject":
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            logger.debug("embedding.decode_failed", exc_info=True)
            raise EmbeddingDecodeError(f"Invalid embedding object: {e.error_count()} validation error(s)") from e

    @classmethod
    def from_json(cls, data: str | bytes) -> "EmbeddingObject":
        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            logger.debug("embedding.decode_failed", exc_info=True)
            raise EmbeddingDecodeError(f"Invalid embedding object: {e.error_count()} validation error(s)") from e
