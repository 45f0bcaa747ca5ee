from pydantic import BaseModel, Field
from typing import Literal
from .vector import SparseVector


class TermDocumentMatrix(BaseModel):
    titles: list[str] = Field(..., description="Title of the document of each row")
    vectors: list[SparseVector] = Field(
        ..., description="TF-IDF weighted row vector of each document"
    )
    terms: dict[int, str] = Field(..., description="Term labelling each column")


class PipelineResponse(BaseModel):
    status: Literal["completed", "failed"] = Field(
        ..., description="Outcome of the pipeline run"
    )
    message: str = Field(..., description="Detailed message about the run")
    num_docs: int = Field(default=0, description="Number of documents vectorized")
    num_terms: int = Field(default=0, description="Size of the selected vocabulary")
