from pydantic import BaseModel, ConfigDict, Field


class TermTables(BaseModel):
    """Read-only lookup tables shared by every vector assembly task."""

    model_config = ConfigDict(frozen=True)

    idfs: dict[str, float] = Field(
        ..., description="Inverse document frequency of each vocabulary term"
    )
    term_ids: dict[str, int] = Field(
        ..., description="Column index of each vocabulary term"
    )

    @property
    def num_terms(self) -> int:
        return len(self.term_ids)
