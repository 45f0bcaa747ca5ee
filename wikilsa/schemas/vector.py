import numpy as np
from pydantic import BaseModel, Field, model_validator


class SparseVector(BaseModel):
    size: int = Field(..., ge=0, description="Dimension of the vector space")
    indices: list[int] = Field(
        default=[], description="Column indices of the non-zero entries"
    )
    values: list[float] = Field(
        default=[], description="Weights of the non-zero entries"
    )

    @model_validator(mode="after")
    def _check_entries(self) -> "SparseVector":
        if len(self.indices) != len(self.values):
            raise ValueError("indices and values must have the same length")
        if len(set(self.indices)) != len(self.indices):
            raise ValueError("indices must be unique")
        for idx in self.indices:
            if not 0 <= idx < self.size:
                raise ValueError(f"index {idx} out of range for size {self.size}")
        return self

    def to_dense(self) -> np.ndarray:
        dense = np.zeros(self.size, dtype=np.float64)
        dense[self.indices] = self.values
        return dense
