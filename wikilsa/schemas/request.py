from pydantic import BaseModel, Field
from typing import Literal, Optional
from wikilsa.core import config


class PipelineRequest(BaseModel):
    dump_path: str = Field(..., description="Path to the Wikipedia XML dump")
    stop_words_path: Optional[str] = Field(
        default=config.STOP_WORDS_PATH,
        description="File with one stop word per line, None to keep every word",
    )
    num_terms: int = Field(
        default=config.NUM_TERMS,
        gt=0,
        description="Maximum number of terms kept as matrix columns",
    )
    doc_freqs_path: str = Field(
        default=config.DOC_FREQS_PATH,
        description="Destination of the term/document-frequency report",
    )
    word_process_method: Literal["lemmatize", "stem"] = Field(
        default=config.WORD_PROCESS_METHOD,
        description="How words are normalized into terms",
    )
    scheduler: str = Field(
        default=config.DASK_SCHEDULER, description="The dask scheduler to run on"
    )
