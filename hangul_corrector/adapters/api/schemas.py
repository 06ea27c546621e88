# hangul_corrector/adapters/api/schemas.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from hangul_corrector.core.domain.models import SpeechLevel

# --- Pydantic Schemas (DTOs) ---

class CorrectionRequest(BaseModel):
    """Body of POST /correct. Field names follow the web client's camelCase."""
    model_config = ConfigDict(populate_by_name=True)

    text: str = Field("", description="Sentence to correct (Hangul mixed with Latin/punctuation)")
    speech_level: Optional[SpeechLevel] = Field(
        None,
        alias="speechLevel",
        description="'banmal' or 'jondaetmal'. Defaults to the server setting.",
    )

class CorrectionResponse(BaseModel):
    result: str
    notes: List[str] = Field(default_factory=list)
