# hangul_corrector\adapters\api\routers\correction.py
from fastapi import APIRouter, Depends, HTTPException, status, Body
import structlog

from hangul_corrector.adapters.api.dependencies import get_correct_sentence_use_case
from hangul_corrector.adapters.api.schemas import CorrectionRequest, CorrectionResponse
from hangul_corrector.core.domain.exceptions import DomainError, InvalidSpeechLevelError
from hangul_corrector.core.use_cases.correct_sentence import CorrectSentence
from hangul_corrector.shared.config import settings

logger = structlog.get_logger()

router = APIRouter(prefix="/correct", tags=["Correction"])

@router.post(
    "",
    response_model=CorrectionResponse,
    status_code=status.HTTP_200_OK,
    summary="Correct a Korean sentence"
)
async def correct_sentence(
    request: CorrectionRequest = Body(..., description="Sentence and target speech level"),
    use_case: CorrectSentence = Depends(get_correct_sentence_use_case)
):
    """
    Fixes particles and tense with the rule engine, then renders the sentence
    in the requested speech level.

    **Body:**
    * `text`: The sentence to correct.
    * `speechLevel`: `banmal` (plain) or `jondaetmal` (polite).

    **Returns:**
    * `result`: The final sentence (empty when `text` is empty).
    * `notes`: Human-readable descriptions of the rule categories that fired.
    """
    level = request.speech_level or settings.DEFAULT_SPEECH_LEVEL
    try:
        result = await use_case.execute(request.text, level)
        return CorrectionResponse(result=result.corrected, notes=result.notes)

    except InvalidSpeechLevelError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e)
        )

    except DomainError as e:
        logger.error("correction_domain_error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Correction failed: {str(e)}"
        )
