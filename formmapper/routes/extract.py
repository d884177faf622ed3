import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from pydantic import BaseModel

from formmapper.config import settings
from formmapper.exceptions import EmptyInputError, ParseFailureError
from formmapper.routes.mappings import (
    FieldResponse,
    get_session_store,
    start_session,
    to_field_response,
)
from formmapper.services.extraction import GoogleFormsExtractor
from formmapper.services.sessions import SessionStore

logger = logging.getLogger(__name__)

router = APIRouter()


class ExtractRequest(BaseModel):
    html: str = ""


class ExtractResponse(BaseModel):
    fields: list[FieldResponse]
    metadata: dict


def get_extractor() -> GoogleFormsExtractor:
    return GoogleFormsExtractor()


@router.post("/extract", response_model=ExtractResponse)
async def extract(
    payload: ExtractRequest,
    request: Request,
    response: Response,
    store: SessionStore = Depends(get_session_store),
    extractor: GoogleFormsExtractor = Depends(get_extractor),
):
    """Extract answers from pasted form HTML and load them as field mappings.

    Any previous mappings of the session are dropped first, so a failed run
    leaves the session empty. A new session is only started once extraction
    succeeds.
    """
    projector = store.get(request.cookies.get(settings.session_cookie_name))
    if projector is not None:
        projector.clear()

    if len(payload.html) > settings.max_page_source_length:
        logger.warning(
            f"Page source too large: {len(payload.html)} characters "
            f"(max: {settings.max_page_source_length})"
        )
        raise HTTPException(
            status_code=413,
            detail=f"Page source exceeds maximum length of {settings.max_page_source_length} characters",
        )

    try:
        result = extractor.extract(payload.html)
    except EmptyInputError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None
    except ParseFailureError as e:
        logger.warning(f"HTML extraction failed: {e.__cause__!r}")
        raise HTTPException(status_code=422, detail=str(e)) from None

    if projector is None:
        projector = start_session(store, response)
    projector.load_batch(result)
    logger.info(
        f"Extracted {result.metadata['answered_count']} fields "
        f"from {result.metadata['candidate_count']} question blocks"
    )

    return ExtractResponse(
        fields=[to_field_response(r) for r in projector.records],
        metadata=result.metadata,
    )
