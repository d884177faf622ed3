import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from formmapper.config import settings
from formmapper.services.mapping import FieldRecord, MappingProjector
from formmapper.services.sessions import SessionStore, session_store

logger = logging.getLogger(__name__)

router = APIRouter()


class FieldResponse(BaseModel):
    id: str
    original_title: str
    value: str | list[str]
    display_value: str
    target_key: str
    included: bool


class FieldListResponse(BaseModel):
    fields: list[FieldResponse]


class FieldUpdate(BaseModel):
    target_key: str | None = None
    included: bool | None = None


def get_session_store() -> SessionStore:
    return session_store


def get_projector(
    request: Request,
    store: SessionStore = Depends(get_session_store),
) -> MappingProjector:
    """Dependency to get the current session's projector.

    Requests without a known session get an empty projector that is not
    stored; sessions only start when an extraction succeeds.
    """
    projector = store.get(request.cookies.get(settings.session_cookie_name))
    if projector is None:
        return MappingProjector()
    return projector


def start_session(store: SessionStore, response: Response) -> MappingProjector:
    """Create a session and set its cookie on the response."""
    session_id, projector = store.create()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session_id,
        httponly=True,
        secure=settings.frontend_url.startswith("https"),
        samesite="lax",
    )
    return projector


def to_field_response(record: FieldRecord) -> FieldResponse:
    return FieldResponse(
        id=record.id,
        original_title=record.original_title,
        value=record.value,
        display_value=record.display_value,
        target_key=record.target_key,
        included=record.included,
    )


def to_field_list(projector: MappingProjector) -> FieldListResponse:
    return FieldListResponse(fields=[to_field_response(r) for r in projector.records])


@router.get("", response_model=FieldListResponse)
async def list_fields(projector: MappingProjector = Depends(get_projector)):
    """List the current session's field records."""
    return to_field_list(projector)


@router.patch("/{field_id}", response_model=FieldListResponse)
async def update_field(
    field_id: str,
    update: FieldUpdate,
    projector: MappingProjector = Depends(get_projector),
):
    """Rename and/or toggle one field. Unknown field ids are ignored."""
    if update.target_key is not None:
        projector.set_target_key(field_id, update.target_key)
    if update.included is not None:
        projector.set_inclusion(field_id, update.included)
    return to_field_list(projector)


@router.post("/reset-keys", response_model=FieldListResponse)
async def reset_keys(projector: MappingProjector = Depends(get_projector)):
    """Restore every target key to its extracted question title."""
    projector.reset_target_keys()
    return to_field_list(projector)


@router.delete("")
async def clear_fields(projector: MappingProjector = Depends(get_projector)):
    """Start over: drop all field records."""
    projector.clear()
    return {"message": "Mappings cleared"}


@router.get("/document")
async def get_document(projector: MappingProjector = Depends(get_projector)):
    """Return the final document derived from current mappings."""
    return projector.derive_document()


@router.get("/document/text", response_class=PlainTextResponse)
async def get_document_text(projector: MappingProjector = Depends(get_projector)):
    """Return the final document rendered as indented JSON text."""
    return projector.render_document(indent=settings.document_indent)
