import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from app import dependencies as deps
from app.errors import PreviewTokenError
from app.services.preview import redirect_page, resolve_preview
from app.services.prismic_client import PrismicClient
from app.settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/preview")
def preview(
    token: Optional[str] = Query(None),
    document_id: Optional[str] = Query(None, alias="documentId"),
    prismic: PrismicClient = Depends(deps.get_prismic),
    current_settings: Settings = Depends(get_settings),
):
    """Enter preview mode for a draft and redirect to it."""
    try:
        redirect_url = resolve_preview(prismic, token, document_id)
    except PreviewTokenError as e:
        logger.warning(f"Rejected preview request: {e}")
        return JSONResponse(status_code=401, content={"message": "Invalid token"})

    response = HTMLResponse(content=redirect_page(redirect_url))
    response.set_cookie(
        current_settings.PREVIEW_COOKIE_NAME, token, httponly=True, samesite="lax"
    )
    logger.info(f"Preview mode enabled, redirecting to {redirect_url}")
    return response


@router.get("/exit-preview")
def exit_preview(current_settings: Settings = Depends(get_settings)):
    response = RedirectResponse(url="/", status_code=307)
    response.delete_cookie(current_settings.PREVIEW_COOKIE_NAME)
    return response
