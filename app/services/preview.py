import json
import logging
from typing import Any, Dict, Optional

from fastapi import Request
from markupsafe import escape

from app.errors import DataFetchError, PreviewTokenError
from app.services.prismic_client import PrismicClient
from app.settings import settings

logger = logging.getLogger(__name__)


def is_preview_mode(request: Request) -> bool:
    return bool(get_preview_ref(request))


def get_preview_ref(request: Request) -> Optional[str]:
    return request.cookies.get(settings.PREVIEW_COOKIE_NAME) or None


def link_resolver(doc: Dict[str, Any]) -> str:
    if doc.get("type") == settings.POSTS_DOCUMENT_TYPE:
        return f"/post/{doc.get('uid')}"
    return "/"


def resolve_preview(
    client: PrismicClient,
    token: Optional[str],
    document_id: Optional[str],
    default_url: str = "/",
) -> str:
    """
    Exchange a preview token for the URL of the previewed document.
    Falls back to default_url when the document is missing under the token.
    Raises PreviewTokenError when the token is missing or rejected by the CMS.
    """
    if not token:
        raise PreviewTokenError("Missing preview token")
    if not document_id:
        return default_url

    try:
        doc = client.get_by_id(document_id, ref=token)
    except DataFetchError as e:
        raise PreviewTokenError(f"Preview token rejected: {e}") from e

    if not doc:
        logger.info(f"Document {document_id} not found for token, using {default_url}")
        return default_url
    return link_resolver(doc) or default_url


def redirect_page(url: str) -> str:
    # "<" is escaped so the literal cannot close the script element.
    js_url = json.dumps(url).replace("<", "\\u003c")
    return (
        f'<!DOCTYPE html><html><head><meta http-equiv="Refresh" content="0; url={escape(url)}" />\n'
        f"    <script>window.location.href = {js_url}</script>\n"
        "    </head>"
    )
