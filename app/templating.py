from pathlib import Path
from typing import Any, Dict, Optional

from fastapi.templating import Jinja2Templates

from app.schemas.blog import ArticleView
from app.services.comments import CommentEmbedController, MountPoint
from app.services.date_formatter import format_date
from app.services.paginator import PostListPaginator
from app.services.rich_text import as_html
from app.settings import settings

MAX_PAGES = 50

TEMPLATE_DIR = Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))
templates.env.filters["format_date"] = format_date
templates.env.filters["rich_text"] = as_html
templates.env.globals.update(site_name=settings.SITE_NAME)


def home_context(
    paginator: PostListPaginator, is_preview_mode: bool, pages: int = 1
) -> Dict[str, Any]:
    return {
        "posts": paginator.posts,
        "next_page": paginator.next_page,
        "more_url": (
            f"/?pages={pages + 1}"
            if paginator.has_more and pages < MAX_PAGES
            else None
        ),
        "is_preview_mode": is_preview_mode,
    }


def post_context(
    view: ArticleView,
    is_preview_mode: bool,
    comments: Optional[CommentEmbedController] = None,
) -> Dict[str, Any]:
    anchor = None
    if comments is not None and not view.is_fallback:
        anchor = MountPoint("comments")
        comments.attach(anchor)
    return {
        "view": view,
        "post": view.post,
        "comments": anchor,
        "is_preview_mode": is_preview_mode,
    }


def cache_control(seconds: int) -> str:
    return f"public, s-maxage={seconds}, stale-while-revalidate"
