import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse

from app import dependencies as deps
from app.errors import DataFetchError, InvalidCursorError
from app.schemas.blog import PostPagination
from app.services.comments import CommentEmbedController
from app.services.posts_service import PostsService
from app.services.preview import get_preview_ref, is_preview_mode
from app.settings import Settings, get_settings
from app.templating import (
    MAX_PAGES,
    cache_control,
    home_context,
    post_context,
    templates,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def home(
    request: Request,
    pages: int = Query(1, ge=1, le=MAX_PAGES, description="Number of pages to show"),
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    """Render the post list, optionally expanded by `pages` load-more steps."""
    try:
        paginator = service.get_posts_paginator(pages)
    except (DataFetchError, InvalidCursorError) as e:
        logger.error(f"Failed to fetch posts: {e}")
        raise HTTPException(status_code=502, detail="Failed to retrieve posts")

    response = templates.TemplateResponse(
        request,
        "home.html",
        home_context(paginator, is_preview_mode(request), pages),
    )
    response.headers["Cache-Control"] = cache_control(
        current_settings.LIST_REVALIDATE_SECONDS
    )
    return response


@router.get("/api/posts", response_model=PostPagination)
def next_posts(
    cursor: str = Query(..., min_length=1),
    service: PostsService = Depends(deps.get_posts_service),
):
    """Fetch the page of posts a next_page cursor points at."""
    try:
        return service.get_next_page(cursor)
    except InvalidCursorError:
        raise HTTPException(status_code=400, detail="Invalid cursor")
    except DataFetchError as e:
        logger.error(f"Failed to fetch posts page {cursor}: {e}")
        raise HTTPException(status_code=502, detail="Failed to retrieve posts")


@router.get("/post/{uid}", response_class=HTMLResponse)
def get_post(
    uid: str,
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    comments: CommentEmbedController = Depends(deps.get_comments_controller),
    current_settings: Settings = Depends(get_settings),
):
    """Render a single post by uid."""
    try:
        view = service.get_post_view(uid, ref=get_preview_ref(request))
    except DataFetchError as e:
        logger.error(f"Failed to fetch post {uid}: {e}")
        raise HTTPException(status_code=502, detail="Failed to retrieve post")

    if view is None:
        raise HTTPException(status_code=404, detail="Post not found")

    response = templates.TemplateResponse(
        request,
        "post.html",
        post_context(view, is_preview_mode(request), comments),
    )
    response.headers["Cache-Control"] = cache_control(
        current_settings.POST_REVALIDATE_SECONDS
    )
    return response
