import logging
from typing import List, Optional

from app.schemas.blog import ArticleView, PostPagination
from app.services.article_assembler import assemble_article, fallback_view
from app.services.paginator import PostListPaginator

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo):
        self.repo = repo

    def get_posts_paginator(self, pages: int = 1) -> PostListPaginator:
        """First page of posts, plus up to `pages - 1` further pages."""
        paginator = PostListPaginator(self.repo.page_at)
        paginator.initialize(self.repo.first_page())

        for _ in range(max(pages, 1) - 1):
            if not paginator.has_more:
                break
            paginator.load_more()

        logger.info(
            f"Serving {len(paginator.posts)} posts (more available: {paginator.has_more})"
        )
        return paginator

    def get_next_page(self, cursor: str) -> PostPagination:
        return self.repo.page_at(cursor)

    def list_post_uids(self) -> List[str]:
        return self.repo.list_uids()

    def get_post_view(
        self, uid: Optional[str], ref: Optional[str] = None
    ) -> Optional[ArticleView]:
        if not uid:
            return fallback_view()

        post = self.repo.get_post(uid, ref=ref)
        if not post:
            logger.info(f"Post {uid} not found")
            return None

        prev_post, next_post = self.repo.get_neighbors(post.id)
        return assemble_article(post, prev_post, next_post)
