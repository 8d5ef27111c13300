import logging
from typing import Callable, List, Optional

from app.errors import NoMorePagesError
from app.schemas.blog import PostPagination, PostSummary

logger = logging.getLogger(__name__)


class PostListPaginator:
    """
    Accumulates post summaries across pages.
    The list only ever grows: each load_more appends the next page as-is,
    duplicates included.
    """

    def __init__(self, fetch_page: Callable[[str], PostPagination]):
        self.fetch_page = fetch_page
        self.posts: List[PostSummary] = []
        self.next_page: Optional[str] = None

    def initialize(self, page: PostPagination) -> None:
        self.posts = list(page.results)
        self.next_page = page.next_page

    @property
    def has_more(self) -> bool:
        return self.next_page is not None

    def load_more(self) -> PostPagination:
        if not self.has_more:
            raise NoMorePagesError("No further pages to load")

        page = self.fetch_page(self.next_page)
        self.posts = self.posts + list(page.results)
        self.next_page = page.next_page
        logger.debug(
            f"Loaded {len(page.results)} more posts, {len(self.posts)} total"
        )
        return page

    def page(self) -> PostPagination:
        return PostPagination(next_page=self.next_page, results=list(self.posts))
