from typing import List, Optional, Tuple

from app.schemas.blog import NeighborRef, PostPagination, Post
from app.services.prismic_client import PrismicClient, at
from app.settings import settings

SUMMARY_FIELDS = ["post.title", "post.subtitle", "post.author"]
NEIGHBOR_FIELDS = ["post.title"]
NEWEST_FIRST = "[document.first_publication_date desc]"
OLDEST_FIRST = "[document.first_publication_date]"


class PrismicPostsRepo:
    def __init__(self, client: PrismicClient, document_type: Optional[str] = None):
        self.client = client
        self.document_type = document_type or settings.POSTS_DOCUMENT_TYPE

    @property
    def type_predicate(self) -> str:
        return at("document.type", self.document_type)

    def first_page(self, page_size: Optional[int] = None) -> PostPagination:
        response = self.client.query(
            [self.type_predicate],
            fetch=SUMMARY_FIELDS,
            page_size=page_size or settings.POSTS_PAGE_SIZE,
        )
        return PostPagination.from_response(response)

    def page_at(self, cursor: str) -> PostPagination:
        return PostPagination.from_response(self.client.get_page(cursor))

    def list_uids(self) -> List[str]:
        response = self.client.query([self.type_predicate])
        return [doc["uid"] for doc in response.get("results", []) if doc.get("uid")]

    def get_post(self, uid: str, ref: Optional[str] = None) -> Optional[Post]:
        doc = self.client.get_by_uid(self.document_type, uid, ref=ref)
        return Post.from_document(doc) if doc else None

    def get_neighbors(
        self, document_id: str
    ) -> Tuple[Optional[NeighborRef], Optional[NeighborRef]]:
        """
        Return (prev_post, next_post) for a document.
        Both lookups page "after" the document; prev uses newest-first ordering,
        next uses oldest-first.
        """
        prev_post = self._first_after(document_id, NEWEST_FIRST)
        next_post = self._first_after(document_id, OLDEST_FIRST)
        return prev_post, next_post

    def _first_after(self, document_id: str, orderings: str) -> Optional[NeighborRef]:
        response = self.client.query(
            self.type_predicate,
            fetch=NEIGHBOR_FIELDS,
            page_size=1,
            after=document_id,
            orderings=orderings,
        )
        results = response.get("results") or []
        return NeighborRef.from_document(results[0]) if results else None
