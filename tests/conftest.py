from app.schemas.blog import PostPagination, PostSummary
from app.services.paginator import PostListPaginator


def make_summary_doc(uid: str, published="2022-03-10T12:00:00+0000", **data):
    return {
        "id": f"id-{uid}",
        "uid": uid,
        "type": "posts",
        "first_publication_date": published,
        "data": {
            "title": data.get("title", uid.title()),
            "subtitle": data.get("subtitle", f"About {uid}"),
            "author": data.get("author", "Ada"),
        },
    }


def make_post_doc(
    uid: str = "hello",
    first="2022-03-10T12:00:00+0000",
    last="2022-03-10T12:00:00+0000",
    content=None,
):
    return {
        "id": f"id-{uid}",
        "uid": uid,
        "type": "posts",
        "first_publication_date": first,
        "last_publication_date": last,
        "data": {
            "title": f"Title of {uid}",
            "author": "Ada",
            "banner": {"url": "https://images.prismic.io/banner.png"},
            "content": content
            if content is not None
            else [
                {
                    "heading": "Intro",
                    "body": [{"type": "paragraph", "text": "one two three", "spans": []}],
                }
            ],
        },
    }


def make_summary(uid: str, published="2022-03-10T12:00:00+0000") -> PostSummary:
    return PostSummary(
        uid=uid,
        first_publication_date=published,
        title=uid.title(),
        subtitle=f"About {uid}",
        author="Ada",
    )


class FakePrismicClient:
    """
    Minimal in-memory Prismic client stand-in.
    query() answers by orderings; every call is recorded.
    """

    def __init__(
        self,
        query_results=None,
        documents_by_uid=None,
        documents_by_id=None,
        pages=None,
        error=None,
    ):
        self.query_results = query_results or {}
        self.documents_by_uid = documents_by_uid or {}
        self.documents_by_id = documents_by_id or {}
        self.pages = pages or {}
        self.error = error
        self.calls = []
        self.closed = False

    def query(self, predicates, **kwargs):
        self.calls.append(("query", predicates, kwargs))
        if self.error:
            raise self.error
        return self.query_results.get(
            kwargs.get("orderings"), {"results": [], "next_page": None}
        )

    def get_by_uid(self, document_type, uid, ref=None):
        self.calls.append(("get_by_uid", document_type, uid, ref))
        if self.error:
            raise self.error
        return self.documents_by_uid.get(uid)

    def get_by_id(self, document_id, ref=None):
        self.calls.append(("get_by_id", document_id, ref))
        if self.error:
            raise self.error
        return self.documents_by_id.get(document_id)

    def get_page(self, url):
        self.calls.append(("get_page", url))
        if self.error:
            raise self.error
        return self.pages[url]

    def close(self):
        self.closed = True


class FakePostsRepo:
    """
    Minimal repo stand-in used in service tests.
    """

    def __init__(self, first=None, pages=None, posts=None, neighbors=(None, None), uids=None):
        self.first = first or PostPagination()
        self.pages = pages or {}
        self.posts = posts or {}
        self.neighbors = neighbors
        self.uids = uids or []
        self.calls = []

    def first_page(self):
        self.calls.append("first_page")
        return self.first

    def page_at(self, cursor):
        self.calls.append(("page_at", cursor))
        return self.pages[cursor]

    def list_uids(self):
        return list(self.uids)

    def get_post(self, uid, ref=None):
        self.calls.append(("get_post", uid, ref))
        return self.posts.get(uid)

    def get_neighbors(self, document_id):
        self.calls.append(("get_neighbors", document_id))
        return self.neighbors


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, first_page=None, next_page_return=None, post_view=None):
        self.first_page = first_page or PostPagination()
        self.next_page_return = next_page_return or PostPagination()
        self.post_view = post_view
        self.calls = []

    def get_posts_paginator(self, pages: int = 1):
        self.calls.append(("paginator", pages))
        paginator = PostListPaginator(lambda cursor: PostPagination())
        paginator.initialize(self.first_page)
        return paginator

    def get_next_page(self, cursor: str):
        self.calls.append(("next_page", cursor))
        return self.next_page_return

    def get_post_view(self, uid, ref=None):
        self.calls.append(("post_view", uid, ref))
        return self.post_view

    def list_post_uids(self):
        return []
