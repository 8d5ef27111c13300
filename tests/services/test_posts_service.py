from app.schemas.blog import NeighborRef, Post, PostPagination
from app.services.posts_service import PostsService
from tests.conftest import FakePostsRepo, make_post_doc, make_summary


def test_paginator_starts_from_first_page():
    repo = FakePostsRepo(
        first=PostPagination(results=[make_summary("a"), make_summary("b")], next_page="p2")
    )

    paginator = PostsService(repo).get_posts_paginator()

    assert [p.uid for p in paginator.posts] == ["a", "b"]
    assert paginator.next_page == "p2"
    assert repo.calls == ["first_page"]


def test_paginator_loads_requested_extra_pages():
    repo = FakePostsRepo(
        first=PostPagination(results=[make_summary("a")], next_page="p2"),
        pages={
            "p2": PostPagination(results=[make_summary("b")], next_page="p3"),
            "p3": PostPagination(results=[make_summary("c")], next_page="p4"),
        },
    )

    paginator = PostsService(repo).get_posts_paginator(pages=3)

    assert [p.uid for p in paginator.posts] == ["a", "b", "c"]
    assert paginator.next_page == "p4"
    assert repo.calls == ["first_page", ("page_at", "p2"), ("page_at", "p3")]


def test_paginator_stops_when_exhausted():
    repo = FakePostsRepo(
        first=PostPagination(results=[make_summary("a")], next_page="p2"),
        pages={"p2": PostPagination(results=[make_summary("b")], next_page=None)},
    )

    paginator = PostsService(repo).get_posts_paginator(pages=10)

    assert [p.uid for p in paginator.posts] == ["a", "b"]
    assert paginator.has_more is False


def test_get_next_page_follows_cursor():
    page = PostPagination(results=[make_summary("z")], next_page=None)
    repo = FakePostsRepo(pages={"cursor": page})

    assert PostsService(repo).get_next_page("cursor") == page


def test_get_post_view_assembles_with_neighbors_and_ref():
    post = Post.from_document(make_post_doc("hello"))
    prev_post = NeighborRef(uid="older", title="Older")
    next_post = NeighborRef(uid="newer", title="Newer")
    repo = FakePostsRepo(posts={"hello": post}, neighbors=(prev_post, next_post))

    view = PostsService(repo).get_post_view("hello", ref="preview-ref")

    assert view.post == post
    assert view.prev_post == prev_post
    assert view.next_post == next_post
    assert view.reading_time == 1
    assert repo.calls == [("get_post", "hello", "preview-ref"), ("get_neighbors", "id-hello")]


def test_get_post_view_returns_none_when_missing():
    repo = FakePostsRepo()
    assert PostsService(repo).get_post_view("missing") is None
    assert ("get_neighbors", "id-missing") not in repo.calls


def test_get_post_view_without_uid_is_fallback_and_fetches_nothing():
    repo = FakePostsRepo()

    view = PostsService(repo).get_post_view(None)

    assert view.is_fallback is True
    assert repo.calls == []


def test_list_post_uids():
    repo = FakePostsRepo(uids=["a", "b"])
    assert PostsService(repo).list_post_uids() == ["a", "b"]
