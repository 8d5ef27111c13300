from app.dependencies import (
    get_comments_controller,
    get_posts_repo,
    get_posts_service,
    get_prismic,
)
from app.repos.posts_repo import PrismicPostsRepo
from app.services.comments import CommentEmbedController
from app.services.posts_service import PostsService
from app.services.prismic_client import PrismicClient
from tests.conftest import FakePrismicClient


def test_get_prismic_yields_client_and_closes_it(monkeypatch):
    closed = []
    monkeypatch.setattr(PrismicClient, "close", lambda self: closed.append(self))

    gen = get_prismic()
    client = next(gen)
    assert isinstance(client, PrismicClient)

    gen.close()
    assert closed == [client]


def test_get_posts_repo_constructs_repo():
    prismic = FakePrismicClient()
    repo = get_posts_repo(prismic=prismic)

    assert isinstance(repo, PrismicPostsRepo)
    assert repo.client is prismic


def test_get_posts_service_constructs_service():
    class FakeRepo:
        pass

    repo = FakeRepo()
    svc = get_posts_service(repo=repo)

    assert isinstance(svc, PostsService)
    assert svc.repo is repo


def test_get_comments_controller_uses_settings(monkeypatch):
    import app.services.comments as comments

    monkeypatch.setattr(comments.settings, "UTTERANC_GITHUB_REPO", "owner/repo")
    controller = get_comments_controller()

    assert isinstance(controller, CommentEmbedController)
    assert controller.config.repository == "owner/repo"
