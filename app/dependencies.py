from fastapi import Depends

from app.repos.posts_repo import PrismicPostsRepo
from app.services.comments import CommentEmbedController, CommentsConfig
from app.services.posts_service import PostsService
from app.services.prismic_client import PrismicClient


def get_prismic():
    """
    Create a Prismic client for the duration of a request.
    Called at runtime to avoid import-time connections.
    """
    client = PrismicClient()
    try:
        yield client
    finally:
        client.close()


def get_posts_repo(prismic=Depends(get_prismic)):
    return PrismicPostsRepo(prismic)


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)


def get_comments_controller():
    return CommentEmbedController(CommentsConfig.from_settings())
