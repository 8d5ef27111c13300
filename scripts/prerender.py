import argparse
import logging
from pathlib import Path

from app.dependencies import get_comments_controller
from app.repos.posts_repo import PrismicPostsRepo
from app.services.posts_service import PostsService
from app.services.prismic_client import PrismicClient
from app.templating import home_context, post_context, templates

logger = logging.getLogger(__name__)


def prerender(service: PostsService, out_dir: Path, comments=None) -> int:
    """Write the post list and every known post as static HTML. Returns pages written."""
    out_dir.mkdir(parents=True, exist_ok=True)
    paginator = service.get_posts_paginator()
    html = templates.get_template("home.html").render(
        home_context(paginator, is_preview_mode=False)
    )
    (out_dir / "index.html").write_text(html, encoding="utf-8")
    written = 1

    for uid in service.list_post_uids():
        view = service.get_post_view(uid)
        if view is None:
            logger.warning(f"Skipping {uid}: post disappeared while rendering")
            continue
        target = out_dir / "post" / uid / "index.html"
        target.parent.mkdir(parents=True, exist_ok=True)
        html = templates.get_template("post.html").render(
            post_context(view, is_preview_mode=False, comments=comments)
        )
        target.write_text(html, encoding="utf-8")
        written += 1

    return written


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(description="Prerender the blog to HTML")
    parser.add_argument("out_dir", nargs="?", default="out")
    args = parser.parse_args()

    client = PrismicClient()
    try:
        count = prerender(
            PostsService(PrismicPostsRepo(client)),
            Path(args.out_dir),
            comments=get_comments_controller(),
        )
        logger.info(f"Prerendered {count} pages into {args.out_dir}")
    except Exception as e:
        logger.error(f"Prerender failed: {e}", exc_info=True)
        raise SystemExit(1)
    finally:
        client.close()
