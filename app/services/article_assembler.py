from typing import Optional

from app.schemas.blog import ArticleView, NeighborRef, Post
from app.services.date_formatter import EDITED_DATE_PATTERN, format_date
from app.services.rich_text import as_text
from app.utils import calculate_reading_time, count_words


def count_article_words(post: Post) -> int:
    heading_words = sum(count_words(section.heading) for section in post.content)
    body_words = sum(count_words(as_text(section.body)) for section in post.content)
    return heading_words + body_words


def assemble_article(
    post: Post,
    prev_post: Optional[NeighborRef] = None,
    next_post: Optional[NeighborRef] = None,
) -> ArticleView:
    # Compare raw timestamps; two instants can render identically and still differ.
    is_edited = post.first_publication_date != post.last_publication_date

    published_label = (
        format_date(post.first_publication_date)
        if post.first_publication_date is not None
        else None
    )
    edited_label = (
        format_date(post.last_publication_date, EDITED_DATE_PATTERN)
        if is_edited and post.last_publication_date is not None
        else None
    )

    return ArticleView(
        post=post,
        reading_time=calculate_reading_time(count_article_words(post)),
        is_edited=is_edited,
        published_label=published_label,
        edited_label=edited_label,
        prev_post=prev_post,
        next_post=next_post,
    )


def fallback_view() -> ArticleView:
    """Placeholder shown while the article has not been resolved yet."""
    return ArticleView(is_fallback=True)
