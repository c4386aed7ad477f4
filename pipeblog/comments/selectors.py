from typing import TYPE_CHECKING

from django.apps import apps  # type: ignore
from django.core.exceptions import ValidationError  # type: ignore
from django.db.models import Prefetch  # type: ignore

from ..articles.choices import ArticleStatuses

if TYPE_CHECKING:
    from django.db.models import QuerySet  # type: ignore

    from ..articles.models import Article
    from ..blogs.models import Blog


def replies_prefetch() -> Prefetch:
    return Prefetch(
        "replies",
        queryset=apps.get_model("comments.Comment").objects.select_related("author").order_by("created"),
    )


def article_comments_qs(article: "Article") -> "QuerySet":
    """Top-level comments of an article with their replies prefetched."""
    return (
        apps.get_model("comments.Comment")
        .objects.filter(article=article, parent__isnull=True)
        .select_related("author")
        .prefetch_related(replies_prefetch())
        .order_by("created")
    )


def comment_replies_qs(blog: "Blog", comment_id: str) -> "QuerySet":
    """Replies to a comment on one of blog's published articles. Returns an empty
    QuerySet if comment_id isn't a valid comment id."""
    Comment = apps.get_model("comments.Comment")
    try:
        return (
            Comment.objects.filter(
                blog=blog,
                parent_id=comment_id,
                article__status=ArticleStatuses.PUBLISHED,
            )
            .select_related("author")
            .order_by("created")
        )
    except ValidationError:
        return Comment.objects.none()
