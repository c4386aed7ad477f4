from operator import attrgetter
from typing import TYPE_CHECKING

from django.apps import apps  # type: ignore
from django.contrib.auth import get_user_model  # type: ignore
from django.db.models import Count, Q  # type: ignore
from django.db.models.functions import TruncMonth  # type: ignore

from ..blogs.choices import BlogStatuses
from .choices import ActivityTypes, ArticleStatuses
from .types import Activity, Archive

if TYPE_CHECKING:
    from django.db.models import QuerySet  # type: ignore

    from ..blogs.models import Blog


def published_qs(blog: "Blog") -> "QuerySet":
    return apps.get_model("articles.Article").objects.filter(blog=blog, status=ArticleStatuses.PUBLISHED)


def published_articles_qs(blog: "Blog") -> "QuerySet":
    return (
        published_qs(blog)
        .select_related("author", "blog__owner")
        .prefetch_related("tags")
        .order_by("-topped", "-published")
    )


def archive_articles_qs(blog: "Blog", year: int, month: int) -> "QuerySet":
    return published_articles_qs(blog).filter(published__year=year, published__month=month)


def author_articles_qs(blog: "Blog", username: str) -> "QuerySet":
    return published_articles_qs(blog).filter(author__username=username)


def category_articles_qs(blog: "Blog", slug: str) -> "QuerySet":
    return published_articles_qs(blog).filter(tags__categories__blog=blog, tags__categories__slug=slug).distinct()


def tag_articles_qs(blog: "Blog", title: str) -> "QuerySet":
    return published_articles_qs(blog).filter(tags__blog=blog, tags__title=title).distinct()


def blog_archives(blog: "Blog") -> list[Archive]:
    """Method that groups a blog's published articles by month.

    Returns:
        list[Archive]: one Archive per month with published articles, newest first
    """
    months = (
        published_qs(blog)
        .annotate(month=TruncMonth("published"))
        .values("month")
        .annotate(article_count=Count("id"))
        .order_by("-month")
    )
    return [
        Archive(blog=blog, year=row["month"].year, month=row["month"].month, article_count=row["article_count"])
        for row in months
    ]


def blog_authors_qs(blog: "Blog") -> "QuerySet":
    return (
        get_user_model()
        .objects.annotate(
            article_count=Count(
                "articles",
                filter=Q(articles__blog=blog, articles__status=ArticleStatuses.PUBLISHED),
            )
        )
        .filter(article_count__gt=0)
        .order_by("username")
    )


def blog_categories_qs(blog: "Blog") -> "QuerySet":
    return apps.get_model("articles.Category").objects.filter(blog=blog).prefetch_related("tags").order_by("title")


def blog_tags_qs(blog: "Blog") -> "QuerySet":
    return (
        apps.get_model("articles.Tag")
        .objects.filter(blog=blog)
        .annotate(article_count=Count("articles", filter=Q(articles__status=ArticleStatuses.PUBLISHED)))
        .order_by("-article_count", "title")
    )


def blog_activities(blog: "Blog", limit: int) -> list[Activity]:
    """Method that merges a blog's latest published articles and latest comments
    on published articles into a single listing.

    Args:
        blog: Blog
        limit: maximum number of activities

    Returns:
        list[Activity]: newest first
    """
    articles = published_qs(blog).select_related("author", "blog__owner").order_by("-published")[:limit]
    comments = (
        apps.get_model("comments.Comment")
        .objects.filter(blog=blog, article__status=ArticleStatuses.PUBLISHED)
        .select_related("author", "article__blog__owner")
        .order_by("-created")[:limit]
    )
    activities = [Activity(ActivityTypes.ARTICLE, article.published, article) for article in articles]
    activities += [Activity(ActivityTypes.COMMENT, comment.created, comment) for comment in comments]
    return sorted(activities, key=attrgetter("date"), reverse=True)[:limit]


def search_articles_qs(key: str) -> "QuerySet":
    """Published articles of enabled blogs whose title or abstract contains key, newest first."""
    return (
        apps.get_model("articles.Article")
        .objects.filter(
            Q(title__icontains=key) | Q(abstract__icontains=key),
            blog__status=BlogStatuses.ENABLED,
            status=ArticleStatuses.PUBLISHED,
        )
        .select_related("author", "blog__owner")
        .prefetch_related("tags")
        .order_by("-published")
    )
