from typing import TYPE_CHECKING

from django.apps import apps  # type: ignore

if TYPE_CHECKING:
    from django.db.models import QuerySet  # type: ignore


def blog_qs(username: str) -> "QuerySet":
    return apps.get_model("blogs.Blog").objects.filter(owner__username=username).select_related("owner")


def enabled_blogs_qs() -> "QuerySet":
    Blog = apps.get_model("blogs.Blog")
    return Blog.objects.filter(status=Blog.BlogStatuses.ENABLED).select_related("owner")
