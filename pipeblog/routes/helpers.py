from typing import TYPE_CHECKING

from django.urls import reverse  # type: ignore

from .paths import PATH_TABLE

if TYPE_CHECKING:
    from ..blogs.models import Blog
    from .choices import ViewKinds


def blog_route_url(blog: "Blog", kind: "ViewKinds", param: str = "") -> str:
    """Gets the URL under blog that dispatches to kind, e.g. /blogs/alice/tags/golang."""
    return reverse("blogs:route", kwargs={"username": blog.owner.username, "route": PATH_TABLE.path_for(kind, param)})
