from typing import TYPE_CHECKING

from django import template  # type: ignore

from .routes.choices import ViewKinds
from .routes.helpers import blog_route_url

if TYPE_CHECKING:
    from .blogs.models import Blog

register = template.Library()


@register.simple_tag
def blog_route(blog: "Blog", kind: str, param: str = "") -> str:
    """Template tag to get the URL of one of a blog's routes.

    Args:
        blog (Blog): the Blog the route lives under
        kind (str): a ViewKinds value, e.g. "author_articles"
        param (str): the route parameter for prefix routes, e.g. a username

    Returns:
        str: URL, e.g. /blogs/alice/authors/bob
    """
    return blog_route_url(blog, ViewKinds(kind), str(param))
