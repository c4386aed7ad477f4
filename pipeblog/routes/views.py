from types import MappingProxyType
from typing import TYPE_CHECKING

from django.http import Http404  # type: ignore

from ..articles.feeds import blog_atom_feed_view
from ..articles.views import (
    activity_list_view,
    archive_article_list_view,
    archive_list_view,
    article_detail_view,
    article_list_view,
    author_article_list_view,
    author_list_view,
    category_article_list_view,
    category_list_view,
    tag_article_list_view,
    tag_list_view,
)
from ..blogs.decorators import blog_context_required
from ..comments.views import comment_create_view, comment_replies_view
from .choices import ViewKinds
from .dispatch import dispatch_path

if TYPE_CHECKING:
    from django.http import HttpRequest, HttpResponse  # type: ignore

    from ..blogs.context import BlogContext

ROUTE_HANDLERS = MappingProxyType(
    {
        ViewKinds.ACTIVITIES: activity_list_view,
        ViewKinds.ARCHIVES: archive_list_view,
        ViewKinds.AUTHORS: author_list_view,
        ViewKinds.CATEGORIES: category_list_view,
        ViewKinds.TAGS: tag_list_view,
        ViewKinds.COMMENTS: comment_create_view,
        ViewKinds.ATOM_FEED: blog_atom_feed_view,
        ViewKinds.ARCHIVE_ARTICLES: archive_article_list_view,
        ViewKinds.AUTHOR_ARTICLES: author_article_list_view,
        ViewKinds.CATEGORY_ARTICLES: category_article_list_view,
        ViewKinds.TAG_ARTICLES: tag_article_list_view,
        ViewKinds.COMMENT_REPLIES: comment_replies_view,
    }
)


@blog_context_required
def route_path_view(request: "HttpRequest", blog_context: "BlogContext", route: str) -> "HttpResponse":
    """Dispatches the route path under a blog root to its content view."""
    decision = dispatch_path(route)
    if not decision:
        raise Http404(f"No content at {route} for {blog_context.username}.")
    handler = ROUTE_HANDLERS[decision.kind]
    return handler(request, blog_context=blog_context, param=decision.param)


blog_home_view = blog_context_required(article_list_view)
blog_article_detail_view = blog_context_required(article_detail_view)
