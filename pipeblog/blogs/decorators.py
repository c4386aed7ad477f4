from functools import wraps
from typing import TYPE_CHECKING

from .services import resolve_blog_context

if TYPE_CHECKING:
    from collections.abc import Callable

    from django.http import HttpRequest, HttpResponse  # type: ignore


def blog_context_required(view_func: "Callable[..., HttpResponse]") -> "Callable[..., HttpResponse]":
    """Decorator for views routed under /blogs/<username>/. Replaces the username
    URL kwarg with the resolved BlogContext (blog_context kwarg). Raises
    BlogNotFound before the view runs if the blog can't be served."""

    @wraps(view_func)
    def _wrapped_view(request: "HttpRequest", *args, username: str, **kwargs) -> "HttpResponse":
        blog_context = resolve_blog_context(username, request.user)
        return view_func(request, *args, blog_context=blog_context, **kwargs)

    return _wrapped_view
