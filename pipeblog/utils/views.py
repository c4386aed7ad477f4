from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..blogs.context import BlogContext
    from ..blogs.models import Blog


class BlogContextMixin:
    """Mixin for views served under a blog root. Expects the resolved BlogContext
    in the blog_context view kwarg and, for views reached through a prefix route,
    the route remainder in the param kwarg."""

    kwargs: dict[str, Any]

    @property
    def blog_context(self) -> "BlogContext":
        return self.kwargs["blog_context"]

    @property
    def blog(self) -> "Blog":
        return self.blog_context.blog

    @property
    def param(self) -> str:
        return self.kwargs.get("param", "")

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)  # type: ignore
        context.update({"blog": self.blog, "blog_context": self.blog_context})
        return context
