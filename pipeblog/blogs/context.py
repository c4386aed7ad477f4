from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from django.contrib.auth.models import AnonymousUser  # type: ignore

    from ..users.models import User
    from .models import Blog


@dataclass(frozen=True)
class BlogContext:
    """Request-scoped record of the blog a request targets. Built once by
    resolve_blog_context() and handed explicitly to the dispatcher and the
    content views for the rest of the request."""

    blog: "Blog"
    owner: "User"
    viewer: Union["User", "AnonymousUser"]

    @property
    def username(self) -> str:
        return self.owner.username

    @property
    def viewer_is_owner(self) -> bool:
        return self.viewer.is_authenticated and self.viewer.pk == self.owner.pk
