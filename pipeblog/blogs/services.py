import logging
from typing import TYPE_CHECKING, Union

from ..utils.exceptions import BlogNotFound
from .context import BlogContext
from .selectors import blog_qs

if TYPE_CHECKING:
    from django.contrib.auth.models import AnonymousUser  # type: ignore

    from ..users.models import User

logger = logging.getLogger(__name__)


def resolve_blog_context(username: str, viewer: Union["User", "AnonymousUser"]) -> BlogContext:
    """Method that resolves the blog addressed by a username URL segment
    and returns the BlogContext for the rest of the request.

    Args:
        username: the <username> segment of /blogs/<username>/...
        viewer: the requesting User or AnonymousUser

    Returns:
        BlogContext: blog, owner and viewer for the request

    Raises:
        BlogNotFound: if no blog belongs to username or the blog is disabled
    """
    blog = blog_qs(username).first()
    if blog is None:
        logger.info("No blog for username [%s]", username)
        raise BlogNotFound(username)
    if not blog.is_enabled:
        logger.info("Blog for username [%s] is disabled", username)
        raise BlogNotFound(username, reason="is disabled")
    return BlogContext(blog=blog, owner=blog.owner, viewer=viewer)
