from django.http import Http404  # type: ignore


class BlogNotFound(Http404):
    """Exception raised when the username segment of a blog URL does not
    resolve to an enabled blog. Subclasses Http404 so that Django answers
    with a not-found page and no downstream view runs."""

    def __init__(self, username: str, reason: str = "does not exist"):
        super().__init__(f"Blog for {username} {reason}.")

        self.username = username
        self.reason = reason
