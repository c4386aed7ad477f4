from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..routes.choices import ViewKinds
from ..routes.helpers import blog_route_url
from ..utils.helpers import format_archive_period
from .choices import ActivityTypes

if TYPE_CHECKING:
    from datetime import datetime

    from ..blogs.models import Blog


@dataclass(frozen=True)
class Archive:
    """A month of a blog's published articles."""

    blog: "Blog"
    year: int
    month: int
    article_count: int

    @property
    def period(self) -> str:
        return format_archive_period(self.year, self.month)

    def get_absolute_url(self) -> str:
        return blog_route_url(self.blog, ViewKinds.ARCHIVE_ARTICLES, self.period)


@dataclass(frozen=True)
class Activity:
    """An entry of a blog's activity listing: a published Article or a Comment."""

    activity_type: ActivityTypes
    date: "datetime"
    object: Any
