from django.db.models import TextChoices  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class ArticleStatuses(TextChoices):
    """TextChoices to describe different statuses for Article objects."""

    DRAFT = "draft", _("Draft")
    PUBLISHED = "published", _("Published")


class ActivityTypes(TextChoices):
    """TextChoices for the entries of a blog's activity listing."""

    ARTICLE = "article", _("Article")
    COMMENT = "comment", _("Comment")
