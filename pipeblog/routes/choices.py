from django.db.models import TextChoices  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class ViewKinds(TextChoices):
    """TextChoices for the content views a blog route path can dispatch to."""

    ACTIVITIES = "activities", _("Activities")
    ARCHIVES = "archives", _("Archives")
    AUTHORS = "authors", _("Authors")
    CATEGORIES = "categories", _("Categories")
    TAGS = "tags", _("Tags")
    COMMENTS = "comments", _("Comments")
    ATOM_FEED = "atom_feed", _("Atom Feed")
    ARCHIVE_ARTICLES = "archive_articles", _("Archive Articles")
    AUTHOR_ARTICLES = "author_articles", _("Author Articles")
    CATEGORY_ARTICLES = "category_articles", _("Category Articles")
    TAG_ARTICLES = "tag_articles", _("Tag Articles")
    COMMENT_REPLIES = "comment_replies", _("Comment Replies")
    UNHANDLED = "unhandled", _("Unhandled")
