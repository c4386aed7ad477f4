from django.db.models import TextChoices  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class BlogStatuses(TextChoices):
    """TextChoices to describe whether a Blog is served to readers."""

    ENABLED = "enabled", _("Enabled")
    DISABLED = "disabled", _("Disabled")


class FeedOutputModes(TextChoices):
    """TextChoices for what an Atom feed entry carries for each Article."""

    ABSTRACT = "abstract", _("Abstract")
    FULL = "full", _("Full text")
