from django.conf import settings  # type: ignore
from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.urls import reverse  # type: ignore
from django_extensions.db.models import TimeStampedModel  # type: ignore
from simple_history.models import HistoricalRecords  # type: ignore

from ..utils.models import PipeblogModel
from .choices import BlogStatuses, FeedOutputModes


class Blog(PipeblogModel, TimeStampedModel):
    """Model to store a User's blog and its reader-facing settings. A blog is
    addressed by its owner's username."""

    class Meta:
        constraints = [
            # Enforce that status is a valid BlogStatuses choice
            models.CheckConstraint(
                name="%(app_label)s_%(class)s_valid_status",
                condition=models.Q(status__in=BlogStatuses.values),
            ),
            # Enforce that feed_output_mode is a valid FeedOutputModes choice
            models.CheckConstraint(
                name="%(app_label)s_%(class)s_valid_feed_output_mode",
                condition=models.Q(feed_output_mode__in=FeedOutputModes.values),
            ),
        ]

    BlogStatuses = BlogStatuses
    FeedOutputModes = FeedOutputModes

    article_list_page_size = models.PositiveSmallIntegerField(
        default=20,
        validators=[MinValueValidator(1), MaxValueValidator(100)],
    )
    commentable = models.BooleanField(default=True)
    feed_output_mode = models.CharField(
        max_length=20,
        choices=FeedOutputModes.choices,
        default=FeedOutputModes.ABSTRACT,
    )
    feed_output_size = models.PositiveSmallIntegerField(
        default=20,
        validators=[MinValueValidator(1), MaxValueValidator(100)],
    )
    history = HistoricalRecords()
    owner = models.OneToOneField(to=settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="blog")
    status = models.CharField(max_length=20, choices=BlogStatuses.choices, default=BlogStatuses.ENABLED)
    subtitle = models.CharField(max_length=255, blank=True)
    title = models.CharField(max_length=255)

    def get_absolute_url(self):
        return reverse("blogs:home", kwargs={"username": self.owner.username})

    @property
    def is_enabled(self) -> bool:
        return self.status == BlogStatuses.ENABLED

    def __str__(self):
        return self.title
