from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django_extensions.db.models import TimeStampedModel  # type: ignore
from markdownfield.models import RenderedMarkdownField  # type: ignore
from markdownfield.validators import VALIDATOR_STANDARD  # type: ignore
from rules.contrib.models import RulesModelBase, RulesModelMixin  # type: ignore
from simple_history.models import HistoricalRecords  # type: ignore

from ..utils.fields import PipeblogMarkdownField
from ..utils.models import PipeblogModel
from .rules import add_comment


class Comment(RulesModelMixin, PipeblogModel, TimeStampedModel, metaclass=RulesModelBase):
    """Model to store readers' comments on articles. Comments with a parent are replies."""

    class Meta:
        ordering = ["created"]
        rules_permissions = {
            "add": add_comment,
        }

    article = models.ForeignKey(to="articles.Article", on_delete=models.CASCADE, related_name="comments")
    author = models.ForeignKey(to=settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="comments")
    blog = models.ForeignKey(to="blogs.Blog", on_delete=models.CASCADE, related_name="comments")
    content = PipeblogMarkdownField(rendered_field="content_rendered", validator=VALIDATOR_STANDARD)
    content_rendered = RenderedMarkdownField()
    history = HistoricalRecords()
    parent = models.ForeignKey(
        to="self",
        on_delete=models.CASCADE,
        related_name="replies",
        null=True,
        blank=True,
    )

    def get_absolute_url(self):
        return f"{self.article.get_absolute_url()}#comment-{self.pk}"

    def __str__(self):
        return f"Comment by {self.author} on {self.article}"
