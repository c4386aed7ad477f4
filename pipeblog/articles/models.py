import re

from autoslug import AutoSlugField  # type: ignore
from django.conf import settings  # type: ignore
from django.core.validators import RegexValidator  # type: ignore
from django.db import models  # type: ignore
from django.urls import reverse  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore
from django_extensions.db.models import TimeStampedModel  # type: ignore
from markdownfield.models import RenderedMarkdownField  # type: ignore
from markdownfield.validators import VALIDATOR_CLASSY  # type: ignore
from simple_history.models import HistoricalRecords  # type: ignore

from ..routes.choices import ViewKinds
from ..routes.helpers import blog_route_url
from ..routes.paths import SEPARATOR
from ..utils.fields import PipeblogMarkdownField
from ..utils.helpers import now_datetime
from ..utils.models import PipeblogModel
from .choices import ArticleStatuses


class Tag(PipeblogModel, TimeStampedModel):
    """Model to store a blog's tags. Tags are addressed by title: /tags/<title>."""

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["blog", "title"],
                name="%(app_label)s_%(class)s_unique_blog_title",
            ),
            # Enforce that title can't start or end with the route separator
            models.CheckConstraint(
                name="%(app_label)s_%(class)s_title_not_separator_bound",
                condition=~models.Q(title__startswith=SEPARATOR) & ~models.Q(title__endswith=SEPARATOR),
            ),
        ]

    blog = models.ForeignKey(to="blogs.Blog", on_delete=models.CASCADE, related_name="tags")
    title = models.CharField(
        max_length=100,
        validators=[
            RegexValidator(
                regex=rf"^{re.escape(SEPARATOR)}|{re.escape(SEPARATOR)}$",
                inverse_match=True,
                message=_("Tag titles can't start or end with a slash."),
            )
        ],
    )

    def get_absolute_url(self):
        return blog_route_url(self.blog, ViewKinds.TAG_ARTICLES, self.title)

    def __str__(self):
        return self.title


class Category(PipeblogModel, TimeStampedModel):
    """Model to store a blog's categories. A category groups the articles that
    carry any of its tags."""

    class Meta:
        verbose_name_plural = "categories"

    blog = models.ForeignKey(to="blogs.Blog", on_delete=models.CASCADE, related_name="categories")
    description = models.TextField(blank=True)
    history = HistoricalRecords()
    slug = AutoSlugField(populate_from="title", unique_with="blog")
    tags = models.ManyToManyField(to=Tag, related_name="categories", blank=True)
    title = models.CharField(max_length=255)

    def get_absolute_url(self):
        return blog_route_url(self.blog, ViewKinds.CATEGORY_ARTICLES, self.slug)

    def __str__(self):
        return self.title


class Article(PipeblogModel, TimeStampedModel):
    """Model to store blog articles as HTML Markdown pages."""

    class Meta:
        constraints = [
            # Enforce that status is a valid ArticleStatuses choice
            models.CheckConstraint(
                name="%(app_label)s_%(class)s_valid_status",
                condition=models.Q(status__in=ArticleStatuses.values),
            ),
        ]
        ordering = ["-topped", "-published"]

    ArticleStatuses = ArticleStatuses

    abstract = models.TextField(blank=True)
    author = models.ForeignKey(to=settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="articles")
    blog = models.ForeignKey(to="blogs.Blog", on_delete=models.CASCADE, related_name="articles")
    commentable = models.BooleanField(default=True)
    content = PipeblogMarkdownField(rendered_field="content_rendered", validator=VALIDATOR_CLASSY)
    content_rendered = RenderedMarkdownField()
    history = HistoricalRecords()
    published = models.DateTimeField(default=now_datetime)
    slug = AutoSlugField(populate_from="title", unique_with="blog")
    status = models.CharField(max_length=20, choices=ArticleStatuses.choices, default=ArticleStatuses.DRAFT)
    tags = models.ManyToManyField(to=Tag, related_name="articles", blank=True)
    title = models.CharField(max_length=255)
    topped = models.BooleanField(default=False)

    def get_absolute_url(self):
        return reverse("blogs:article-detail", kwargs={"username": self.blog.owner.username, "slug": self.slug})

    @property
    def is_published(self) -> bool:
        return self.status == ArticleStatuses.PUBLISHED

    def __str__(self):
        return self.title
