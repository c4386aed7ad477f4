from typing import TYPE_CHECKING

from django.contrib.syndication.views import Feed  # type: ignore
from django.utils.feedgenerator import Atom1Feed  # type: ignore

from ..blogs.choices import FeedOutputModes
from .selectors import published_articles_qs

if TYPE_CHECKING:
    from ..blogs.context import BlogContext
    from .models import Article


class BlogAtomFeed(Feed):
    """Atom 1.0 feed of a blog's latest published articles. Entry summaries are the
    article abstracts or, with FeedOutputModes.FULL, the rendered article content."""

    feed_type = Atom1Feed

    def get_object(self, request, blog_context: "BlogContext", param: str = "") -> "BlogContext":
        return blog_context

    def title(self, obj: "BlogContext") -> str:
        return obj.blog.title

    def subtitle(self, obj: "BlogContext") -> str:
        return obj.blog.subtitle

    def link(self, obj: "BlogContext") -> str:
        return obj.blog.get_absolute_url()

    def author_name(self, obj: "BlogContext") -> str:
        return obj.owner.display_name

    def items(self, obj: "BlogContext"):
        return published_articles_qs(obj.blog).order_by("-published")[: obj.blog.feed_output_size]

    def item_title(self, item: "Article") -> str:
        return item.title

    def item_description(self, item: "Article") -> str:
        if item.blog.feed_output_mode == FeedOutputModes.FULL:
            return item.content_rendered
        return item.abstract

    def item_author_name(self, item: "Article") -> str:
        return item.author.display_name

    def item_pubdate(self, item: "Article"):
        return item.published

    def item_updateddate(self, item: "Article"):
        return item.modified

    def item_categories(self, item: "Article") -> list[str]:
        return [tag.title for tag in item.tags.all()]


blog_atom_feed_view = BlogAtomFeed()
