from functools import partial
from urllib.parse import urlparse

import bleach
from bleach.linkifier import LinkifyFilter
from django.conf import settings  # type: ignore
from markdown import markdown  # type: ignore
from markdownfield.models import MarkdownField  # type: ignore
from markdownfield.util import blacklist_link  # type: ignore

EXTENSIONS = getattr(settings, "MARKDOWN_EXTENSIONS", ["fenced_code"])
EXTENSION_CONFIGS = getattr(settings, "MARKDOWN_EXTENSION_CONFIGS", {})


def format_link(attrs: dict[tuple, str], new: bool = False):
    """
    Linkify callback for bleach. Links leaving SITE_URL open in a new tab and
    are marked external, nofollow and noopener.
    """
    try:
        p = urlparse(attrs[(None, "href")])
    except KeyError:
        # no href, probably an anchor
        return attrs

    if not any([p.scheme, p.netloc, p.path]) and p.fragment:
        # the link isn't going anywhere, probably a fragment link
        return attrs

    if hasattr(settings, "SITE_URL"):
        c = urlparse(settings.SITE_URL)
        # Relative links stay on the blog
        link_is_external = bool(p.netloc) and p.netloc != c.netloc
    else:
        # Assume true for safety
        link_is_external = True

    if link_is_external:
        attrs[(None, "target")] = "_blank"
        attrs[(None, "class")] = attrs.get((None, "class"), "") + " external"
        attrs[(None, "rel")] = "nofollow noopener noreferrer"

    return attrs


def render_markdown(value: str, validator) -> str:
    """Renders markdown text to HTML and sanitizes it according to a markdownfield validator."""
    dirty = markdown(text=value, extensions=EXTENSIONS, extension_configs=EXTENSION_CONFIGS)

    if not validator.sanitize:
        # danger!
        return dirty

    if validator.linkify:
        cleaner = bleach.Cleaner(
            tags=validator.allowed_tags,
            attributes=validator.allowed_attrs,
            css_sanitizer=validator.css_sanitizer,
            filters=[partial(LinkifyFilter, callbacks=[format_link, blacklist_link])],
        )
    else:
        cleaner = bleach.Cleaner(
            tags=validator.allowed_tags,
            attributes=validator.allowed_attrs,
            css_sanitizer=validator.css_sanitizer,
        )
    return cleaner.clean(dirty)


class PipeblogMarkdownField(MarkdownField):
    def pre_save(self, model_instance, add):
        value = super().pre_save(model_instance, add)

        if not self.rendered_field:
            return value

        setattr(model_instance, self.rendered_field, render_markdown(value, self.validator))
        return value
