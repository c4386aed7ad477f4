import logging
from typing import TYPE_CHECKING, Any

from django.core.exceptions import ValidationError  # type: ignore
from django.http import HttpResponseRedirect, JsonResponse  # type: ignore
from django.utils.functional import cached_property  # type: ignore
from django.views.generic import FormView, View  # type: ignore
from rules.contrib.views import PermissionRequiredMixin  # type: ignore

from ..articles.selectors import published_qs
from ..utils.views import BlogContextMixin
from .forms import CommentForm
from .selectors import comment_replies_qs

if TYPE_CHECKING:
    from ..articles.models import Article
    from .models import Comment

logger = logging.getLogger(__name__)


class CommentCreateView(BlogContextMixin, PermissionRequiredMixin, FormView):
    """View to submit a Comment on one of the blog's published articles. POST only.
    Anonymous viewers and articles closed for comments get a 403.

    Returns:
        [redirect]: [Redirects to the new Comment's anchor on the article page.]
    """

    form_class = CommentForm
    http_method_names = ["post"]
    permission_required = "comments.add_comment"
    raise_exception = True
    template_name = "comments/comment_form.html"

    def dispatch(self, request, *args, **kwargs):
        """Overwritten to answer non-POST requests with a 405 before checking permissions."""
        if request.method.lower() not in self.http_method_names:
            return self.http_method_not_allowed(request, *args, **kwargs)
        return super().dispatch(request, *args, **kwargs)

    @cached_property
    def article(self) -> "Article | None":
        article_id = self.request.POST.get("article")
        if not article_id:
            return None
        try:
            return published_qs(self.blog).select_related("blog__owner").filter(pk=article_id).first()
        except ValidationError:
            return None

    def form_invalid(self, form):
        return self.render_to_response(self.get_context_data(form=form), status=400)

    def form_valid(self, form):
        comment = form.save(commit=False)
        comment.blog = self.blog
        comment.author = self.blog_context.viewer
        comment.save()
        logger.debug("Comment [%s] added to article [%s]", comment.pk, comment.article_id)
        return HttpResponseRedirect(comment.get_absolute_url())

    def get_form_kwargs(self) -> dict[str, Any]:
        kwargs = super().get_form_kwargs()
        kwargs.update({"blog": self.blog})
        return kwargs

    def get_permission_object(self):
        return self.article


comment_create_view = CommentCreateView.as_view()


def serialize_reply(reply: "Comment") -> dict[str, Any]:
    return {
        "id": str(reply.pk),
        "parent": str(reply.parent_id),
        "author": reply.author.display_name,
        "content": reply.content_rendered,
        "created": reply.created.isoformat(),
    }


class CommentRepliesView(BlogContextMixin, View):
    """View that returns the replies to a comment as JSON. Unknown or malformed
    comment ids yield an empty list."""

    http_method_names = ["get", "head", "options"]

    def get(self, request, *args, **kwargs):
        replies = comment_replies_qs(self.blog, self.param)
        return JsonResponse({"replies": [serialize_reply(reply) for reply in replies]})


comment_replies_view = CommentRepliesView.as_view()
