from django.views.generic import ListView  # type: ignore

from .selectors import enabled_blogs_qs


class BlogList(ListView):
    """Site index: the enabled blogs, ordered by title."""

    context_object_name = "blogs"
    paginate_by = 20
    template_name = "blogs/blog_list.html"

    def get_queryset(self):
        return enabled_blogs_qs().order_by("title")


blog_list_view = BlogList.as_view()
