from crispy_forms.helper import FormHelper  # type: ignore
from django import forms  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from ..articles.selectors import published_qs
from .models import Comment


class CommentForm(forms.ModelForm):
    """Model form for submitting a Comment, or a reply to one, on a published article of a blog."""

    class Meta:
        model = Comment
        fields = (
            "article",
            "parent",
            "content",
        )
        widgets = {
            "article": forms.HiddenInput(),
            "parent": forms.HiddenInput(),
            "content": forms.Textarea(attrs={"rows": 4}),
        }

    def __init__(self, *args, **kwargs):
        self.blog = kwargs.pop("blog")
        super().__init__(*args, **kwargs)
        self.fields["article"].queryset = published_qs(self.blog)
        # Replies are one level deep: only top-level comments can be replied to
        self.fields["parent"].queryset = Comment.objects.filter(blog=self.blog, parent__isnull=True)
        self.fields["parent"].required = False
        self.fields["content"].label = _("Comment")
        self.helper = FormHelper()
        self.helper.form_tag = False

    def clean(self):
        """Overriding clean method to check that a reply's parent comment belongs to
        the same article."""

        cl_data = super().clean()
        article = cl_data.get("article")
        parent = cl_data.get("parent")
        if parent and article and parent.article_id != article.pk:
            self.add_error("parent", forms.ValidationError(_("Replies must be on the same article.")))
        return cl_data
