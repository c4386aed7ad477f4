from django.contrib import admin  # type: ignore
from simple_history.admin import SimpleHistoryAdmin  # type: ignore

from .models import Comment


@admin.register(Comment)
class CommentHistoryAdmin(SimpleHistoryAdmin):
    fields = (
        "blog",
        "article",
        "author",
        "parent",
        "content",
    )
    list_display = (
        "article",
        "author",
        "created",
        "pk",
    )
    history_list_display = ["author"]
    ordering = ["-created"]
