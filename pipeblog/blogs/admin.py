from django.contrib import admin  # type: ignore
from simple_history.admin import SimpleHistoryAdmin  # type: ignore

from .models import Blog


@admin.register(Blog)
class BlogHistoryAdmin(SimpleHistoryAdmin):
    fields = (
        "owner",
        "title",
        "subtitle",
        "status",
        "commentable",
        "article_list_page_size",
        "feed_output_mode",
        "feed_output_size",
    )
    list_display = (
        "title",
        "owner",
        "status",
        "created",
        "pk",
    )
    history_list_display = ["status"]
    ordering = ["title"]
