from django.contrib import admin  # type: ignore
from simple_history.admin import SimpleHistoryAdmin  # type: ignore

from .models import Article, Category, Tag


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = (
        "title",
        "blog",
        "created",
        "pk",
    )
    ordering = ["title"]


@admin.register(Category)
class CategoryHistoryAdmin(SimpleHistoryAdmin):
    fields = (
        "blog",
        "title",
        "description",
        "tags",
    )
    list_display = (
        "title",
        "blog",
        "slug",
        "pk",
    )
    history_list_display = ["title"]
    ordering = ["title"]


@admin.register(Article)
class ArticleHistoryAdmin(SimpleHistoryAdmin):
    fields = (
        "blog",
        "author",
        "title",
        "status",
        "published",
        "topped",
        "commentable",
        "abstract",
        "content",
        "tags",
    )
    list_display = (
        "title",
        "blog",
        "author",
        "status",
        "published",
        "pk",
    )
    history_list_display = ["status"]
    ordering = ["title"]
