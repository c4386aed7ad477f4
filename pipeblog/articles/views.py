from typing import Any

from django.contrib.auth import get_user_model  # type: ignore
from django.utils.functional import cached_property  # type: ignore
from django.views.generic import DetailView, ListView, TemplateView  # type: ignore

from ..comments.forms import CommentForm
from ..comments.selectors import article_comments_qs
from ..utils.helpers import parse_archive_period
from ..utils.views import BlogContextMixin
from .models import Article, Category, Tag
from .selectors import (
    archive_articles_qs,
    author_articles_qs,
    blog_activities,
    blog_archives,
    blog_authors_qs,
    blog_categories_qs,
    blog_tags_qs,
    category_articles_qs,
    published_articles_qs,
    search_articles_qs,
    tag_articles_qs,
)

User = get_user_model()


class ArticleList(BlogContextMixin, ListView):
    """View to list a blog's published articles, paginated by the blog's page size."""

    model = Article
    template_name = "articles/article_list.html"

    def get_paginate_by(self, queryset):
        return self.blog.article_list_page_size

    def get_queryset(self):
        return published_articles_qs(self.blog)


article_list_view = ArticleList.as_view()


class ArchiveArticleList(ArticleList):
    """Filter ArticleList by the YYYY/MM archive period in the route parameter."""

    @cached_property
    def period(self) -> tuple[int, int] | None:
        return parse_archive_period(self.param)

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)
        context.update({"period": self.period})
        return context

    def get_queryset(self):
        if not self.period:
            return Article.objects.none()
        year, month = self.period
        return archive_articles_qs(self.blog, year, month)


archive_article_list_view = ArchiveArticleList.as_view()


class AuthorArticleList(ArticleList):
    """Filter ArticleList by the author username in the route parameter."""

    @cached_property
    def author(self) -> User | None:
        return User.objects.filter(username=self.param).first()

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)
        context.update({"author": self.author})
        return context

    def get_queryset(self):
        return author_articles_qs(self.blog, self.param)


author_article_list_view = AuthorArticleList.as_view()


class CategoryArticleList(ArticleList):
    """Filter ArticleList by the category slug in the route parameter."""

    @cached_property
    def category(self) -> Category | None:
        return Category.objects.filter(blog=self.blog, slug=self.param).first()

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)
        context.update({"category": self.category})
        return context

    def get_queryset(self):
        return category_articles_qs(self.blog, self.param)


category_article_list_view = CategoryArticleList.as_view()


class TagArticleList(ArticleList):
    """Filter ArticleList by the tag title in the route parameter."""

    @cached_property
    def tag(self) -> Tag | None:
        return Tag.objects.filter(blog=self.blog, title=self.param).first()

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)
        context.update({"tag": self.tag})
        return context

    def get_queryset(self):
        return tag_articles_qs(self.blog, self.param)


tag_article_list_view = TagArticleList.as_view()


class ArticleDetail(BlogContextMixin, DetailView):
    """DetailView to show a single published article with its comments."""

    model = Article
    template_name = "articles/article_detail.html"

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)
        context.update(
            {
                "comments": article_comments_qs(self.object),
                "comment_form": CommentForm(blog=self.blog, initial={"article": self.object.pk}),
                "can_comment": self.blog_context.viewer.has_perm("comments.add_comment", self.object),
            }
        )
        return context

    def get_queryset(self):
        return published_articles_qs(self.blog)


article_detail_view = ArticleDetail.as_view()


class ActivityList(BlogContextMixin, TemplateView):
    """View to list a blog's latest articles and comments."""

    template_name = "articles/activity_list.html"

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)
        context.update({"activities": blog_activities(self.blog, self.blog.article_list_page_size)})
        return context


activity_list_view = ActivityList.as_view()


class ArchiveList(BlogContextMixin, ListView):
    """View to list the months of a blog's published articles."""

    context_object_name = "archives"
    template_name = "articles/archive_list.html"

    def get_queryset(self):
        return blog_archives(self.blog)


archive_list_view = ArchiveList.as_view()


class AuthorList(BlogContextMixin, ListView):
    """View to list the authors of a blog's published articles."""

    context_object_name = "authors"
    template_name = "articles/author_list.html"

    def get_queryset(self):
        return blog_authors_qs(self.blog)


author_list_view = AuthorList.as_view()


class CategoryList(BlogContextMixin, ListView):
    """View to list a blog's categories."""

    context_object_name = "categories"
    template_name = "articles/category_list.html"

    def get_queryset(self):
        return blog_categories_qs(self.blog)


category_list_view = CategoryList.as_view()


class TagList(BlogContextMixin, ListView):
    """View to list a blog's tags with their published article counts."""

    context_object_name = "tags"
    template_name = "articles/tag_list.html"

    def get_queryset(self):
        return blog_tags_qs(self.blog)


tag_list_view = TagList.as_view()


class ArticleSearch(ListView):
    """View to search the published articles of every enabled blog by the key query parameter."""

    context_object_name = "articles"
    paginate_by = 20
    template_name = "articles/article_search.html"

    @cached_property
    def key(self) -> str:
        return self.request.GET.get("key", "").strip()

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)
        context.update({"key": self.key})
        return context

    def get_queryset(self):
        if not self.key:
            return Article.objects.none()
        return search_articles_qs(self.key)


article_search_view = ArticleSearch.as_view()
