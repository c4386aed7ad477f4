from unittest.mock import MagicMock, patch

import pytest  # type: ignore
from django.http import HttpResponse  # type: ignore
from django.test import TestCase  # type: ignore

from ...articles.tests.factories import ArticleFactory, CategoryFactory, TagFactory
from ...blogs.choices import BlogStatuses
from ...blogs.context import BlogContext
from ...blogs.tests.factories import BlogFactory
from ..choices import ViewKinds
from ..paths import PATH_TABLE
from ..views import ROUTE_HANDLERS

pytestmark = pytest.mark.django_db


def test__every_path_table_kind_has_a_handler():
    assert set(ROUTE_HANDLERS) == set(PATH_TABLE.keywords)


class TestRoutePathView(TestCase):
    def setUp(self):
        self.blog = BlogFactory(owner__username="alice")
        self.tag = TagFactory(blog=self.blog, title="python")
        self.category = CategoryFactory(blog=self.blog, title="Tech", tags=[self.tag])
        self.article = ArticleFactory(blog=self.blog, tags=[self.tag])
        self.other_article = ArticleFactory(blog=self.blog)

    def test__category_articles_handler_receives_context_and_param(self):
        handler = MagicMock(return_value=HttpResponse("ok"))

        with patch("pipeblog.routes.views.ROUTE_HANDLERS", {ViewKinds.CATEGORY_ARTICLES: handler}):
            response = self.client.get("/blogs/alice/categories/tech")

        self.assertEqual(response.status_code, 200)
        handler.assert_called_once()
        _, kwargs = handler.call_args
        self.assertIsInstance(kwargs["blog_context"], BlogContext)
        self.assertEqual(kwargs["blog_context"].blog, self.blog)
        self.assertEqual(kwargs["blog_context"].owner, self.blog.owner)
        self.assertEqual(kwargs["param"], "tech")

    def test__category_articles_end_to_end(self):
        response = self.client.get("/blogs/alice/categories/tech")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["category"], self.category)
        self.assertIn(self.article, response.context["article_list"])
        self.assertNotIn(self.other_article, response.context["article_list"])

    def test__exact_routes_render(self):
        for route in ["activities", "archives", "authors", "categories", "tags"]:
            with self.subTest(route=route):
                response = self.client.get(f"/blogs/alice/{route}")
                self.assertEqual(response.status_code, 200)

    def test__trailing_slash_route(self):
        response = self.client.get("/blogs/alice/tags/")
        self.assertEqual(response.status_code, 200)
        self.assertIn(self.tag, response.context["tags"])

    def test__atom_feed(self):
        response = self.client.get("/blogs/alice/atom")
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response["Content-Type"].startswith("application/atom+xml"))

    def test__unhandled_route_is_404(self):
        with self.assertLogs("pipeblog.routes.dispatch", level="INFO") as logs:
            response = self.client.get("/blogs/alice/nonexistent/segment")
        self.assertEqual(response.status_code, 404)
        self.assertIn("Unhandled blog route path [nonexistent/segment]", logs.output[0])

    def test__tag_url_resolves_to_its_tag(self):
        tag = TagFactory(blog=self.blog, title="c/c++")
        self.article.tags.add(tag)
        response = self.client.get(tag.get_absolute_url())
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["tag"], tag)
        self.assertIn(self.article, response.context["article_list"])

    def test__unresolvable_param_is_empty_page(self):
        response = self.client.get("/blogs/alice/tags/nonexistent")
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.context["tag"])
        self.assertEqual(list(response.context["article_list"]), [])

    def test__unknown_blog_is_404_before_dispatch(self):
        handler = MagicMock(return_value=HttpResponse("ok"))

        with patch("pipeblog.routes.views.ROUTE_HANDLERS", {ViewKinds.TAGS: handler}):
            response = self.client.get("/blogs/nobody/tags")

        self.assertEqual(response.status_code, 404)
        handler.assert_not_called()

    def test__disabled_blog_is_404_before_dispatch(self):
        self.blog.status = BlogStatuses.DISABLED
        self.blog.save()
        handler = MagicMock(return_value=HttpResponse("ok"))

        with patch("pipeblog.routes.views.ROUTE_HANDLERS", {ViewKinds.TAGS: handler}):
            response = self.client.get("/blogs/alice/tags")

        self.assertEqual(response.status_code, 404)
        handler.assert_not_called()

    def test__blog_home(self):
        response = self.client.get("/blogs/alice/")
        self.assertEqual(response.status_code, 200)
        self.assertIn(self.article, response.context["article_list"])

    def test__article_detail(self):
        response = self.client.get(self.article.get_absolute_url())
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["article"], self.article)

    def test__article_detail_without_trailing_slash_redirects(self):
        with self.assertNoLogs("pipeblog.routes.dispatch", level="INFO"):
            response = self.client.get(self.article.get_absolute_url().rstrip("/"))
        self.assertRedirects(response, self.article.get_absolute_url(), status_code=301)


def test__blog_root_without_trailing_slash_redirects(client, blog):
    response = client.get("/blogs/alice")
    assert response.status_code == 301
    assert response["Location"] == "/blogs/alice/"
