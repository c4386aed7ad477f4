from unittest.mock import MagicMock

import pytest  # type: ignore
from django.contrib.auth.models import AnonymousUser  # type: ignore
from django.http import HttpResponse  # type: ignore
from django.test import RequestFactory, TestCase  # type: ignore

from ...utils.exceptions import BlogNotFound
from ..decorators import blog_context_required
from .factories import BlogFactory

pytestmark = pytest.mark.django_db


class TestBlogContextRequired(TestCase):
    def setUp(self):
        self.factory = RequestFactory()
        self.blog = BlogFactory(owner__username="alice")
        self.view = MagicMock(return_value=HttpResponse("ok"))
        self.decorated = blog_context_required(self.view)

    def test__replaces_username_with_blog_context(self):
        request = self.factory.get("/blogs/alice/tags")
        request.user = AnonymousUser()

        response = self.decorated(request, username="alice", route="tags")

        self.assertEqual(response.status_code, 200)
        _, kwargs = self.view.call_args
        self.assertNotIn("username", kwargs)
        self.assertEqual(kwargs["route"], "tags")
        self.assertEqual(kwargs["blog_context"].blog, self.blog)
        self.assertEqual(kwargs["blog_context"].viewer, request.user)

    def test__view_not_called_for_unknown_blog(self):
        request = self.factory.get("/blogs/nobody/tags")
        request.user = AnonymousUser()

        with self.assertRaises(BlogNotFound):
            self.decorated(request, username="nobody", route="tags")
        self.view.assert_not_called()
