import pytest  # type: ignore
from django.test import TestCase  # type: ignore
from django.urls import reverse  # type: ignore

from ..choices import BlogStatuses
from .factories import BlogFactory

pytestmark = pytest.mark.django_db


class TestBlogList(TestCase):
    def setUp(self):
        self.beta = BlogFactory(title="Beta")
        self.alpha = BlogFactory(title="Alpha")
        self.disabled = BlogFactory(title="Closed", status=BlogStatuses.DISABLED)

    def test__lists_enabled_blogs_by_title(self):
        response = self.client.get(reverse("home"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(list(response.context["blogs"]), [self.alpha, self.beta])
        self.assertContains(response, self.alpha.get_absolute_url())
        self.assertNotContains(response, self.disabled.get_absolute_url())
