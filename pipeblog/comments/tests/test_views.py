import pytest  # type: ignore
from django.test import TestCase  # type: ignore

from ...articles.tests.factories import ArticleFactory
from ...blogs.tests.factories import BlogFactory
from ...users.tests.factories import UserFactory
from ..models import Comment
from .factories import CommentFactory

pytestmark = pytest.mark.django_db


class TestCommentCreateView(TestCase):
    def setUp(self):
        self.blog = BlogFactory(owner__username="alice")
        self.article = ArticleFactory(blog=self.blog)
        self.user = UserFactory()
        self.url = "/blogs/alice/comments"

    def test__post_creates_comment(self):
        self.client.force_login(self.user)
        with self.assertLogs("pipeblog.comments.views", level="DEBUG"):
            response = self.client.post(self.url, {"article": self.article.pk, "content": "Nice **post**"})
        comment = Comment.objects.get()
        self.assertRedirects(response, comment.get_absolute_url(), fetch_redirect_response=False)
        self.assertEqual(comment.author, self.user)
        self.assertEqual(comment.blog, self.blog)
        self.assertIn("<strong>post</strong>", comment.content_rendered)

    def test__post_reply(self):
        parent = CommentFactory(article=self.article)
        self.client.force_login(self.user)
        self.client.post(self.url, {"article": self.article.pk, "parent": parent.pk, "content": "Agreed"})
        self.assertEqual(parent.replies.get().author, self.user)

    def test__reply_to_a_reply_is_400(self):
        parent = CommentFactory(article=self.article)
        reply = CommentFactory(article=self.article, parent=parent)
        self.client.force_login(self.user)
        response = self.client.post(self.url, {"article": self.article.pk, "parent": reply.pk, "content": "Agreed"})
        self.assertEqual(response.status_code, 400)
        self.assertFalse(reply.replies.exists())

    def test__posted_reply_is_shown_on_article_page(self):
        parent = CommentFactory(article=self.article)
        self.client.force_login(self.user)
        response = self.client.post(self.url, {"article": self.article.pk, "parent": parent.pk, "content": "Agreed"})
        reply = parent.replies.get()
        self.assertEqual(response["Location"], f"{self.article.get_absolute_url()}#comment-{reply.pk}")
        page = self.client.get(self.article.get_absolute_url())
        self.assertContains(page, f'id="comment-{reply.pk}"')

    def test__anonymous_is_forbidden(self):
        response = self.client.post(self.url, {"article": self.article.pk, "content": "Nice post"})
        self.assertEqual(response.status_code, 403)
        self.assertFalse(Comment.objects.exists())

    def test__closed_article_is_forbidden(self):
        self.article.commentable = False
        self.article.save()
        self.client.force_login(self.user)
        response = self.client.post(self.url, {"article": self.article.pk, "content": "Nice post"})
        self.assertEqual(response.status_code, 403)

    def test__closed_blog_is_forbidden(self):
        self.blog.commentable = False
        self.blog.save()
        self.client.force_login(self.user)
        response = self.client.post(self.url, {"article": self.article.pk, "content": "Nice post"})
        self.assertEqual(response.status_code, 403)

    def test__invalid_form_is_400(self):
        self.client.force_login(self.user)
        response = self.client.post(self.url, {"article": self.article.pk, "content": ""})
        self.assertEqual(response.status_code, 400)
        self.assertIn("content", response.context["form"].errors)

    def test__missing_article_is_400(self):
        self.client.force_login(self.user)
        response = self.client.post(self.url, {"article": "not-a-uuid", "content": "Nice post"})
        self.assertEqual(response.status_code, 400)

    def test__get_is_not_allowed(self):
        self.client.force_login(self.user)
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 405)


class TestCommentRepliesView(TestCase):
    def setUp(self):
        self.blog = BlogFactory(owner__username="alice")
        self.comment = CommentFactory(article=ArticleFactory(blog=self.blog))

    def test__replies(self):
        reply = CommentFactory(article=self.comment.article, parent=self.comment, author__name="Bob")
        response = self.client.get(f"/blogs/alice/comments/{self.comment.pk}")
        self.assertEqual(response.status_code, 200)
        replies = response.json()["replies"]
        self.assertEqual(len(replies), 1)
        self.assertEqual(replies[0]["id"], str(reply.pk))
        self.assertEqual(replies[0]["parent"], str(self.comment.pk))
        self.assertEqual(replies[0]["author"], "Bob")

    def test__no_replies(self):
        response = self.client.get(f"/blogs/alice/comments/{self.comment.pk}")
        self.assertEqual(response.json(), {"replies": []})

    def test__malformed_comment_id(self):
        response = self.client.get("/blogs/alice/comments/not-a-uuid")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"replies": []})

    def test__comment_of_other_blog(self):
        other = CommentFactory()
        CommentFactory(article=other.article, parent=other)
        response = self.client.get(f"/blogs/alice/comments/{other.pk}")
        self.assertEqual(response.json(), {"replies": []})
