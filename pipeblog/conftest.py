import pytest

from pipeblog.blogs.models import Blog
from pipeblog.blogs.tests.factories import BlogFactory
from pipeblog.users.models import User
from pipeblog.users.tests.factories import UserFactory


@pytest.fixture(autouse=True)
def media_storage(settings, tmpdir):
    settings.MEDIA_ROOT = tmpdir.strpath


@pytest.fixture
def user(db) -> User:
    return UserFactory()


@pytest.fixture
def blog(db) -> Blog:
    return BlogFactory(owner__username="alice")
