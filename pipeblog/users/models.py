from django.contrib.auth.models import AbstractUser
from django.db.models import CharField
from django.utils.translation import gettext_lazy as _
from django_extensions.db.models import TimeStampedModel  # type: ignore

from ..utils.models import PipeblogModel
from .managers import PipeblogUserManager


class User(PipeblogModel, TimeStampedModel, AbstractUser):
    """
    Default custom user model for pipeblog. The username is the
    segment that addresses the user's blog: /blogs/<username>/.
    """

    # First and last name do not cover name patterns around the globe
    name = CharField(_("Name of User"), blank=True, max_length=255)
    first_name = None  # type: ignore
    last_name = None  # type: ignore

    objects = PipeblogUserManager()

    @property
    def display_name(self) -> str:
        return self.name if self.name else self.username

    def __str__(self):
        return self.username
