from django.contrib.auth.base_user import BaseUserManager


class PipeblogUserManager(BaseUserManager):
    """Custom User model manager for pipeblog. Usernames double as blog URL segments."""

    def create_user(self, username, email=None, password=None, **extra_fields):
        """Create and save a User with the given username, email and password."""
        if not username:
            raise ValueError("Users must have a username.")
        user = self.model(
            username=self.model.normalize_username(username),
            email=self.normalize_email(email),
            **extra_fields,
        )
        user.set_password(password)
        user.save()
        return user

    def create_superuser(self, username, email=None, password=None, **extra_fields):
        """Create and save a SuperUser with the given username, email and password."""
        extra_fields.update({"is_staff": True, "is_superuser": True})
        return self.create_user(username, email=email, password=password, **extra_fields)
