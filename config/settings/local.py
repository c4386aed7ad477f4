from .base import *  # noqa
from .base import BASE_DIR, DATABASES
from .local_settings import BRANCH, get_additional_local_settings

# GENERAL
# ------------------------------------------------------------------------------
DEBUG = True
SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "local-only-secret-key-do-not-use-in-production")  # noqa: F405
ALLOWED_HOSTS = ["localhost", "0.0.0.0", "127.0.0.1"]

# DATABASES
# ------------------------------------------------------------------------------
locals().update(get_additional_local_settings(BRANCH=BRANCH, DATABASES=DATABASES, BASE_DIR=BASE_DIR))

# LOGGING
# ------------------------------------------------------------------------------
LOGGING["loggers"]["pipeblog"]["level"] = "DEBUG"  # noqa: F405
