from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class RoutesConfig(AppConfig):
    name = "pipeblog.routes"
    verbose_name = _("Routes")

    def ready(self):
        # Builds and validates the path table at startup
        import pipeblog.routes.paths  # noqa: F401
