from django.conf import settings
from rest_framework.routers import DefaultRouter, SimpleRouter

from pipeblog.blogs.api.views import BlogViewSet

if settings.DEBUG:
    router = DefaultRouter()
else:
    router = SimpleRouter()

router.register("blogs", BlogViewSet)


app_name = "api"
urlpatterns = router.urls
