from django.conf import settings
from django.contrib import admin
from django.urls import include, path

from pipeblog.articles.views import article_search_view
from pipeblog.blogs.views import blog_list_view

urlpatterns = [
    path("", view=blog_list_view, name="home"),
    path("search/", view=article_search_view, name="search"),
    path(settings.ADMIN_URL, admin.site.urls),
    path("blogs/", include("pipeblog.routes.urls", namespace="blogs")),
    # API base url
    path("api/", include("config.api_router")),
]
