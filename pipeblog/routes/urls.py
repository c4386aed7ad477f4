from django.urls import path  # type: ignore
from django.views.generic import RedirectView  # type: ignore

from .views import blog_article_detail_view, blog_home_view, route_path_view

app_name = "blogs"

urlpatterns = [
    path("<str:username>/", view=blog_home_view, name="home"),
    path("<str:username>/articles/<slug:slug>/", view=blog_article_detail_view, name="article-detail"),
    # Matched ahead of the route catch-all, which would otherwise swallow it
    path(
        "<str:username>/articles/<slug:slug>",
        view=RedirectView.as_view(pattern_name="blogs:article-detail", permanent=True, query_string=True),
        name="article-detail-redirect",
    ),
    path("<str:username>/<path:route>", view=route_path_view, name="route"),
]
