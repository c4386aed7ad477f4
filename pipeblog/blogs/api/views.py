from rest_framework import status
from rest_framework.decorators import action
from rest_framework.mixins import RetrieveModelMixin
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from ...routes.dispatch import dispatch_path
from ..models import Blog
from ..selectors import enabled_blogs_qs
from .serializers import BlogSerializer, RouteDecisionSerializer


class BlogViewSet(RetrieveModelMixin, GenericViewSet):
    """Read-only API for enabled blogs, looked up by their owner's username."""

    serializer_class = BlogSerializer
    queryset = Blog.objects.all()
    lookup_field = "owner__username"
    lookup_url_kwarg = "username"
    lookup_value_regex = "[^/]+"

    def get_queryset(self):
        return enabled_blogs_qs()

    @action(detail=True)
    def route(self, request, username=None):
        """Reports which content view a route path under the blog dispatches to."""
        self.get_object()
        path = request.query_params.get("path", "")
        decision = dispatch_path(path)
        serializer = RouteDecisionSerializer(
            {"path": path, "kind": decision.kind, "param": decision.param, "handled": bool(decision)}
        )
        return Response(status=status.HTTP_200_OK, data=serializer.data)
