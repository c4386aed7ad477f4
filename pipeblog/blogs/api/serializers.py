from rest_framework import serializers

from ...routes.choices import ViewKinds
from ..models import Blog


class BlogSerializer(serializers.ModelSerializer[Blog]):
    username = serializers.CharField(source="owner.username", read_only=True)
    url = serializers.CharField(source="get_absolute_url", read_only=True)

    class Meta:
        model = Blog
        fields = ["username", "title", "subtitle", "commentable", "url"]


class RouteDecisionSerializer(serializers.Serializer):
    path = serializers.CharField(allow_blank=True)
    kind = serializers.ChoiceField(choices=ViewKinds.choices)
    param = serializers.CharField(allow_blank=True)
    handled = serializers.BooleanField()
