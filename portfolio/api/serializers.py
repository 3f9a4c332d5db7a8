"""Portfolio API serializers."""

from rest_framework import serializers

from ..models import PortfolioItem


class PortfolioItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = PortfolioItem
        fields = ["id", "title", "description", "image_url", "status", "created_at"]
        read_only_fields = fields


class PortfolioItemCreateSerializer(serializers.Serializer):
    """Admin create payload: multipart with `image`, or JSON with an existing `image_url`."""

    title = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    image = serializers.FileField(required=False, allow_empty_file=False)
    image_url = serializers.CharField(required=False, allow_blank=True, max_length=500, default="")
    status = serializers.ChoiceField(
        choices=PortfolioItem.Status.choices, required=False, default=PortfolioItem.Status.SHOW
    )

    def validate(self, attrs):
        if attrs.get("image") is None and not attrs.get("image_url"):
            raise serializers.ValidationError({"image": "Please attach an image."})
        return attrs


class PortfolioStatusPatchSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=PortfolioItem.Status.choices)
