"""Offers API serializers."""

from rest_framework import serializers

from ..models import Offer


class OfferSerializer(serializers.ModelSerializer):
    """Full offer representation; also validates admin create payloads."""

    title = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    price = serializers.CharField(max_length=50)
    status = serializers.ChoiceField(choices=Offer.Status.choices, required=False, default=Offer.Status.ACTIVE)

    class Meta:
        model = Offer
        fields = ["id", "title", "description", "price", "status", "created_at"]
        read_only_fields = ["id", "created_at"]


class OfferStatusPatchSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Offer.Status.choices)
