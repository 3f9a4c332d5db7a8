"""Offers API views.

The storefront lists Active offers. Admins list every offer, create new ones,
switch them between Active and Inactive, and delete them.
"""

from rest_framework import generics, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from common.api.permissions import IsAdminStaff
from common.exceptions import StoreError
from common.stores import RecordNotFound
from offers.controllers import OfferController
from offers.models import Offer
from .serializers import OfferSerializer, OfferStatusPatchSerializer


class OfferPublicListAPIView(generics.ListAPIView):
    """GET /api/offers/ -> active offers, newest first."""

    authentication_classes = []
    permission_classes = [AllowAny]
    serializer_class = OfferSerializer

    def get_queryset(self):
        return Offer.objects.filter(status=Offer.Status.ACTIVE).order_by("-created_at", "-id")


class AdminOfferListCreateAPIView(generics.ListCreateAPIView):
    """GET: every offer. POST: create an offer."""

    permission_classes = [IsAdminStaff]
    serializer_class = OfferSerializer
    queryset = Offer.objects.all()

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            offer = OfferController().create(**serializer.validated_data)
        except StoreError:
            return Response({"detail": "Failed to create offer."}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(OfferSerializer(offer).data, status=status.HTTP_201_CREATED)


class AdminOfferDetailAPIView(APIView):
    """PATCH: set status (Active/Inactive). DELETE: remove the offer."""

    permission_classes = [IsAdminStaff]

    def patch(self, request, pk: int):
        serializer = OfferStatusPatchSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            offer = OfferController().set_status(pk, serializer.validated_data["status"])
        except RecordNotFound:
            return Response({"detail": "Offer not found."}, status=status.HTTP_404_NOT_FOUND)
        except StoreError:
            return Response({"detail": "Failed to update offer."}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(OfferSerializer(offer).data, status=status.HTTP_200_OK)

    def delete(self, request, pk: int):
        try:
            OfferController().delete(pk)
        except RecordNotFound:
            return Response({"detail": "Offer not found."}, status=status.HTTP_404_NOT_FOUND)
        except StoreError:
            return Response({"detail": "Failed to delete offer."}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(status=status.HTTP_204_NO_CONTENT)


class AdminOfferToggleAPIView(APIView):
    """POST /api/admin/offers/{id}/toggle/ -> flip Active/Inactive."""

    permission_classes = [IsAdminStaff]

    def post(self, request, pk: int):
        try:
            offer = OfferController().toggle(pk)
        except RecordNotFound:
            return Response({"detail": "Offer not found."}, status=status.HTTP_404_NOT_FOUND)
        except StoreError:
            return Response({"detail": "Failed to update offer."}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(OfferSerializer(offer).data, status=status.HTTP_200_OK)
