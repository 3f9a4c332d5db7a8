"""Portfolio API views.

The storefront lists items whose status is Show. Admins list everything,
upload new items, show/hide them, and delete them together with their image.
"""

from rest_framework import generics, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from common.api.permissions import IsAdminStaff
from common.exceptions import StoreError, UploadError
from common.stores import RecordNotFound
from portfolio.controllers import PortfolioController
from portfolio.models import PortfolioItem
from .serializers import (
    PortfolioItemCreateSerializer,
    PortfolioItemSerializer,
    PortfolioStatusPatchSerializer,
)


def _not_found():
    return Response({"detail": "Portfolio item not found."}, status=status.HTTP_404_NOT_FOUND)


class PortfolioPublicListAPIView(generics.ListAPIView):
    """GET /api/portfolio/ -> visible items, newest first."""

    authentication_classes = []
    permission_classes = [AllowAny]
    serializer_class = PortfolioItemSerializer

    def get_queryset(self):
        return PortfolioItem.objects.filter(status=PortfolioItem.Status.SHOW).order_by("-created_at", "-id")


class AdminPortfolioListCreateAPIView(generics.ListCreateAPIView):
    """GET: every portfolio item. POST: upload an image and create the item."""

    permission_classes = [IsAdminStaff]
    queryset = PortfolioItem.objects.all()

    def get_serializer_class(self):
        if self.request.method == "POST":
            return PortfolioItemCreateSerializer
        return PortfolioItemSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            item = PortfolioController().create(**serializer.validated_data)
        except (StoreError, UploadError):
            return Response(
                {"detail": "Failed to add portfolio item."},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(PortfolioItemSerializer(item).data, status=status.HTTP_201_CREATED)


class AdminPortfolioDetailAPIView(APIView):
    """PATCH: show/hide. DELETE: remove the item and release its image."""

    permission_classes = [IsAdminStaff]

    def patch(self, request, pk: int):
        serializer = PortfolioStatusPatchSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            item = PortfolioController().set_status(pk, serializer.validated_data["status"])
        except RecordNotFound:
            return _not_found()
        except StoreError:
            return Response({"detail": "Failed to update portfolio item."}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(PortfolioItemSerializer(item).data, status=status.HTTP_200_OK)

    def delete(self, request, pk: int):
        try:
            PortfolioController().delete(pk)
        except RecordNotFound:
            return _not_found()
        except StoreError:
            return Response({"detail": "Failed to delete portfolio item."}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(status=status.HTTP_204_NO_CONTENT)
