from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework import status

from common.catalog import SERVICES


class ServiceCatalogAPIView(APIView):
    """
    GET /api/services/

    Returns the compiled-in list of services the storefront offers:
    title, description, icon and min_price for each entry.

    Authentication: none
    Permissions: AllowAny
    """

    authentication_classes = []          # No authentication required
    permission_classes = [AllowAny]      # Explicitly allow public access

    def get(self, request):
        return Response([s.as_dict() for s in SERVICES], status=status.HTTP_200_OK)
