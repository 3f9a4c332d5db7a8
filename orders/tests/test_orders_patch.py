import uuid
from unittest import mock

from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.test import APITestCase

from common.exceptions import StoreError
from orders.models import Order
from .helpers import create_admin, create_order

User = get_user_model()


class OrderPatchTests(APITestCase):
    def setUp(self):
        self.admin, self.admin_token = create_admin()
        self.plain = User.objects.create_user("plain@example.com", "plain@example.com", "pass1234")
        self.plain_token = Token.objects.create(user=self.plain)

        self.order = create_order()
        self.url = reverse("admin-order-detail", args=[self.order.id])

    def auth(self, token):
        self.client.credentials(HTTP_AUTHORIZATION=f"Token {token.key}")

    def test_patch_status_success_by_admin(self):
        self.auth(self.admin_token)
        res = self.client.patch(self.url, {"status": "In Progress"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["id"], str(self.order.id))
        self.assertEqual(res.data["status"], "In Progress")
        # full representation
        for key in ["customer_name", "contact_number", "email", "service", "details", "created_at", "price"]:
            self.assertIn(key, res.data)

    def test_completed_back_to_pending_allowed(self):
        Order.objects.filter(pk=self.order.pk).update(status="Completed")
        self.auth(self.admin_token)
        res = self.client.patch(self.url, {"status": "Pending"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["status"], "Pending")

    def test_unauthenticated_401(self):
        res = self.client.patch(self.url, {"status": "Completed"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_forbidden_if_not_staff_403(self):
        self.auth(self.plain_token)
        res = self.client.patch(self.url, {"status": "Completed"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_invalid_status_400(self):
        self.auth(self.admin_token)
        res = self.client.patch(self.url, {"status": "foobar"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, "Pending")

    def test_extra_fields_cause_400(self):
        self.auth(self.admin_token)
        res = self.client.patch(self.url, {"status": "Completed", "price": "$1"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_not_found_404(self):
        self.auth(self.admin_token)
        bad = reverse("admin-order-detail", args=[uuid.uuid4()])
        res = self.client.patch(bad, {"status": "Completed"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_store_failure_500(self):
        self.auth(self.admin_token)
        with mock.patch("orders.store.OrderStore.update_status", side_effect=StoreError("down")):
            res = self.client.patch(self.url, {"status": "Completed"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(res.data["detail"], "Failed to update order status. Please try again.")
