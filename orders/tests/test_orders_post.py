import shutil
import tempfile
from unittest import mock

from django.core.files.uploadedfile import SimpleUploadedFile
from django.db import DatabaseError
from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from orders.models import Order


class OrderCreateTests(APITestCase):
    def setUp(self):
        self.url = reverse("order-create")
        self.payload = {
            "customer_name": "Jane Doe",
            "contact_number": "555-0100",
            "email": "jane@example.com",
            "service": "Website Design",
            "details": "Need a 5-page site",
        }

    def test_create_order_success_201(self):
        res = self.client.post(self.url, self.payload, format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)

        data = res.data
        self.assertIn("id", data)
        self.assertEqual(data["customer_name"], "Jane Doe")
        self.assertEqual(data["service"], "Website Design")
        self.assertEqual(data["status"], "Pending")
        self.assertEqual(data["file_url"], "")
        self.assertIsNone(data["completed_at"])
        self.assertTrue(Order.objects.filter(pk=data["id"]).exists())

    def test_no_authentication_needed(self):
        self.client.credentials(HTTP_AUTHORIZATION="Token not-a-real-token")
        res = self.client.post(self.url, self.payload, format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)

    def test_missing_fields_400(self):
        for field in ["customer_name", "contact_number", "email", "service", "details"]:
            payload = dict(self.payload)
            payload.pop(field)
            res = self.client.post(self.url, payload, format="json")
            self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST, field)
            self.assertIn(field, res.data)
        self.assertEqual(Order.objects.count(), 0)

    def test_unknown_service_400(self):
        payload = dict(self.payload, service="Web Development")
        res = self.client.post(self.url, payload, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("service", res.data)

    def test_client_cannot_choose_status(self):
        res = self.client.post(self.url, dict(self.payload, status="Completed"), format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["status"], "Pending")

    def test_store_failure_returns_generic_500(self):
        with mock.patch.object(Order.objects, "create", side_effect=DatabaseError("down")):
            with self.assertLogs("orders.store", level="ERROR"):
                res = self.client.post(self.url, self.payload, format="json")
        self.assertEqual(res.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(res.data["detail"], "Failed to place order. Please try again.")


class OrderCreateWithAttachmentTests(APITestCase):
    def setUp(self):
        self.media = tempfile.mkdtemp()
        self.override = override_settings(
            MEDIA_ROOT=self.media, MEDIA_URL="/media/", DRAWPIX_PUBLIC_BASE_URL="https://drawpix.example"
        )
        self.override.enable()
        self.url = reverse("order-create")

    def tearDown(self):
        self.override.disable()
        shutil.rmtree(self.media, ignore_errors=True)

    def test_attachment_is_uploaded_and_linked(self):
        payload = {
            "customer_name": "Jane Doe",
            "contact_number": "555-0100",
            "email": "jane@example.com",
            "service": "Logo & Brand Identity",
            "details": "Modern, minimalist",
            "file": SimpleUploadedFile("sketch.png", b"\x89PNG..."),
        }
        res = self.client.post(self.url, payload, format="multipart")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertTrue(res.data["file_url"].startswith("https://drawpix.example/media/order-attachments/"))
        self.assertTrue(res.data["file_url"].endswith("_sketch.png"))
