import shutil
import smtplib
import tempfile
import uuid
from unittest import mock

from django.core import mail
from django.core.files.uploadedfile import SimpleUploadedFile
from django.template import TemplateDoesNotExist
from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from common.exceptions import UploadError
from orders.models import Order
from .helpers import create_admin, create_order


class OrderDeliverTests(APITestCase):
    def setUp(self):
        self.media = tempfile.mkdtemp()
        self.override = override_settings(
            MEDIA_ROOT=self.media, MEDIA_URL="/media/", DRAWPIX_PUBLIC_BASE_URL="https://drawpix.example"
        )
        self.override.enable()

        self.admin, self.admin_token = create_admin()
        self.order = create_order(email="jane@example.com")
        self.url = reverse("order-deliver", args=[self.order.id])
        self.client.credentials(HTTP_AUTHORIZATION=f"Token {self.admin_token.key}")

    def tearDown(self):
        self.override.disable()
        shutil.rmtree(self.media, ignore_errors=True)

    def payload(self, price="$250.00"):
        return {"file": SimpleUploadedFile("final.zip", b"deliverable"), "price": price}

    def test_deliver_success(self):
        res = self.client.post(self.url, self.payload(), format="multipart")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["outcome"], "delivered")
        self.assertEqual(res.data["order"]["status"], "Completed")
        self.assertEqual(res.data["order"]["price"], "$250.00")
        url = res.data["order"]["delivery_file_url"]
        self.assertTrue(url.startswith("https://drawpix.example/media/delivery-files/"))
        self.assertIn(url, mail.outbox[0].body)
        self.assertEqual(len(mail.outbox), 1)

    def test_email_failure_is_distinct_outcome_not_error(self):
        with mock.patch("orders.notifications.send_mail", side_effect=smtplib.SMTPException("refused")):
            with self.assertLogs("orders", level="WARNING"):
                res = self.client.post(self.url, self.payload(), format="multipart")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["outcome"], "delivered_notification_failed")
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, Order.Status.COMPLETED)
        self.assertEqual(self.order.price, "$250.00")
        self.assertNotEqual(self.order.delivery_file_url, "")

    def test_email_template_error_still_reports_delivered(self):
        with mock.patch("orders.notifications.render_to_string", side_effect=TemplateDoesNotExist("delivery.txt")):
            with self.assertLogs("orders", level="WARNING"):
                res = self.client.post(self.url, self.payload(price="$1"), format="multipart")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["outcome"], "delivered_notification_failed")
        self.assertEqual(res.data["order"]["status"], "Completed")

    def test_missing_file_400(self):
        res = self.client.post(self.url, {"price": "$10"}, format="multipart")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("file", res.data)

    def test_blank_price_400(self):
        res = self.client.post(self.url, self.payload(price="  "), format="multipart")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, Order.Status.PENDING)

    def test_upload_failure_500_and_no_state_change(self):
        with mock.patch("common.uploads.UploadGateway.put", side_effect=UploadError("down")):
            res = self.client.post(self.url, self.payload(), format="multipart")
        self.assertEqual(res.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(res.data["detail"], "Failed to complete delivery. Please try again.")
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, Order.Status.PENDING)

    def test_unknown_order_404(self):
        res = self.client.post(reverse("order-deliver", args=[uuid.uuid4()]), self.payload(), format="multipart")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_requires_auth_401(self):
        self.client.credentials()
        res = self.client.post(self.url, self.payload(), format="multipart")
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
