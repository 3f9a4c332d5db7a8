from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.test import APITestCase, APIClient

from user_auth_app.sessions import get_session_registry

User = get_user_model()

class LoginTests(APITestCase):
    def setUp(self):
        self.url = reverse("login")
        self.client = APIClient()
        self.user = User.objects.create_user(
            username="owner@drawpix.example",
            email="owner@drawpix.example",
            password="secret12",
            is_staff=True,
        )

    def tearDown(self):
        get_session_registry().close_all()

    def test_login_success(self):
        payload = {"email": "owner@drawpix.example", "password": "secret12"}
        resp = self.client.post(self.url, payload, format="json")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertIn("token", resp.data)
        self.assertEqual(resp.data["email"], "owner@drawpix.example")
        self.assertEqual(resp.data["user_id"], self.user.id)
        self.assertTrue(get_session_registry().get(self.user).active)

    def test_login_is_case_insensitive_on_email(self):
        payload = {"email": "Owner@Drawpix.example", "password": "secret12"}
        resp = self.client.post(self.url, payload, format="json")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)

    def test_login_wrong_password(self):
        payload = {"email": "owner@drawpix.example", "password": "wrongPassword"}
        resp = self.client.post(self.url, payload, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(str(resp.data["detail"][0]), "Failed to sign in. Please check your credentials.")

    def test_login_unknown_user(self):
        payload = {"email": "nobody@drawpix.example", "password": "whatever123"}
        resp = self.client.post(self.url, payload, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("detail", resp.data)

    def test_non_staff_user_cannot_sign_in(self):
        User.objects.create_user("plain@drawpix.example", "plain@drawpix.example", "secret12")
        payload = {"email": "plain@drawpix.example", "password": "secret12"}
        resp = self.client.post(self.url, payload, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

    def test_login_missing_fields(self):
        resp = self.client.post(self.url, {"email": "owner@drawpix.example"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("password", resp.data)


class LogoutTests(APITestCase):
    def setUp(self):
        self.user = User.objects.create_user(
            "owner@drawpix.example", "owner@drawpix.example", "secret12", is_staff=True
        )
        self.token = Token.objects.create(user=self.user)

    def tearDown(self):
        get_session_registry().close_all()

    def test_logout_deletes_token_and_closes_session(self):
        session = get_session_registry().open(self.user)
        self.client.credentials(HTTP_AUTHORIZATION=f"Token {self.token.key}")

        resp = self.client.post(reverse("logout"))
        self.assertEqual(resp.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Token.objects.filter(user=self.user).exists())
        self.assertFalse(session.active)
        self.assertIsNone(get_session_registry().get(self.user))

    def test_logout_requires_auth(self):
        resp = self.client.post(reverse("logout"))
        self.assertEqual(resp.status_code, status.HTTP_401_UNAUTHORIZED)
