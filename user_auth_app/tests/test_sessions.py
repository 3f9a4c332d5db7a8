from unittest import mock

from django.contrib import admin
from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.authtoken.models import Token

from orders.store import orders_publisher
from user_auth_app.sessions import AdminSessionRegistry, get_session_registry

User = get_user_model()


class AdminSessionRegistryTests(TestCase):
    def setUp(self):
        self.registry = AdminSessionRegistry()
        self.alice = User.objects.create_user("alice@example.com", "alice@example.com", "secret12", is_staff=True)
        self.bob = User.objects.create_user("bob@example.com", "bob@example.com", "secret12", is_staff=True)
        self.baseline = orders_publisher.subscriber_count

    def tearDown(self):
        self.registry.close_all()

    def test_open_is_idempotent_per_user(self):
        first = self.registry.open(self.alice)
        self.assertIs(self.registry.open(self.alice), first)
        self.assertEqual(len(self.registry), 1)
        self.assertEqual(orders_publisher.subscriber_count, self.baseline + 1)

    def test_each_admin_gets_own_dashboard(self):
        a = self.registry.open(self.alice)
        b = self.registry.open(self.bob)
        self.assertIsNot(a.dashboard, b.dashboard)
        self.assertEqual(orders_publisher.subscriber_count, self.baseline + 2)

    def test_close_cancels_dashboard_subscription(self):
        session = self.registry.open(self.alice)
        self.registry.close(self.alice)
        self.assertFalse(session.active)
        self.assertIsNone(self.registry.get(self.alice))
        self.assertEqual(orders_publisher.subscriber_count, self.baseline)
        # closing twice is harmless
        self.registry.close(self.alice)

    def test_reopen_after_close_creates_fresh_session(self):
        first = self.registry.open(self.alice)
        self.registry.close(self.alice)
        second = self.registry.open(self.alice)
        self.assertIsNot(first, second)
        self.assertTrue(second.active)

    def test_close_all(self):
        self.registry.open(self.alice)
        self.registry.open(self.bob)
        self.registry.close_all()
        self.assertEqual(len(self.registry), 0)
        self.assertEqual(orders_publisher.subscriber_count, self.baseline)

    def test_app_registry_is_a_singleton(self):
        self.assertIs(get_session_registry(), get_session_registry())
        self.assertIsInstance(get_session_registry(), AdminSessionRegistry)


class SignOutAdminActionTests(TestCase):
    def test_sign_out_closes_sessions_and_revokes_tokens(self):
        user = User.objects.create_user("carol@example.com", "carol@example.com", "secret12", is_staff=True)
        Token.objects.create(user=user)
        session = get_session_registry().open(user)
        model_admin = admin.site._registry[User]

        self.assertTrue(model_admin.dashboard_open(user))
        with mock.patch.object(model_admin, "message_user") as message_user:
            model_admin.sign_out(mock.Mock(), User.objects.filter(pk=user.pk))

        self.assertFalse(session.active)
        self.assertFalse(model_admin.has_token(user))
        self.assertFalse(model_admin.dashboard_open(user))
        message_user.assert_called_once()
