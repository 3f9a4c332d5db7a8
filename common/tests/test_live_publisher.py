from django.test import SimpleTestCase

from common.live import SnapshotPublisher


class SnapshotPublisherTests(SimpleTestCase):
    def setUp(self):
        self.rows = ["a", "b"]
        self.publisher = SnapshotPublisher("letters", lambda: self.rows)

    def test_subscribe_delivers_current_snapshot_immediately(self):
        received = []
        self.publisher.subscribe(received.append)
        self.assertEqual(received, [["a", "b"]])

    def test_publish_fans_out_full_snapshot_to_every_subscriber(self):
        first, second = [], []
        self.publisher.subscribe(first.append)
        self.publisher.subscribe(second.append)

        self.rows = ["a", "b", "c"]
        self.publisher.publish()

        self.assertEqual(first[-1], ["a", "b", "c"])
        self.assertEqual(second[-1], ["a", "b", "c"])
        # independent copies
        self.assertIsNot(first[-1], second[-1])

    def test_cancel_stops_delivery_and_is_idempotent(self):
        received = []
        sub = self.publisher.subscribe(received.append)
        sub.cancel()
        sub.cancel()
        self.publisher.publish()
        self.assertEqual(len(received), 1)
        self.assertFalse(sub.active)
        self.assertEqual(self.publisher.subscriber_count, 0)

    def test_failing_subscriber_does_not_block_others(self):
        def broken(snapshot):
            raise RuntimeError("boom")

        received = []
        self.publisher.subscribe(broken)
        self.publisher.subscribe(received.append)
        with self.assertLogs("common.live", level="ERROR"):
            self.publisher.publish()
        self.assertEqual(received[-1], ["a", "b"])
