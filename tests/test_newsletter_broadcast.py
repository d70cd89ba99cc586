from unittest.mock import patch

from tests.base import ApiTestBase

from app.core.config import settings
from app.models.newsletter_subscriber import NewsletterSubscriber
from app.services.email_service import EmailDeliveryError
from app.services.newsletter import content_to_html, send_newsletter

BROADCAST = {"subject": "Monthly update", "content": "Salaam everyone,\n\nHere is our news."}


class SendNewsletterTests(ApiTestBase):
    def setUp(self):
        super().setUp()
        self._batch_size = settings.NEWSLETTER_BATCH_SIZE

    def tearDown(self):
        settings.NEWSLETTER_BATCH_SIZE = self._batch_size
        super().tearDown()

    def test_no_recipients(self):
        result = send_newsletter([], subject="Hello there", content="Some content here")
        self.assertFalse(result["success"])
        self.assertEqual(result["message"], "No recipients specified")

    def test_recipients_are_sent_in_bcc_batches(self):
        settings.NEWSLETTER_BATCH_SIZE = 2
        recipients = [f"user{idx}@example.com" for idx in range(5)]
        with patch("app.services.newsletter.send_email") as send:
            result = send_newsletter(recipients, subject="Hello there", content="Some content here")
        self.assertEqual(send.call_count, 3)
        self.assertEqual([len(call.kwargs["to"]) for call in send.call_args_list], [2, 2, 1])
        self.assertTrue(all(call.kwargs["bcc"] for call in send.call_args_list))
        self.assertEqual(result["message"], "Newsletter sent to 5 out of 5 subscribers")

    def test_failed_batch_is_counted_and_others_continue(self):
        settings.NEWSLETTER_BATCH_SIZE = 2
        recipients = [f"user{idx}@example.com" for idx in range(4)]
        with patch(
            "app.services.newsletter.send_email",
            side_effect=[EmailDeliveryError("smtp down"), {"sent": True}],
        ):
            result = send_newsletter(recipients, subject="Hello there", content="Some content here")
        self.assertTrue(result["success"])
        self.assertEqual(result["sent"], 2)
        self.assertEqual(result["failed_batches"], 1)
        self.assertEqual(result["message"], "Newsletter sent to 2 out of 4 subscribers")

    def test_plain_content_becomes_escaped_paragraphs(self):
        self.assertEqual(content_to_html("One <b>\nline\n\nTwo"), "<p>One &lt;b&gt;<br>line</p><p>Two</p>")


class BroadcastEndpointTests(ApiTestBase):
    def setUp(self):
        super().setUp()
        self.headers = self.admin_headers()
        self._async = settings.NEWSLETTER_ASYNC
        settings.NEWSLETTER_ASYNC = False

    def tearDown(self):
        settings.NEWSLETTER_ASYNC = self._async
        super().tearDown()

    def test_requires_a_target(self):
        response = self.client.post("/api/admin/newsletter/broadcast", json=BROADCAST, headers=self.headers)
        self.assertEqual(response.status_code, 400)

    def test_short_subject_is_422(self):
        payload = dict(BROADCAST, subject="Hi", send_to_all=True)
        response = self.client.post("/api/admin/newsletter/broadcast", json=payload, headers=self.headers)
        self.assertEqual(response.status_code, 422)

    def test_test_email_sends_only_to_that_address(self):
        self.add(NewsletterSubscriber(email="fan@example.com"))
        with patch("app.services.newsletter.send_email") as send:
            response = self.client.post(
                "/api/admin/newsletter/broadcast",
                json=dict(BROADCAST, test_email="Editor@Example.com", send_to_all=True),
                headers=self.headers,
            )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(send.call_args.kwargs["to"], ["editor@example.com"])
        self.assertEqual(response.json()["total"], 1)

    def test_send_to_all_without_subscribers_is_400(self):
        with patch("app.services.newsletter.send_email") as send:
            response = self.client.post(
                "/api/admin/newsletter/broadcast", json=dict(BROADCAST, send_to_all=True), headers=self.headers
            )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "No recipients specified")
        send.assert_not_called()

    def test_send_to_all_reaches_every_subscriber(self):
        for idx in range(3):
            self.add(NewsletterSubscriber(email=f"s{idx}@example.com"))
        with patch("app.services.newsletter.send_email") as send:
            response = self.client.post(
                "/api/admin/newsletter/broadcast", json=dict(BROADCAST, send_to_all=True), headers=self.headers
            )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(sorted(send.call_args.kwargs["to"]), ["s0@example.com", "s1@example.com", "s2@example.com"])
        self.assertEqual(response.json()["message"], "Newsletter sent to 3 out of 3 subscribers")

    def test_async_mode_queues_celery_task(self):
        settings.NEWSLETTER_ASYNC = True
        with patch("app.workers.tasks.newsletter.send_broadcast.delay") as delay:
            delay.return_value.id = "task-1"
            response = self.client.post(
                "/api/admin/newsletter/broadcast", json=dict(BROADCAST, send_to_all=True), headers=self.headers
            )
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["queued"])
        self.assertEqual(response.json()["task_id"], "task-1")
        self.assertEqual(delay.call_args.kwargs["subject"], "Monthly update")
