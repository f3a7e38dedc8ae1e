"""
FraudShield Fraud Monitor Tests

Tests for the enable switch, interception hooks and result listeners.
"""

from fraudshield.models.detection import ContentCategory, FraudResult, Prediction


PHISHING_URL = "https://secure-bankoamerica.tk/login?verify=suspended&urgent=true"
SCAM_EMAIL = (
    "From: prize-office@lottery-winners.com\n"
    "Congratulations! You have been selected as the beneficiary of $2.5 million dollars. "
    "Contact us immediately and send your bank details."
)


class TestProtectionSwitch:
    """Tests for enabling and disabling protection."""

    def test_disabled_never_classifies(self, monitor):
        """Nothing reaches the engine while disabled."""
        monitor.disable()

        assert monitor.on_link_click(PHISHING_URL) is None
        assert monitor.classify("sms", "Click now") is None
        assert monitor.engine.history.total_evaluated == 0

    def test_reenable(self, monitor):
        """Protection can be turned back on."""
        monitor.set_enabled(False)
        monitor.set_enabled(True)

        assert monitor.is_enabled
        assert monitor.on_link_click(PHISHING_URL) is not None


class TestInterception:
    """Tests for event entry points."""

    def test_link_click(self, monitor):
        """Clicked links are classified as URLs."""
        result = monitor.on_link_click(PHISHING_URL)

        assert result.category == ContentCategory.URL
        assert result.blocked

    def test_rendered_email_content(self, monitor):
        """Long text with an address is treated as email."""
        result = monitor.on_content_rendered(SCAM_EMAIL)

        assert result is not None
        assert result.category == ContentCategory.EMAIL

    def test_rendered_short_text_ignored(self, monitor):
        """Text of 50 characters or less is not checked."""
        assert monitor.on_content_rendered("Win a prize at x@y.com") is None

    def test_rendered_text_without_address_ignored(self, monitor):
        """Text without an email address is not checked."""
        text = "Congratulations! You are the lucky winner of our lottery drawing this week."
        assert monitor.on_content_rendered(text) is None
        assert monitor.engine.history.total_evaluated == 0

    def test_manual_test_generate_flag(self, monitor):
        """The generate flag does not change classification."""
        plain = monitor.manual_test("sms", "Click now")
        flagged = monitor.manual_test("sms", "Click now", generate=True)

        assert plain.reasons == flagged.reasons
        assert plain.threat_level == flagged.threat_level


class TestListeners:
    """Tests for result fan-out."""

    def test_listener_receives_fraud_result(self, monitor):
        """Listeners get the standardized result."""
        received = []
        monitor.add_listener(received.append)

        result = monitor.on_link_click(PHISHING_URL)

        assert len(received) == 1
        fraud_result = received[0]
        assert isinstance(fraud_result, FraudResult)
        assert fraud_result.id == result.id
        assert fraud_result.type == ContentCategory.URL
        assert fraud_result.prediction == Prediction.MALICIOUS
        assert fraud_result.reasons == result.reasons

    def test_low_result_maps_to_safe(self, monitor):
        """Low threat is reported as safe."""
        received = []
        monitor.add_listener(received.append)

        monitor.on_link_click("https://example.com:8080/")

        assert received[0].prediction == Prediction.SAFE

    def test_no_notification_for_null(self, monitor):
        """Null results are not broadcast."""
        received = []
        monitor.add_listener(received.append)

        monitor.on_link_click("https://www.github.com/org/repo")

        assert received == []

    def test_failing_listener_isolated(self, monitor):
        """A raising listener does not affect others or the result."""
        received = []

        def broken(_):
            raise RuntimeError("boom")

        monitor.add_listener(broken)
        monitor.add_listener(received.append)

        result = monitor.classify("sms", "Click now")

        assert result is not None
        assert len(received) == 1

    def test_remove_listener(self, monitor):
        """Removed listeners stop receiving results."""
        received = []
        monitor.add_listener(received.append)
        monitor.remove_listener(received.append)

        monitor.classify("sms", "Click now")

        assert received == []
