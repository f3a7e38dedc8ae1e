"""
FraudShield Detection Engine Tests

Tests for aggregation, classification and result construction.
"""

import time

import pytest

from fraudshield.config import Settings
from fraudshield.models.detection import AnalysisResult, ContentCategory, Prediction, ThreatLevel
from fraudshield.services.detection import AnalysisRequest, DetectionEngine, RiskScorer
from fraudshield.services.detection.engine import coerce_category
from fraudshield.utils.constants import MAX_CONTENT_LENGTH
from fraudshield.utils.exceptions import InvalidCategoryError


SCENARIO_A_URL = "https://secure-bankoamerica.tk/login?verify=suspended&urgent=true"
SCENARIO_B_URL = "https://www.github.com/org/repo"
SCENARIO_C_SMS = (
    "CONGRATULATIONS! You've won $10,000! Click this link now to claim your prize "
    "before it expires: http://bit.ly/claim-now."
)
SCENARIO_D_EMAIL = (
    "Hi team, quick reminder that the project sync is moved to 3pm Thursday in room B. "
    "Thanks, Dana."
)


class TestScenarios:
    """End-to-end classification scenarios."""

    def test_phishing_url_is_high(self, engine):
        """Free-TLD credential phishing URL."""
        result = engine.classify(ContentCategory.URL, SCENARIO_A_URL)

        assert result is not None
        assert result.threat_level == ThreatLevel.HIGH
        assert result.blocked is True
        assert "High-risk top-level domain" in result.reasons
        assert "Credential harvesting attempt" in result.reasons
        assert result.reasons == [
            "Creates false urgency",
            "Credential harvesting attempt",
            "Suspicious domain pattern with free TLD",
            "Suspicious URL parameters",
            "High-risk top-level domain",
        ]
        assert result.confidence == pytest.approx(0.99)

    def test_known_good_url_is_null(self, engine):
        """Nothing matches a plain repository link."""
        assert engine.classify(ContentCategory.URL, SCENARIO_B_URL) is None
        assert len(engine.history) == 0

    def test_prize_sms_is_high(self, engine):
        """Prize scam SMS with a shortened link."""
        result = engine.classify(ContentCategory.SMS, SCENARIO_C_SMS)

        assert result is not None
        assert result.threat_level == ThreatLevel.HIGH
        assert result.blocked is True
        assert "Prize scam indicators" in result.reasons
        assert "Suspicious link request" in result.reasons
        assert "Creates false urgency" in result.reasons

    def test_meeting_reminder_email_is_null(self, engine):
        """A short legitimate reminder has no signals."""
        assert engine.classify(ContentCategory.EMAIL, SCENARIO_D_EMAIL) is None

    def test_medium_confidence_formula(self, engine):
        """Prize wording plus a generic greeting: weight 1.55, two reasons."""
        result = engine.classify(ContentCategory.EMAIL, "Congratulations, dear friend.")

        total_weight = 0.95 + 0.6
        expected = min(min(total_weight / 3, 0.98) + min(2 * 0.05, 0.15), 0.99)

        assert result.threat_level == ThreatLevel.MEDIUM
        assert result.reasons == [
            "Prize/lottery scam indicators",
            "Generic greeting typical of mass scams",
        ]
        assert result.confidence == pytest.approx(expected)
        assert result.confidence == pytest.approx(0.6166666, rel=1e-5)
        assert result.blocked is False

    def test_medium_blocked_above_confidence(self, engine):
        """Medium results block once confidence exceeds 0.75."""
        result = engine.classify(ContentCategory.EMAIL, "Congratulations, dear friend, on your promotion.")

        # 0.95 + 0.6 + 0.4 = 1.95 -> 0.65 + 0.15 = 0.80
        assert result.threat_level == ThreatLevel.MEDIUM
        assert result.confidence == pytest.approx(0.80)
        assert result.blocked is True

    def test_short_sms_compounds(self, engine):
        """Short SMS adds weight only on top of other reasons."""
        result = engine.classify(ContentCategory.SMS, "Click now")

        assert result.reasons == [
            "Suspicious link request",
            "Creates false urgency",
            "Short message with suspicious content",
        ]
        assert result.threat_level == ThreatLevel.MEDIUM
        assert result.confidence == pytest.approx(1.9 / 3 + 0.15)
        assert result.blocked is True

    def test_low_threshold_boundary(self, engine):
        """A single 0.6 signal reaches Low exactly."""
        result = engine.classify(ContentCategory.URL, "https://example.com:8080/")

        assert result.threat_level == ThreatLevel.LOW
        assert result.reasons == ["Non-standard port number detected"]
        assert result.confidence == pytest.approx(0.25)
        assert result.blocked is False

    def test_threshold_uses_float_sum(self, engine):
        """0.7 + 0.6 + 0.7 sums just under 2.0 and stays Medium."""
        breakdown = engine.score(ContentCategory.URL, "https://bit.ly/login.php")

        assert breakdown.reasons == (
            "Shortened URL detected",
            "Credential harvesting attempt",
            "Suspicious file path detected",
        )
        assert breakdown.total_weight == pytest.approx(2.0)
        assert breakdown.total_weight < 2.0

        result = engine.classify(ContentCategory.URL, "https://bit.ly/login.php")
        assert result.threat_level == ThreatLevel.MEDIUM
        assert result.blocked is True

    def test_below_noise_floor_is_null(self, engine):
        """Matched but too weak to report."""
        breakdown = engine.score(ContentCategory.EMAIL, "See you there at noon.")

        assert breakdown.reasons == ("Common spelling errors in scam emails",)
        assert breakdown.total_weight == pytest.approx(0.4)
        assert engine.classify(ContentCategory.EMAIL, "See you there at noon.") is None
        assert len(engine.history) == 0


class TestAggregation:
    """Tests for weight aggregation."""

    def test_safe_content_dampens(self, engine):
        """Safe indicators scale the total by 0.6."""
        breakdown = engine.score(ContentCategory.URL, "https://github.com/login/verify")

        assert breakdown.is_safe_content
        assert breakdown.rule_weight == pytest.approx(1.4)
        assert breakdown.total_weight == pytest.approx(0.84)

        result = engine.classify(ContentCategory.URL, "https://github.com/login/verify")
        assert result.threat_level == ThreatLevel.LOW

    def test_multiplier_applies_to_structural_signals(self, engine):
        """Dampening covers rule and structural weight alike."""
        breakdown = engine.score(ContentCategory.URL, "https://example.org/login.php")

        assert breakdown.safe_multiplier == pytest.approx(0.6)
        assert breakdown.rule_weight == pytest.approx(0.6)
        assert breakdown.extra_weight == pytest.approx(0.7)
        assert breakdown.total_weight == pytest.approx(0.78)

    def test_duplicate_reason_counted_once(self, engine):
        """Rule and structure both flag homographs; the reason appears once."""
        breakdown = engine.score(ContentCategory.URL, "https://аpple.com/")

        assert breakdown.reasons == ("Possible homograph/character substitution attack",)
        assert breakdown.rule_weight == pytest.approx(0.95)
        assert breakdown.extra_weight == pytest.approx(0.95)

        result = engine.classify(ContentCategory.URL, "https://аpple.com/")
        assert result.threat_level == ThreatLevel.MEDIUM
        assert result.confidence == pytest.approx(1.9 / 3 + 0.05)

    def test_malformed_url_still_classified(self, engine):
        """Parse failure is evidence, not an error."""
        result = engine.classify(ContentCategory.URL, "https://exa mple.com/login")

        assert result is not None
        assert result.reasons == ["Credential harvesting attempt", "Malformed URL structure"]
        assert result.threat_level == ThreatLevel.MEDIUM

    def test_monotonic_in_added_indicators(self, engine):
        """Appending fraud indicators never lowers the score."""
        text = "Dear friend, please read this."
        additions = [" Act now.", " Send bitcoin.", " Wire transfer today.", " URGENT!!!", " 5 million"]
        levels = [None, ThreatLevel.LOW, ThreatLevel.MEDIUM, ThreatLevel.HIGH]

        previous = engine.score(ContentCategory.EMAIL, text)
        previous_result = engine.classify(ContentCategory.EMAIL, text)

        for addition in additions:
            text += addition
            current = engine.score(ContentCategory.EMAIL, text)
            current_result = engine.classify(ContentCategory.EMAIL, text)

            assert current.total_weight >= previous.total_weight
            previous_level = previous_result.threat_level if previous_result else None
            current_level = current_result.threat_level if current_result else None
            assert levels.index(current_level) >= levels.index(previous_level)
            if previous_result and current_result:
                assert current_result.confidence >= previous_result.confidence

            previous, previous_result = current, current_result

    def test_deterministic(self, engine):
        """Same input, same classification."""
        first = engine.classify(ContentCategory.SMS, SCENARIO_C_SMS)
        second = engine.classify(ContentCategory.SMS, SCENARIO_C_SMS)

        assert first.threat_level == second.threat_level
        assert first.confidence == second.confidence
        assert first.reasons == second.reasons
        assert first.id != second.id


class TestResultConstruction:
    """Tests for result limits and null outcomes."""

    @pytest.mark.parametrize("content", ["", "   ", "\n\t"])
    def test_blank_content_is_null(self, engine, content):
        """Blank content yields no opinion."""
        for category in ContentCategory:
            assert engine.classify(category, content) is None
        assert len(engine.history) == 0

    def test_disabled_engine_is_null(self, history):
        """A disabled engine never classifies."""
        engine = DetectionEngine(history=history, enabled=False, settings=Settings())

        assert engine.classify(ContentCategory.URL, SCENARIO_A_URL) is None
        assert history.total_evaluated == 0

    def test_preview_truncated(self, engine):
        """Previews keep the first 300 characters."""
        content = "Congratulations, dear friend. " + "x" * 500
        result = engine.classify(ContentCategory.EMAIL, content)

        assert len(result.content_preview) == 300
        assert result.content_preview == content[:300]

    def test_reasons_truncated(self, engine):
        """At most ten reasons, in discovery order."""
        content = (
            "URGENT: Congratulations dear friend, click here. A prince left an inheritance. "
            "Your account is suspended. IRS tax refund pending. Wire transfer the fee, "
            "contact immediately via Western Union. Strictly confidential. "
            "From noreply. With love. Your computer infected. $5,000"
        )
        breakdown = engine.score(ContentCategory.EMAIL, content)
        result = engine.classify(ContentCategory.EMAIL, content)

        assert len(breakdown.reasons) > 10
        assert result.reasons == list(breakdown.reasons[:10])
        assert result.threat_level == ThreatLevel.HIGH

    def test_id_prefixed_with_category(self, engine):
        """IDs carry the category name."""
        result = engine.classify(ContentCategory.SMS, "Click now")

        assert result.id.startswith("sms_")
        assert result.timestamp.tzinfo is not None

    def test_binary_like_content_never_raises(self, engine):
        """Arbitrary characters are plain text to the engine."""
        content = "\x00\x01\ud800￿ garbage \x7f"
        for category in ContentCategory:
            engine.classify(category, content)

        result = engine.classify(ContentCategory.URL, content)
        assert result.reasons == ["Malformed URL structure"]
        assert "\ud800" not in result.content_preview

    def test_results_are_immutable(self, engine):
        """Results cannot be modified once created."""
        result = engine.classify(ContentCategory.SMS, "Click now")

        with pytest.raises(Exception):
            result.blocked = False

    def test_result_model_is_frozen(self):
        assert AnalysisResult.model_config["frozen"] is True

    def test_analysis_request_length(self):
        request = AnalysisRequest(category=ContentCategory.SMS, raw_content="Click now")

        assert request.content_length == 9


class TestEvaluationBounds:
    """Tests for evaluation cost on long input."""

    @pytest.mark.parametrize("category,unit", [
        (ContentCategory.EMAIL, "act "),
        (ContentCategory.EMAIL, "your order has been "),
        (ContentCategory.EMAIL, "from: a@gmail.com subject: "),
        (ContentCategory.SMS, "verification code 1234 expires in 5 "),
        (ContentCategory.SMS, "reply stop to "),
        (ContentCategory.URL, "secure-verify-24 "),
    ])
    def test_worst_case_at_cap(self, engine, category, unit):
        """Repeated partial matches at the length cap finish quickly."""
        content = (unit * (MAX_CONTENT_LENGTH // len(unit) + 1))[:MAX_CONTENT_LENGTH]

        start = time.perf_counter()
        engine.classify(category, content)
        elapsed = time.perf_counter() - start

        assert elapsed < 1.0

    def test_content_beyond_cap_not_analyzed(self, history):
        """Only the first max_content_length characters are scored."""
        engine = DetectionEngine(history=history, settings=Settings(max_content_length=20))

        assert engine.classify(ContentCategory.SMS, "x" * 20 + " Click now") is None

        result = engine.classify(ContentCategory.SMS, "Click now" + "x" * 20)
        assert result is not None
        assert result.content_preview == "Click now" + "x" * 20

    def test_oversized_content_is_fast(self, engine):
        """Ten times the cap costs no more than the cap."""
        start = time.perf_counter()
        engine.classify(ContentCategory.EMAIL, "act " * 25000)
        elapsed = time.perf_counter() - start

        assert elapsed < 1.0


class TestCategories:
    """Tests for category coercion."""

    def test_string_categories(self, engine):
        """Category names are accepted case-insensitively."""
        assert coerce_category("URL") == ContentCategory.URL
        assert coerce_category(" sms ") == ContentCategory.SMS
        assert engine.classify("url", SCENARIO_A_URL).category == ContentCategory.URL

    def test_unknown_category(self, engine):
        """Only url, email and sms are valid."""
        with pytest.raises(InvalidCategoryError):
            engine.classify("fax", "hello")


class TestRiskScorer:
    """Tests for thresholds and block decisions."""

    def test_threat_levels(self):
        scorer = RiskScorer()

        assert scorer.get_threat_level(2.0) == ThreatLevel.HIGH
        assert scorer.get_threat_level(1.99) == ThreatLevel.MEDIUM
        assert scorer.get_threat_level(1.2) == ThreatLevel.MEDIUM
        assert scorer.get_threat_level(1.19) == ThreatLevel.LOW
        assert scorer.get_threat_level(0.6) == ThreatLevel.LOW
        assert scorer.get_threat_level(0.59) is None

    def test_confidence_caps(self):
        scorer = RiskScorer()

        assert scorer.calculate_confidence(30.0, 20) == pytest.approx(0.99)
        assert scorer.calculate_confidence(0.6, 1) == pytest.approx(0.25)
        assert scorer.calculate_confidence(1.5, 10) == pytest.approx(0.65)

    def test_confidence_monotonic_in_weight(self):
        scorer = RiskScorer()
        values = [scorer.calculate_confidence(w / 10, 3) for w in range(6, 40)]

        assert values == sorted(values)

    def test_block_decision(self):
        scorer = RiskScorer()

        assert scorer.should_block(ThreatLevel.HIGH, 0.1)
        assert scorer.should_block(ThreatLevel.MEDIUM, 0.76)
        assert not scorer.should_block(ThreatLevel.MEDIUM, 0.75)
        assert not scorer.should_block(ThreatLevel.LOW, 0.99)

    def test_predictions(self):
        scorer = RiskScorer()

        assert scorer.get_prediction(ThreatLevel.HIGH) == Prediction.MALICIOUS
        assert scorer.get_prediction(ThreatLevel.MEDIUM) == Prediction.SUSPICIOUS
        assert scorer.get_prediction(ThreatLevel.LOW) == Prediction.SAFE
