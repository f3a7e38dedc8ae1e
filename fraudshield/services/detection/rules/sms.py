"""
FraudShield SMS Rules

Patterns matched against SMS message text.
"""

from fraudshield.models.detection import ContentCategory

from .base import in_sequence, register_rules, rule, safe


SMS_RULES = (
    rule(r"congratulations|winner|selected|won|prize|reward|contest|drawing|lottery",
         "Prize scam indicators", 0.95),

    rule(r"click|link|http|bit\.ly|tinyurl|download|install|app",
         "Suspicious link request", 0.8),

    rule(r"urgent|expire|suspend|immediate|asap|now|today|24.*hours?|final",
         "Creates false urgency", 0.8),

    rule(r"free|offer|deal|discount|save|50%|75%|90%|cash|money|gift",
         "Too-good-to-be-true offers", 0.6),

    rule(r"verify|confirm|update|validate|authenticate|secure|login|password",
         "Information harvesting attempt", 0.7),

    rule(r"subscription|premium|charged|billing|cancel|unsubscribe|stop.*reply",
         "Subscription scam pattern", 0.7),

    rule(r"bank|card|account|payment|transaction|fraud|security.*alert|suspended",
         "Financial institution impersonation", 0.8),

    rule(r"package|delivery|shipment|fedex|ups|dhl|postal|redelivery|failed.*delivery",
         "Package delivery scam", 0.7),

    rule(r"tax|irs|refund|stimulus|government|social.*security|medicare|benefits",
         "Government impersonation", 0.9),

    rule(r"virus|malware|infected|security.*breach|microsoft|apple|google|tech.*support",
         "Tech support scam", 0.8),

    rule(r"dating|lonely|photos|meet|relationship|love|attractive|military|overseas",
         "Romance/social engineering scam", 0.7),

    rule(r"bitcoin|crypto|investment|trading|profit|roi|guaranteed.*returns|make.*money",
         "Cryptocurrency/investment scam", 0.8),
)


SMS_SAFE_INDICATORS = (
    safe(r"your.*appointment|meeting.*reminder|delivery.*notification|order.*confirmation"),
    safe(in_sequence("verification", "code", r"\d{4,6}", "expires", "in", r"\d+", "minutes")),
    safe(in_sequence("reply", "stop", "to", "unsubscribe") + "|" + in_sequence("text", "stop", "to", "opt", "out")),
)


register_rules(ContentCategory.SMS, SMS_RULES, SMS_SAFE_INDICATORS)
