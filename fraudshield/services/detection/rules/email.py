"""
FraudShield Email Rules

Patterns matched against email subject and body text.
"""

from fraudshield.models.detection import ContentCategory

from .base import in_sequence, register_rules, rule, safe


EMAIL_RULES = (
    # Urgency and pressure tactics
    rule(r"urgent|immediate|expires?|suspend|asap|act.*now|respond.*within|final.*notice|last.*chance",
         "Creates false urgency", 0.8),

    rule(r"click.*here|download.*now|verify.*now|update.*now|confirm.*now|access.*now",
         "Generic call-to-action", 0.7),

    rule(r"congratulations|winner|selected|lottery|prize|won|claim|reward|contest|drawing",
         "Prize/lottery scam indicators", 0.95),

    # 419 scams
    rule(r"prince|inheritance|million|billion|dollars?|deceased|beneficiary|estate|diplomat|barrister|solicitor",
         "Advance fee fraud (419 scam) indicators", 0.95),

    rule(r"suspended|terminated|blocked|locked|deactivated|compromised|hacked|unauthorized",
         "Account threat tactics", 0.85),

    rule(r"tax.*refund|irs|fbi|homeland.*security|customs|immigration|social.*security|medicare|stimulus",
         "Government authority impersonation", 0.9),

    rule(r"dear\s+(sir|madam|friend|customer|valued|esteemed|recipient)",
         "Generic greeting typical of mass scams", 0.6),

    rule(r"beneficiary|transfer.*funds|claim.*money|wire.*transfer|bank.*details|routing.*number|account.*number",
         "Financial fraud language", 0.85),

    rule(r"contact.*immediately|respond.*within|act.*now|time.*sensitive|expire.*soon|final.*warning",
         "High-pressure tactics", 0.8),

    rule(r"western.*union|money.*gram|bitcoin|cryptocurrency|gift.*card|itunes.*card|steam.*card|prepaid.*card",
         "Suspicious payment methods", 0.9),

    rule(r"confidential|secret|private.*matter|classified|discreet|between.*us|" + in_sequence("do", "not", "tell"),
         "Secrecy tactics to avoid scrutiny", 0.7),

    rule(r"\b(recieve|occured|seperate|definately|alot|loose|there|their|your|you're)\b",
         "Common spelling errors in scam emails", 0.4),

    rule(r"noreply|no-reply|donotreply|notification|alert|security|admin|support.*@(gmail|yahoo|hotmail|outlook)",
         "Suspicious sender using free email service", 0.6),

    rule(r"love|romance|relationship|dating|meet|attractive|photos|lonely|widow|military|overseas",
         "Romance scam indicators", 0.7),

    rule(r"computer.*infected|virus.*detected|malware|windows.*license|microsoft.*support|apple.*support",
         "Tech support scam indicators", 0.8),
)


EMAIL_SAFE_INDICATORS = (
    safe(in_sequence(
        r"from:",
        r"@(gmail|yahoo|hotmail|outlook)\.com",
        r"subject:\s*(meeting|project|reminder|invoice|receipt|newsletter)",
    )),
    safe(r"unsubscribe|privacy.*policy|" + in_sequence("terms", "of", "service") + r"|customer.*service"),
    safe(
        in_sequence("thank", "you", "for", "your", "order")
        + "|" + in_sequence("your", "order", "has", "been", "shipped")
        + r"|delivery.*confirmation"
    ),
)


register_rules(ContentCategory.EMAIL, EMAIL_RULES, EMAIL_SAFE_INDICATORS)
