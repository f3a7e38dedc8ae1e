"""
FraudShield URL Rules

Patterns matched against the raw URL text.
"""

from fraudshield.models.detection import ContentCategory

from .base import register_rules, rule, safe


URL_RULES = (
    # URL shorteners
    rule(r"bit\.ly|tinyurl|t\.co|goo\.gl|short\.link|is\.gd|ow\.ly|buff\.ly",
         "Shortened URL detected", 0.7),

    # Urgency and social engineering
    rule(r"urgent|verify|suspended|expires?|immediate|asap|now|today|24.*hours?",
         "Creates false urgency", 0.8),

    # Prize and lottery scams
    rule(r"winner|congratulations|lottery|prize|selected|won|claim|reward",
         "Prize/lottery scam indicators", 0.9),

    # Credential harvesting
    rule(r"login|signin|account|bank|paypal|amazon|apple|microsoft|google|verify|update|confirm",
         "Credential harvesting attempt", 0.6),

    # Raw IP host
    rule(r"[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}",
         "IP address instead of domain", 0.95),

    rule(r"secure-.*\.(tk|ml|ga|cf)|-secure\.(tk|ml|ga|cf)|verify.*\.(tk|ml|ga|cf)",
         "Suspicious domain pattern with free TLD", 0.9),

    # Typosquatting and brand impersonation
    rule(r"payp[a4]l|g[o0][o0]gle|micr[o0]s[o0]ft|[a4]m[a4]z[o0]n|[a4]pple|f[a4]ceb[o0][o0]k|tw[i1]tter|netfl[i1]x",
         "Possible brand impersonation/typosquatting", 0.85),

    rule(r"[?&](account|login|verify|update|confirm|suspend|lock|expire|urgent)=",
         "Suspicious URL parameters", 0.7),

    # Punycode, Cyrillic and Greek look-alikes
    rule(r"xn--|[а-я]|[αβγδεζηθικλμνξοπρστυφχψω]|[аеорсукх]",
         "Possible homograph/character substitution attack", 0.95),

    rule(r"\.(exe|bat|scr|cmd|pif|com|jar|zip|rar|dmg|apk|deb|rpm)([?#]|$)",
         "Suspicious executable file type", 0.8),
)


URL_SAFE_INDICATORS = (
    safe(r"^https://(www\.)?(google|microsoft|apple|amazon|github|stackoverflow|wikipedia|mozilla|linkedin|youtube|twitter|facebook|instagram)\.com"),
    # Educational, government and non-profit domains
    safe(r"^https://[a-z0-9-]+\.(edu|gov|org)($|/)"),
    # Direct document and image links
    safe(r"^https://[a-z0-9-]+\.(com|net|org)/[a-z0-9/-]*\.(pdf|doc|docx|jpg|jpeg|png|gif)$"),
)


register_rules(ContentCategory.URL, URL_RULES, URL_SAFE_INDICATORS)
