"""Generic assignments. Lower confidence, mostly entropy-filtered."""

from hardcoded_detector.patterns.models import Signature

JWT_TOKEN = Signature(
    id="jwt_token",
    name="JSON Web Token",
    description="Detects JWTs (three-part base64url tokens starting with eyJ).",
    category="authentication",
    service="Generic",
    severity="medium",
    confidence="medium",
    pattern=r"\beyJ[A-Za-z0-9_\-]{10,}\.eyJ[A-Za-z0-9_\-]{10,}\.[A-Za-z0-9_\-]{10,}",
    flags="g",
)

BEARER_TOKEN = Signature(
    id="bearer_token",
    name="Bearer Token",
    description="Detects hardcoded bearer authorization tokens.",
    category="authentication",
    service="Generic",
    severity="medium",
    confidence="low",
    pattern=r"\bbearer\s+[A-Za-z0-9_\-\.=]{20,}",
    use_entropy_filter=True,
)

BASIC_AUTH_URL = Signature(
    id="basic_auth_url",
    name="Basic Auth in URL",
    description="Detects HTTP(S) URLs with an embedded username:password.",
    category="authentication",
    service="Generic",
    severity="medium",
    confidence="medium",
    pattern=r"https?://[^\s:/@\"']+:[^\s@/\"']{3,}@[^\s\"']+",
)

HARDCODED_PASSWORD = Signature(
    id="hardcoded_password",
    name="Hardcoded Password",
    description="Detects password assignments in code (password = '...').",
    category="generic",
    service="Generic",
    severity="medium",
    confidence="low",
    pattern=r"\b(?:password|passwd|pwd)[\"'\s]*[:=]\s*[\"'][^\"'\s]{8,}[\"']",
)

GENERIC_API_KEY = Signature(
    id="generic_api_key",
    name="Generic API Key Assignment",
    description="Detects generic api_key / apikey assignments.",
    category="generic",
    service="Generic",
    severity="low",
    confidence="low",
    pattern=r"\b(?:api[_\-]?key|apikey)[\"'\s]*[:=]\s*[\"'][A-Za-z0-9_\-]{16,64}[\"']",
    use_entropy_filter=True,
)

GENERIC_SECRET = Signature(
    id="generic_secret",
    name="Generic Secret Assignment",
    description="Detects generic secret / client_secret assignments.",
    category="generic",
    service="Generic",
    severity="low",
    confidence="low",
    pattern=r"\b(?:client_secret|secret_key|secret)[\"'\s]*[:=]\s*[\"'][A-Za-z0-9_\-/+=]{16,}[\"']",
    use_entropy_filter=True,
)

ALL_GENERIC_SIGNATURES = [
    JWT_TOKEN,
    BEARER_TOKEN,
    BASIC_AUTH_URL,
    HARDCODED_PASSWORD,
    GENERIC_API_KEY,
    GENERIC_SECRET,
]
