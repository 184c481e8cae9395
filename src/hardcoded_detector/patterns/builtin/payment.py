"""Payment provider keys: Stripe, Square, PayPal/Braintree."""

from hardcoded_detector.patterns.models import Signature

STRIPE_SECRET_KEY = Signature(
    id="stripe_secret_key",
    name="Stripe Secret Key",
    description="Detects live Stripe secret API keys (sk_live_ prefix).",
    category="payment",
    service="Stripe",
    severity="critical",
    confidence="high",
    pattern=r"\bsk_live_[0-9a-zA-Z]{24,99}",
    flags="g",
)

STRIPE_RESTRICTED_KEY = Signature(
    id="stripe_restricted_key",
    name="Stripe Restricted Key",
    description="Detects live Stripe restricted API keys (rk_live_ prefix).",
    category="payment",
    service="Stripe",
    severity="high",
    confidence="high",
    pattern=r"\brk_live_[0-9a-zA-Z]{24,99}",
    flags="g",
)

STRIPE_PUBLISHABLE_KEY = Signature(
    id="stripe_publishable_key",
    name="Stripe Publishable Key",
    description="Detects Stripe publishable keys. Lower severity since they are semi-public.",
    category="payment",
    service="Stripe",
    severity="low",
    confidence="high",
    pattern=r"\bpk_live_[0-9a-zA-Z]{24,99}",
    flags="g",
)

SQUARE_ACCESS_TOKEN = Signature(
    id="square_access_token",
    name="Square Access Token",
    description="Detects Square production access tokens.",
    category="payment",
    service="Square",
    severity="high",
    confidence="high",
    pattern=r"\b(?:sq0atp|EAAA)[0-9A-Za-z_\-]{22,60}",
    flags="g",
)

BRAINTREE_ACCESS_TOKEN = Signature(
    id="braintree_access_token",
    name="PayPal Braintree Access Token",
    description="Detects Braintree production access tokens.",
    category="payment",
    service="PayPal",
    severity="critical",
    confidence="high",
    pattern=r"access_token\$production\$[0-9a-z]{16}\$[0-9a-f]{32}",
)

ALL_PAYMENT_SIGNATURES = [
    STRIPE_SECRET_KEY,
    STRIPE_RESTRICTED_KEY,
    STRIPE_PUBLISHABLE_KEY,
    SQUARE_ACCESS_TOKEN,
    BRAINTREE_ACCESS_TOKEN,
]
