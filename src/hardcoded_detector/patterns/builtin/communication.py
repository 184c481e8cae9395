"""Messaging and e-mail service credentials."""

from hardcoded_detector.patterns.models import Signature

SLACK_TOKEN = Signature(
    id="slack_token",
    name="Slack Token",
    description="Detects Slack bot, user and workspace tokens.",
    category="communication",
    service="Slack",
    severity="high",
    confidence="high",
    pattern=r"\bxox[baprs]-[0-9A-Za-z\-]{10,72}",
    flags="g",
)

SLACK_WEBHOOK = Signature(
    id="slack_webhook",
    name="Slack Incoming Webhook",
    description="Detects Slack incoming webhook URLs.",
    category="communication",
    service="Slack",
    severity="medium",
    confidence="high",
    pattern=r"https://hooks\.slack\.com/services/T[A-Z0-9]{6,12}/B[A-Z0-9]{6,12}/[A-Za-z0-9]{20,32}",
)

DISCORD_WEBHOOK = Signature(
    id="discord_webhook",
    name="Discord Webhook",
    description="Detects Discord webhook URLs.",
    category="communication",
    service="Discord",
    severity="medium",
    confidence="high",
    pattern=r"https://(?:ptb\.|canary\.)?discord(?:app)?\.com/api/webhooks/[0-9]{17,20}/[A-Za-z0-9_\-]{60,68}",
)

TWILIO_API_KEY = Signature(
    id="twilio_api_key",
    name="Twilio API Key",
    description="Detects Twilio API key SIDs.",
    category="communication",
    service="Twilio",
    severity="high",
    confidence="medium",
    pattern=r"\bSK[0-9a-fA-F]{32}\b",
    flags="g",
)

SENDGRID_API_KEY = Signature(
    id="sendgrid_api_key",
    name="SendGrid API Key",
    description="Detects SendGrid API keys.",
    category="communication",
    service="SendGrid",
    severity="high",
    confidence="high",
    pattern=r"\bSG\.[A-Za-z0-9_\-]{22}\.[A-Za-z0-9_\-]{43}\b",
    flags="g",
)

MAILGUN_API_KEY = Signature(
    id="mailgun_api_key",
    name="Mailgun API Key",
    description="Detects Mailgun private API keys.",
    category="communication",
    service="Mailgun",
    severity="high",
    confidence="medium",
    pattern=r"\bkey-[0-9a-z]{32}\b",
)

ALL_COMMUNICATION_SIGNATURES = [
    SLACK_TOKEN,
    SLACK_WEBHOOK,
    DISCORD_WEBHOOK,
    TWILIO_API_KEY,
    SENDGRID_API_KEY,
    MAILGUN_API_KEY,
]
