"""Cloud provider credentials for AWS, Google Cloud, Azure and Heroku."""

from hardcoded_detector.patterns.models import Signature

AWS_ACCESS_KEY = Signature(
    id="aws_access_key",
    name="AWS Access Key ID (IAM, SES, S3, EC2, etc.)",
    description="Detects AWS access key IDs (AKIA/ASIA/ABIA/ACCA prefixes).",
    category="cloud",
    service="Amazon Web Services",
    severity="high",
    confidence="high",
    pattern=r"\b(?:A3T[A-Z0-9]|AKIA|ASIA|ABIA|ACCA)[A-Z0-9]{16}\b",
    flags="g",
    references=("https://docs.aws.amazon.com/IAM/latest/UserGuide/id_credentials_access-keys.html",),
)

AWS_SECRET_KEY = Signature(
    id="aws_secret_key",
    name="AWS Secret Access Key",
    description="Detects AWS secret access keys assigned in code.",
    category="cloud",
    service="Amazon Web Services",
    severity="critical",
    confidence="high",
    pattern=r"aws_?secret_?(?:access_?)?key[\"'\s]*[:=]\s*[\"']?[A-Za-z0-9/+=]{40}\b",
)

AWS_MWS_KEY = Signature(
    id="aws_mws_key",
    name="Amazon MWS Auth Token",
    description="Detects Amazon Marketplace Web Service auth tokens.",
    category="cloud",
    service="Amazon Web Services",
    severity="high",
    confidence="high",
    pattern=r"amzn\.mws\.[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
)

GOOGLE_API_KEY = Signature(
    id="google_api_key",
    name="Google API Key",
    description="Detects Google Cloud / Maps / Firebase API keys.",
    category="cloud",
    service="Google Cloud",
    severity="high",
    confidence="high",
    pattern=r"\bAIza[0-9A-Za-z_\-]{35}\b",
    flags="g",
)

GCP_SERVICE_ACCOUNT = Signature(
    id="gcp_service_account",
    name="Google Cloud Service Account",
    description="Detects service-account JSON documents committed to the tree.",
    category="cloud",
    service="Google Cloud",
    severity="medium",
    confidence="medium",
    pattern=r"\"type\"\s*:\s*\"service_account\"",
)

AZURE_STORAGE_KEY = Signature(
    id="azure_storage_key",
    name="Azure Storage Account Key",
    description="Detects Azure storage connection strings with an AccountKey.",
    category="cloud",
    service="Microsoft Azure",
    severity="critical",
    confidence="high",
    pattern=r"AccountKey=[A-Za-z0-9+/=]{86,88}",
)

HEROKU_API_KEY = Signature(
    id="heroku_api_key",
    name="Heroku API Key",
    description="Detects Heroku API keys assigned next to a heroku identifier.",
    category="cloud",
    service="Heroku",
    severity="high",
    confidence="medium",
    pattern=r"heroku[a-z_\-]{0,20}[\s:=\"']{1,5}[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
)

ALL_CLOUD_SIGNATURES = [
    AWS_ACCESS_KEY,
    AWS_SECRET_KEY,
    AWS_MWS_KEY,
    GOOGLE_API_KEY,
    GCP_SERVICE_ACCOUNT,
    AZURE_STORAGE_KEY,
    HEROKU_API_KEY,
]
