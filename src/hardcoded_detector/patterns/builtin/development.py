"""Source hosting and package registry tokens."""

from hardcoded_detector.patterns.models import Signature

GITHUB_PERSONAL_TOKEN = Signature(
    id="github_personal_token",
    name="GitHub Personal Access Token",
    description="Detects classic GitHub personal access tokens (ghp_ prefix).",
    category="development",
    service="GitHub",
    severity="critical",
    confidence="high",
    pattern=r"\bghp_[A-Za-z0-9]{36,255}",
    flags="g",
)

GITHUB_OAUTH_TOKEN = Signature(
    id="github_oauth_token",
    name="GitHub OAuth Access Token",
    description="Detects GitHub OAuth access tokens (gho_ prefix).",
    category="development",
    service="GitHub",
    severity="critical",
    confidence="high",
    pattern=r"\bgho_[A-Za-z0-9]{36,255}",
    flags="g",
)

GITHUB_APP_TOKEN = Signature(
    id="github_app_token",
    name="GitHub App Token",
    description="Detects GitHub App user-to-server and server-to-server tokens.",
    category="development",
    service="GitHub",
    severity="critical",
    confidence="high",
    pattern=r"\bgh[us]_[A-Za-z0-9]{36,255}",
    flags="g",
)

GITHUB_FINE_GRAINED_TOKEN = Signature(
    id="github_fine_grained_token",
    name="GitHub Fine-Grained Personal Access Token",
    description="Detects fine-grained GitHub tokens (github_pat_ prefix).",
    category="development",
    service="GitHub",
    severity="critical",
    confidence="high",
    pattern=r"\bgithub_pat_[A-Za-z0-9_]{82}",
    flags="g",
)

GITLAB_PERSONAL_TOKEN = Signature(
    id="gitlab_personal_token",
    name="GitLab Personal Access Token",
    description="Detects GitLab personal access tokens (glpat- prefix).",
    category="development",
    service="GitLab",
    severity="critical",
    confidence="high",
    pattern=r"\bglpat-[A-Za-z0-9_\-]{20,}",
    flags="g",
)

NPM_TOKEN = Signature(
    id="npm_token",
    name="npm Access Token",
    description="Detects npm registry access tokens.",
    category="development",
    service="npm",
    severity="high",
    confidence="high",
    pattern=r"\bnpm_[A-Za-z0-9]{36}\b",
    flags="g",
)

PYPI_TOKEN = Signature(
    id="pypi_token",
    name="PyPI Upload Token",
    description="Detects PyPI API tokens.",
    category="development",
    service="PyPI",
    severity="high",
    confidence="high",
    pattern=r"\bpypi-AgEIcHlwaS5vcmc[A-Za-z0-9_\-]{50,}",
    flags="g",
)

ALL_DEVELOPMENT_SIGNATURES = [
    GITHUB_PERSONAL_TOKEN,
    GITHUB_OAUTH_TOKEN,
    GITHUB_APP_TOKEN,
    GITHUB_FINE_GRAINED_TOKEN,
    GITLAB_PERSONAL_TOKEN,
    NPM_TOKEN,
    PYPI_TOKEN,
]
