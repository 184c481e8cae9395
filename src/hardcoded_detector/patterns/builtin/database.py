"""Database connection strings with embedded credentials."""

from hardcoded_detector.patterns.models import Signature

MONGODB_URI = Signature(
    id="mongodb_uri",
    name="MongoDB Connection URI",
    description="Detects MongoDB connection strings with embedded credentials.",
    category="database",
    service="MongoDB",
    severity="high",
    confidence="high",
    pattern=r"mongodb(?:\+srv)?://[^\s:/@\"']+:[^\s@\"']+@[^\s\"'<>]+",
)

POSTGRES_URI = Signature(
    id="postgres_uri",
    name="PostgreSQL Connection URI",
    description="Detects PostgreSQL connection strings with embedded credentials.",
    category="database",
    service="PostgreSQL",
    severity="high",
    confidence="high",
    pattern=r"postgres(?:ql)?://[^\s:/@\"']+:[^\s@\"']+@[^\s\"'<>]+",
)

MYSQL_URI = Signature(
    id="mysql_uri",
    name="MySQL Connection URI",
    description="Detects MySQL connection strings with embedded credentials.",
    category="database",
    service="MySQL",
    severity="high",
    confidence="high",
    pattern=r"mysql://[^\s:/@\"']+:[^\s@\"']+@[^\s\"'<>]+",
)

REDIS_URI = Signature(
    id="redis_uri",
    name="Redis Connection URI",
    description="Detects Redis connection strings with an embedded password.",
    category="database",
    service="Redis",
    severity="medium",
    confidence="medium",
    pattern=r"rediss?://[^\s:/@\"']*:[^\s@\"']+@[^\s\"'<>]+",
)

ALL_DATABASE_SIGNATURES = [MONGODB_URI, POSTGRES_URI, MYSQL_URI, REDIS_URI]
