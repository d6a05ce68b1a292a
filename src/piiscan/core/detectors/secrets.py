"""
Secrets and credentials rules.

Detects API keys, tokens and private key material. These are the most
specific patterns in the catalog (fixed vendor prefixes), so the family
has the highest precedence.

Covered:
- OpenAI project and legacy keys (sk-proj-, sk-)
- Anthropic keys (sk-ant-)
- AWS access key IDs (AKIA...)
- GitHub tokens (ghp_, gho_, ghs_, ght_, gha_)
- Slack bot/user tokens (xoxb-, xoxp-)
- Bearer tokens in headers
- PEM private key headers
"""

from ..types import EntityType
from .pattern_registry import DetectionRule, _r

_SECRET = EntityType.SECRET


# =============================================================================
# PATTERNS
# =============================================================================

SECRET_RULES: tuple[DetectionRule, ...] = (
    # --- VENDOR API KEYS ---
    _r(r'sk-proj-[A-Za-z0-9_\-]{20,}', _SECRET, 0.99, name="openai_project_key"),
    _r(r'sk-[A-Za-z0-9]{20,}', _SECRET, 0.99, name="openai_key"),
    _r(r'sk-ant-[A-Za-z0-9_\-]{20,}', _SECRET, 0.99, name="anthropic_key"),
    _r(r'AKIA[0-9A-Z]{16}', _SECRET, 0.99, name="aws_access_key"),
    _r(r'gh[patos]_[A-Za-z0-9]{30,}', _SECRET, 0.99, name="github_token"),
    _r(r'xox[bp]-[0-9]{10,}-[A-Za-z0-9\-]+', _SECRET, 0.99, name="slack_token"),

    # --- GENERIC ---
    _r(r'Bearer\s+[A-Za-z0-9._~+/=\-]{20,}', _SECRET, 0.95, name="bearer_token"),
    _r(r'-----BEGIN (?:RSA |EC |DSA )?PRIVATE KEY-----', _SECRET, 0.99, name="private_key_header"),
)
