"""
Network identifier rules: MAC addresses and IP addresses.
"""

from ..types import EntityType
from .pattern_registry import DetectionRule, _r


MAC_ADDRESS_RULES: tuple[DetectionRule, ...] = (
    # 00:1A:2B:3C:4D:5E or 00-1A-2B-3C-4D-5E
    _r(r'\b([0-9A-Fa-f]{2}[:-]){5}[0-9A-Fa-f]{2}\b', EntityType.MAC_ADDRESS, 0.95, name="mac"),
    # Cisco: 001a.2b3c.4d5e
    _r(r'\b[0-9A-Fa-f]{4}\.[0-9A-Fa-f]{4}\.[0-9A-Fa-f]{4}\b', EntityType.MAC_ADDRESS, 0.90,
       name="mac_cisco"),
)


_OCTET = r'(?:25[0-5]|2[0-4]\d|[01]?\d\d?)'

# Full form plus the common "::" abbreviations; not a complete RFC 4291 grammar
_IPV6 = (
    r'(?:'
    r'(?:[0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}'
    r'|(?:[0-9a-fA-F]{1,4}:){1,7}:'
    r'|(?:[0-9a-fA-F]{1,4}:){1,6}:[0-9a-fA-F]{1,4}'
    r'|::1'
    r'|::'
    r')'
)

IP_ADDRESS_RULES: tuple[DetectionRule, ...] = (
    _r(r'\b(?:' + _OCTET + r'\.){3}' + _OCTET + r'\b', EntityType.IP_ADDRESS, 0.90,
       validator="ipv4", name="ipv4"),
    _r(_IPV6, EntityType.IP_ADDRESS, 0.90, name="ipv6"),
)
