"""Control-plane adapters."""

from .pct import PctBackend, parse_pct_list, parse_pct_status

__all__ = ["PctBackend", "parse_pct_list", "parse_pct_status"]
