"""Domain name normalization shared by every scorer."""

import re
from dataclasses import dataclass

DEFAULT_TLD = "com"

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_NON_ALPHA = re.compile(r"[^a-z]")


@dataclass(frozen=True)
class DomainName:
    """A parsed domain.

    Attributes:
        raw: Input exactly as given
        label: First label, lowercased with any ``www.`` removed (hyphens kept)
        tld: Label after the first dot, ``com`` when missing
    """

    raw: str
    label: str
    tld: str

    @property
    def name(self) -> str:
        """Label with everything except letters and digits removed."""
        return _NON_ALNUM.sub("", self.label)

    @property
    def letters(self) -> str:
        """Label with everything except letters removed."""
        return _NON_ALPHA.sub("", self.label)

    @property
    def has_hyphen(self) -> bool:
        return "-" in self.label


def parse_domain(domain: str) -> DomainName:
    """Split a domain into name label and TLD.

    The input is lowercased, surrounding whitespace and a leading ``www.``
    are dropped, then the string is split on dots. The first part is the
    name and the second part is the TLD, so ``shop.co.uk`` parses as name
    ``shop`` with TLD ``co``.

    Args:
        domain: Domain such as ``CloudBank.com`` or ``www.crypto.ai``

    Returns:
        Parsed DomainName
    """
    lowered = domain.strip().lower()
    if lowered.startswith("www."):
        lowered = lowered[4:]
    parts = lowered.split(".")
    tld = parts[1] if len(parts) > 1 and parts[1] else DEFAULT_TLD
    return DomainName(raw=domain, label=parts[0], tld=tld)
