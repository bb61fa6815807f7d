"""Core data models for PublicSuffix."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional

from .constants import LABEL_SEPARATOR


@dataclass(frozen=True)
class Domain:
    """
    A host split by a public suffix rule.

    "www.example.co.uk" under the rule "co.uk" gives
    tld="co.uk", main_domain="example", sub_domain="www".
    """

    tld: str  # Public suffix: "co.uk"
    main_domain: Optional[str] = None  # Registrable label: "example"
    sub_domain: str = ""  # Everything further left: "www"

    @property
    def registrable_domain(self) -> Optional[str]:
        """Main domain plus TLD, or None when the host is only a suffix."""
        if self.main_domain is None:
            return None
        return LABEL_SEPARATOR.join(p for p in (self.main_domain, self.tld) if p)

    @property
    def hostname(self) -> str:
        """Rejoin sub domain, main domain and TLD, skipping empty parts."""
        return LABEL_SEPARATOR.join(p for p in (self.sub_domain, self.main_domain, self.tld) if p)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "tld": self.tld,
            "main_domain": self.main_domain,
            "sub_domain": self.sub_domain,
            "registrable_domain": self.registrable_domain,
        }

    def to_json(self, indent: int | None = None) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> Domain:
        """Create instance from dictionary."""
        return cls(
            tld=data["tld"],
            main_domain=data.get("main_domain"),
            sub_domain=data.get("sub_domain", ""),
        )

    def __str__(self) -> str:
        return self.hostname
