from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple


def split_addresses(raw: Optional[str]) -> Tuple[str, ...]:
    """Comma-separated list -> trimmed, de-duplicated, plausible addresses."""
    return _clean((raw or "").split(","))


def parse_department_emails(raw: Optional[str]) -> Dict[str, Tuple[str, ...]]:
    """Parse `operations=a@x.com,b@x.com;listing=c@x.com` (keys lower-cased)."""
    mapping: Dict[str, Tuple[str, ...]] = {}
    for chunk in (raw or "").split(";"):
        if "=" not in chunk:
            continue
        dept, _, addresses = chunk.partition("=")
        dept = dept.strip().lower()
        if dept:
            mapping[dept] = split_addresses(addresses)
    return mapping


def _clean(addresses: Iterable[str]) -> Tuple[str, ...]:
    seen: List[str] = []
    for address in addresses:
        address = (address or "").strip()
        if address and "@" in address and address not in seen:
            seen.append(address)
    return tuple(seen)


@dataclass(frozen=True)
class RecipientDirectory:
    """Who gets notified for which department, sourced from environment settings."""

    hr_emails: Tuple[str, ...] = ()
    department_head_emails: Tuple[str, ...] = ()
    department_emails: Dict[str, Tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def from_settings(
        cls,
        *,
        hr_email: Optional[str],
        department_head_email: Optional[str],
        department_emails: Optional[str],
    ) -> "RecipientDirectory":
        return cls(
            hr_emails=split_addresses(hr_email),
            department_head_emails=split_addresses(department_head_email),
            department_emails=parse_department_emails(department_emails),
        )

    def for_department(self, department: Optional[str]) -> Tuple[str, ...]:
        # HR is always copied; department heads fall back to the generic list.
        heads = self.department_emails.get((department or "").strip().lower())
        return _clean([*self.hr_emails, *(heads if heads else self.department_head_emails)])

    def company_wide(self) -> Tuple[str, ...]:
        everyone = [*self.hr_emails, *self.department_head_emails]
        for addresses in self.department_emails.values():
            everyone.extend(addresses)
        return _clean(everyone)
