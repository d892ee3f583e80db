"""Store settings read from the flat key/value settings table."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import ZERO, to_amount

RESTAURANT_NAME = "restaurant_name"
ADDRESS = "address"
PHONE1 = "phone1"
PHONE2 = "phone2"
TAX_ENABLED = "tax_enabled"
TAX_PERCENTAGE = "tax_percentage"
RECEIPT_FOOTER = "receipt_footer"

KNOWN_KEYS = (
    RESTAURANT_NAME,
    ADDRESS,
    PHONE1,
    PHONE2,
    TAX_ENABLED,
    TAX_PERCENTAGE,
    RECEIPT_FOOTER,
)

DEFAULT_RESTAURANT_NAME = "RESTAURANT"
DEFAULT_FOOTER = "THANK YOU FOR YOUR ORDER!"
MAX_TAX_PERCENTAGE = Decimal("100")


def parse_tax_enabled(raw: str | None) -> bool:
    return raw == "true"


def parse_tax_percentage(raw: str | None) -> Decimal:
    """Parse a tax rate in percent. Missing or blank means 0."""
    if raw is None or not raw.strip():
        return ZERO
    try:
        pct = to_amount(raw)
    except ValidationError as exc:
        raise ValidationError(f"Invalid tax percentage: {raw!r}") from exc
    if pct < ZERO or pct > MAX_TAX_PERCENTAGE:
        raise ValidationError(f"Tax percentage must be between 0 and 100, got {raw}")
    return pct


@dataclass(frozen=True)
class StoreSettings:
    restaurant_name: str = DEFAULT_RESTAURANT_NAME
    address: str = ""
    phone1: str = ""
    phone2: str = ""
    tax_enabled: bool = False
    tax_percentage: Decimal = ZERO
    footer: str = DEFAULT_FOOTER

    @staticmethod
    def from_mapping(raw: dict[str, str]) -> StoreSettings:
        return StoreSettings(
            restaurant_name=raw.get(RESTAURANT_NAME) or DEFAULT_RESTAURANT_NAME,
            address=raw.get(ADDRESS) or "",
            phone1=raw.get(PHONE1) or "",
            phone2=raw.get(PHONE2) or "",
            tax_enabled=parse_tax_enabled(raw.get(TAX_ENABLED)),
            tax_percentage=parse_tax_percentage(raw.get(TAX_PERCENTAGE)),
            footer=_first_line(raw.get(RECEIPT_FOOTER)) or DEFAULT_FOOTER,
        )


def _first_line(text: str | None) -> str:
    # Footers typed into a single-line field may carry literal "\n".
    if not text:
        return ""
    return text.replace("\\n", "\n").split("\n")[0].strip()
