"""
Record Assembler - FPDS Atom feed to ContractRecords

Splits a feed document into <entry> fragments and fills one ContractRecord
per entry from FIELD_ALIASES. FPDS has renamed several elements across
schema versions (e.g. UEI_NAME vs vendorName), so each field lists its
candidate tags in priority order and the first one present wins.
"""
import logging
import math
import re
from dataclasses import dataclass
from typing import Optional

from .domain import ContractRecord
from .extraction import FieldExtractor

logger = logging.getLogger(__name__)

_ENTRY = re.compile(r"<entry(?:\s[^>]*)?>(.*?)</entry\s*>", re.IGNORECASE | re.DOTALL)


@dataclass(frozen=True)
class FieldAlias:
    """One candidate location for a field: element text, or an attribute on it"""
    tag: str
    attribute: Optional[str] = None

    def lookup(self, extractor: FieldExtractor) -> Optional[str]:
        if self.attribute:
            return extractor.find_attribute(self.tag, self.attribute)
        return extractor.find_first(self.tag)


FIELD_ALIASES: tuple[tuple[str, tuple[FieldAlias, ...]], ...] = (
    ("piid", (FieldAlias("PIID"),)),
    ("agency", (FieldAlias("agencyID"),)),
    ("agency_name", (FieldAlias("agencyID", "name"),)),
    ("vendor_name", (
        FieldAlias("UEI_NAME"),
        FieldAlias("vendorName"),
        FieldAlias("UEILegalBusinessName"),
    )),
    ("vendor_uei", (FieldAlias("VENDOR_UEI"), FieldAlias("UEI"))),
    ("parent_company", (FieldAlias("ULTIMATE_UEI_NAME"), FieldAlias("ultimateParentUEIName"))),
    ("obligated_amount", (FieldAlias("obligatedAmount"),)),
    ("base_and_all_options", (FieldAlias("baseAndAllOptionsValue"),)),
    ("signed_date", (FieldAlias("signedDate"),)),
    ("start_date", (FieldAlias("effectiveDate"),)),
    ("completion_date", (FieldAlias("currentCompletionDate"),)),
    ("naics_code", (FieldAlias("NAICS_CODE"), FieldAlias("principalNAICSCode"))),
    ("naics_description", (
        FieldAlias("NAICS_DESCRIPTION"),
        FieldAlias("principalNAICSDescription"),
        FieldAlias("principalNAICSCode", "description"),
    )),
    ("psc_code", (FieldAlias("PRODUCT_OR_SERVICE_CODE"), FieldAlias("productOrServiceCode"))),
    ("set_aside", (FieldAlias("typeOfSetAside"),)),
    ("description", (FieldAlias("descriptionOfContractRequirement"),)),
)

AMOUNT_FIELDS = frozenset({"obligated_amount", "base_and_all_options"})


def parse_amount(text: Optional[str]) -> float:
    """Parse a dollar amount, 0.0 when absent or unparsable"""
    if not text:
        return 0.0
    try:
        value = float(text.replace(",", "").strip())
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def split_entries(document: str) -> list[str]:
    """Entry fragments in document order"""
    return _ENTRY.findall(document or "")


class RecordAssembler:
    """Builds ContractRecords from FPDS Atom feed documents"""

    def __init__(self, aliases=FIELD_ALIASES):
        self.aliases = aliases

    def assemble(self, entry: str) -> ContractRecord:
        """Build one record from one entry fragment"""
        extractor = FieldExtractor(entry)
        values = {}
        for field_name, candidates in self.aliases:
            value = None
            for alias in candidates:
                value = alias.lookup(extractor)
                if value is not None:
                    break
            if field_name in AMOUNT_FIELDS:
                value = parse_amount(value)
            values[field_name] = value
        return ContractRecord(**values)

    def parse_feed(self, document: str) -> list[ContractRecord]:
        """
        All records with usable content, in document order.

        Returns an empty list if anything goes wrong mid-document, so a
        parse failure looks the same as a feed with no matches.
        """
        try:
            entries = split_entries(document)
            records = [self.assemble(entry) for entry in entries]
            kept = [record for record in records if record.has_content()]
        except Exception:
            logger.exception("FPDS feed parsing failed")
            return []

        if len(kept) < len(entries):
            logger.debug(f"Dropped {len(entries) - len(kept)} of {len(entries)} entries without content")
        return kept

    def count_entries(self, document: str) -> int:
        return len(split_entries(document))
