"""
Domain Models - Pure business entities

No external dependencies. These represent the core business concepts.
"""
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional


# Raw parameter names (camelCase from browsers, snake_case from MCP/CLI)
_FILTER_KEYS = {
    "naics": "naics",
    "agency": "agency",
    "startDate": "start_date",
    "start_date": "start_date",
    "endDate": "end_date",
    "end_date": "end_date",
    "setAside": "set_aside",
    "set_aside": "set_aside",
    "minValue": "min_value",
    "min_value": "min_value",
    "maxValue": "max_value",
    "max_value": "max_value",
}


@dataclass(frozen=True)
class FilterParameters:
    """Search filters supplied by a client"""
    naics: Optional[str] = None
    agency: Optional[str] = None
    start_date: Optional[str] = None  # YYYY-MM-DD format
    end_date: Optional[str] = None  # YYYY-MM-DD format
    set_aside: Optional[str] = None
    min_value: Optional[str] = None
    max_value: Optional[str] = None

    @classmethod
    def from_mapping(cls, params: Optional[Mapping[str, Any]]) -> "FilterParameters":
        """Build filters from raw request parameters, ignoring unknown keys"""
        values: dict[str, str] = {}
        for key, value in (params or {}).items():
            name = _FILTER_KEYS.get(key)
            if name is None or value is None:
                continue
            text = str(value).strip()
            if text:
                values[name] = text
        return cls(**values)

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


@dataclass(frozen=True)
class ContractRecord:
    """A contract award extracted from one FPDS feed entry"""
    piid: Optional[str] = None
    agency: Optional[str] = None
    agency_name: Optional[str] = None
    vendor_name: Optional[str] = None
    vendor_uei: Optional[str] = None
    parent_company: Optional[str] = None
    obligated_amount: float = 0.0
    base_and_all_options: float = 0.0
    signed_date: Optional[str] = None
    start_date: Optional[str] = None
    completion_date: Optional[str] = None
    naics_code: Optional[str] = None
    naics_description: Optional[str] = None
    psc_code: Optional[str] = None
    set_aside: Optional[str] = None
    description: Optional[str] = None

    def has_content(self) -> bool:
        """True if the record carries at least one usable signal"""
        return bool(self.piid) or bool(self.vendor_name) or self.obligated_amount > 0

    def to_dict(self) -> dict[str, Any]:
        """Wire format (camelCase keys, as consumed by browser clients)"""
        return {
            "piid": self.piid,
            "agency": self.agency,
            "agencyName": self.agency_name,
            "vendorName": self.vendor_name,
            "vendorUEI": self.vendor_uei,
            "parentCompany": self.parent_company,
            "obligatedAmount": self.obligated_amount,
            "baseAndAllOptions": self.base_and_all_options,
            "signedDate": self.signed_date,
            "startDate": self.start_date,
            "completionDate": self.completion_date,
            "naicsCode": self.naics_code,
            "naicsDescription": self.naics_description,
            "pscCode": self.psc_code,
            "setAside": self.set_aside,
            "description": self.description,
        }


@dataclass
class ResponseEnvelope:
    """Uniform response shape, returned whatever the upstream outcome"""
    success: bool
    data: Optional[list[ContractRecord]] = None
    count: Optional[int] = None
    query: Optional[str] = None
    error: Optional[str] = None
    details: Optional[str] = None
    type: Optional[str] = None

    @classmethod
    def ok(cls, records: list[ContractRecord], query: str) -> "ResponseEnvelope":
        return cls(success=True, data=records, count=len(records), query=query)

    @classmethod
    def failure(
        cls,
        error: str,
        query: Optional[str] = None,
        details: Optional[str] = None,
        type: Optional[str] = None
    ) -> "ResponseEnvelope":
        return cls(success=False, error=error, query=query, details=details, type=type)

    def to_dict(self) -> dict[str, Any]:
        """Serialize, omitting absent keys"""
        result: dict[str, Any] = {"success": self.success}
        if self.count is not None:
            result["count"] = self.count
        if self.data is not None:
            result["data"] = [record.to_dict() for record in self.data]
        if self.query is not None:
            result["query"] = self.query
        if self.error is not None:
            result["error"] = self.error
        if self.details is not None:
            result["details"] = self.details
        if self.type is not None:
            result["type"] = self.type
        return result
