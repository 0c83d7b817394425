"""
BBG Lite formatters for MCP tool results

Format handler results as Bloomberg Terminal-inspired text output.
Used by both CLI and MCP adapters for consistent presentation.
"""

from typing import Any, Optional


def _truncate(value: Optional[str], width: int) -> str:
    if not value:
        return "-"
    if len(value) <= width:
        return value
    return value[:width - 1] + "…"


def format_amount(amount: Optional[float]) -> str:
    """Compact dollar amount: 1234567.0 -> $1.2M"""
    if not amount:
        return "-"
    for threshold, suffix in ((1e9, "B"), (1e6, "M"), (1e3, "K")):
        if abs(amount) >= threshold:
            return f"${amount / threshold:.1f}{suffix}"
    return f"${amount:,.0f}"


def format_search_contracts(result: dict[str, Any]) -> str:
    """Format search_contracts result as BBG Lite text.

    Example output:
        FPDS CONTRACTS | PRINCIPAL_NAICS_CODE:"541511" LAST_MOD_DATE:[2024/10/19,2025/10/19]
        10 contracts found

        PIID             VENDOR                          AGENCY                OBLIGATED  SIGNED
        ──────────────────────────────────────────────────────────────────────────────────────────
        W91QUZ24F0123    ACME FEDERAL SERVICES LLC       DEPT OF THE ARMY         $1.2M  2024-09-30
        ...

        Try: search_contracts(naics=..., agency=..., start_date=YYYY-MM-DD)
    """
    if not result.get("success"):
        lines = [f"ERROR: {result.get('error', 'Unknown error')}"]
        if result.get("details"):
            lines.append(f"DETAILS: {result['details']}")
        if result.get("query"):
            lines.append(f"QUERY: {result['query']}")
        return "\n".join(lines)

    contracts = result.get("data") or []
    query = result.get("query", "")

    lines = []
    lines.append(f"FPDS CONTRACTS | {query}")

    if not contracts:
        lines.append("")
        lines.append("NO CONTRACTS FOUND")
        lines.append("")
        lines.append("Try: Broader filters | different NAICS | wider date range")
        return "\n".join(lines)

    lines.append(f"{result.get('count', len(contracts))} contracts found")
    lines.append("")
    lines.append(f"{'PIID':<16} {'VENDOR':<30} {'AGENCY':<20} {'OBLIGATED':>10}  SIGNED")
    lines.append("─" * 90)

    for contract in contracts:
        signed = (contract.get("signedDate") or "-")[:10]
        agency = contract.get("agencyName") or contract.get("agency")
        lines.append(
            f"{_truncate(contract.get('piid'), 16):<16} "
            f"{_truncate(contract.get('vendorName'), 30):<30} "
            f"{_truncate(agency, 20):<20} "
            f"{format_amount(contract.get('obligatedAmount')):>10}  "
            f"{signed}"
        )

    lines.append("")
    lines.append("Try: search_contracts(naics=..., agency=..., start_date=YYYY-MM-DD)")

    return "\n".join(lines)
