"""Deterministic checks on agent output.

Uses regex and string matching only, no model calls:

- ``check_utterance`` flags a chat utterance that quotes the private minimum
  rate or slips into email register (salutations, sign-offs, subject lines,
  placeholders).  Findings are advisory; the caller logs them.
- ``parse_recommendation`` splits a closing recommendation into its verdict
  token and the budget / timeline / deliverables summary lines.
"""

import re
from decimal import Decimal, InvalidOperation

from collabdesk.domain.types import Verdict
from collabdesk.llm.models import Recommendation, UtteranceCheck, UtteranceFinding

# Plain or comma-grouped numbers like 1000, 1,000, 1000.00
_NUMBER_PATTERN = re.compile(r"\d[\d,]*(?:\.\d+)?")

_EMAIL_REGISTER_PATTERNS: dict[str, re.Pattern[str]] = {
    "salutation": re.compile(
        r"^\s*(?:dear|hi|hello|hey|greetings)\b[^\n]{0,40},\s*$|^\s*(?:您好|尊敬的)",
        re.IGNORECASE | re.MULTILINE,
    ),
    "sign_off": re.compile(
        r"^\s*(?:best|best regards|kind regards|warm regards|regards|sincerely|cheers)"
        r"[,!.]?\s*$|此致|敬礼|敬上",
        re.IGNORECASE | re.MULTILINE,
    ),
    "subject_line": re.compile(r"^\s*(?:subject|主题)\s*[:：]", re.IGNORECASE | re.MULTILINE),
    "placeholder": re.compile(r"\[(?:your name|name|你的名字)\]", re.IGNORECASE),
}

_VERDICT_LOOKUP: dict[str, Verdict] = {v.value: v for v in Verdict}

_SUMMARY_HEADER = re.compile(r"^\s*\**\s*(?:key details|关键信息)", re.IGNORECASE)

_FIELD_PATTERNS: dict[str, re.Pattern[str]] = {
    "budget": re.compile(r"^\s*[-*•]?\s*(?:budget|预算)\s*[:：]\s*(.+?)\s*$", re.I | re.M),
    "timeline": re.compile(r"^\s*[-*•]?\s*(?:timeline|时间)\s*[:：]\s*(.+?)\s*$", re.I | re.M),
    "deliverables": re.compile(
        r"^\s*[-*•]?\s*(?:deliverables|交付物)\s*[:：]\s*(.+?)\s*$", re.I | re.M
    ),
}


def _normalize_number(value: str) -> Decimal | None:
    """Turn ``"1,000.00"`` into ``Decimal("1000.00")``; None if not numeric."""
    try:
        return Decimal(value.replace(",", ""))
    except InvalidOperation:
        return None


def discloses_rate(text: str, minimum_rate: int) -> bool:
    """Return True if *text* contains *minimum_rate* as a standalone number."""
    for match in _NUMBER_PATTERN.findall(text):
        number = _normalize_number(match.rstrip(","))
        if number is not None and number == minimum_rate:
            return True
    return False


def check_utterance(text: str, minimum_rate: int) -> UtteranceCheck:
    """Run the deterministic checks on one agent chat utterance.

    Args:
        text: The generated utterance.
        minimum_rate: The influencer's private rate floor.

    Returns:
        ``UtteranceCheck`` with ``passed=True`` when nothing fired.
    """
    findings: list[UtteranceFinding] = []

    if discloses_rate(text, minimum_rate):
        findings.append(
            UtteranceFinding(
                check="rate_disclosure",
                reason="Utterance quotes the private minimum rate",
            )
        )

    for check, pattern in _EMAIL_REGISTER_PATTERNS.items():
        match = pattern.search(text)
        if match:
            findings.append(
                UtteranceFinding(
                    check=check,
                    reason=f"Email-style text in chat: '{match.group().strip()}'",
                )
            )

    return UtteranceCheck(passed=not findings, findings=findings)


def _parse_verdict(line: str) -> Verdict | None:
    token = line.strip().strip("*#[]").strip().upper()
    token = token.replace("_", " ").replace("-", " ")
    return _VERDICT_LOOKUP.get(" ".join(token.split()))


def parse_recommendation(text: str) -> Recommendation:
    """Split a closing recommendation into verdict, reason, and summary fields.

    The verdict is read from the first non-empty line only; a recommendation
    that does not lead with a verdict token yields ``verdict=None``.

    Args:
        text: Recommendation text as produced by the agent.

    Returns:
        The parsed ``Recommendation``.
    """
    lines = text.splitlines()
    verdict: Verdict | None = None
    body_start = 0
    for index, line in enumerate(lines):
        if line.strip():
            verdict = _parse_verdict(line)
            body_start = index + 1 if verdict is not None else index
            break

    reason_lines: list[str] = []
    for line in lines[body_start:]:
        if _SUMMARY_HEADER.match(line):
            break
        if line.strip():
            reason_lines.append(line.strip())

    fields: dict[str, str | None] = {}
    for name, pattern in _FIELD_PATTERNS.items():
        match = pattern.search(text)
        fields[name] = match.group(1) if match else None

    return Recommendation(
        verdict=verdict,
        reason=" ".join(reason_lines) or None,
        raw=text,
        **fields,
    )
