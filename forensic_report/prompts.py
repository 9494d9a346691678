"""
Section Prompts
===============

Fixed prompt templates for each section of a forensic engineering report,
filled from the caller's claim context and (for the meteorologist section)
historical weather data.

Templates never contain placeholder brackets for the model to copy; every
field is normalized to a real value or "N/A" before interpolation.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .utils.sanitize import safe_string, safe_array_join


class Section(Enum):
    """Report sections with a dedicated template."""
    INTRODUCTION = "introduction"
    AUTHORIZATION = "authorization"
    BACKGROUND = "background"
    OBSERVATIONS = "observations"
    MOISTURE = "moisture"
    METEOROLOGIST = "meteorologist"
    CONCLUSIONS = "conclusions"
    REBUTTAL = "rebuttal"
    LIMITATIONS = "limitations"
    TABLE_OF_CONTENTS = "tableofcontents"
    OPENING_LETTER = "openingletter"

    @classmethod
    def from_name(cls, name: Any) -> Optional["Section"]:
        """Resolve a caller-supplied section name, ignoring case and padding."""
        key = normalize_section_name(name)
        try:
            return cls(key)
        except ValueError:
            return None


def normalize_section_name(name: Any) -> str:
    if not isinstance(name, str):
        return ""
    return name.strip().lower()


# Sections written without weather data
WEATHER_EXEMPT_SECTIONS = frozenset({
    Section.TABLE_OF_CONTENTS,
    Section.OPENING_LETTER,
    Section.INTRODUCTION,
})


SYSTEM_PROMPT = """
You are an expert forensic engineer generating professional report sections.
Guidelines:
1. Use formal, technical language
2. Include specific context details
3. Maintain logical flow
4. Support conclusions with evidence
5. Reference documentation appropriately
6. Use unique phrasing
7. Ensure completeness
8. Incorporate custom instructions while maintaining standards
9. Do NOT invent or use placeholders like [Client Name]. Use actual context values or 'N/A'.
10. For the Table of Contents, use a clean, minimal layout in Markdown. Avoid bullet points or asterisks.
11. Do not call "Table of Contents" by its name at the top, because it is appearing twice. Similarly, for "Introduction".
12. Make it so that each section is as long and detailed as possible. But don't ever end a section in midsentence. If you have to do that, just make it shorter to complete the last thought.
"""

EMPTY_PROMPT_FALLBACK = "No prompt data available. Please proceed."


@dataclass
class ReportContext:
    """Claim context with every field normalized for prompt use."""

    investigation_date: str = "N/A"
    date_of_loss: str = "N/A"
    claim_types: str = "N/A"
    property_type: str = "N/A"
    property_age: str = "N/A"
    construction_type: str = "N/A"
    current_use: str = "N/A"
    square_footage: str = "N/A"
    location: str = "N/A"
    client_name: str = "N/A"
    affected_areas: str = "None"
    engineer_name: str = "Engineer Name"
    engineer_email: str = "Engineer Email"
    engineer_license: str = "Engineer License Number"
    engineer_phone: str = "Engineer Phone"

    @classmethod
    def from_dict(cls, context: Optional[Dict[str, Any]]) -> "ReportContext":
        """Build from the raw request context; missing or blank fields fall back."""
        ctx = context if isinstance(context, dict) else {}
        return cls(
            investigation_date=safe_string(ctx.get("investigationDate")),
            date_of_loss=safe_string(ctx.get("dateOfLoss")),
            claim_types=safe_array_join(ctx.get("claimType"), "N/A"),
            property_type=safe_string(ctx.get("propertyType")),
            property_age=safe_string(ctx.get("propertyAge")),
            construction_type=safe_string(ctx.get("constructionType")),
            current_use=safe_string(ctx.get("currentUse")),
            square_footage=safe_string(ctx.get("squareFootage")),
            location=safe_string(ctx.get("location")),
            client_name=safe_string(ctx.get("clientName")),
            affected_areas=safe_array_join(ctx.get("affectedAreas"), "None"),
            engineer_name=safe_string(ctx.get("engineerName"), "Engineer Name"),
            engineer_email=safe_string(ctx.get("engineerEmail"), "Engineer Email"),
            engineer_license=safe_string(ctx.get("engineerLicense"), "Engineer License Number"),
            engineer_phone=safe_string(ctx.get("engineerPhone"), "Engineer Phone"),
        )


SECTION_TEMPLATES = {
    Section.INTRODUCTION: """
You are writing the "Introduction" section for a forensic engineering report.
DO NOT invent placeholder text like [Client Name or Entity]. Use "{client_name}" or "N/A" if missing.
Emphasize the reason for this inspection, the property type,
the date(s) involved ({investigation_date}, {date_of_loss}),
and mention that further details follow in subsequent sections.
Use professional engineering language.
""",

    Section.AUTHORIZATION: """
You are writing the "Authorization and Scope of Investigation" section for a forensic engineering report.
DO NOT invent placeholder text like [Client Name or Entity].
Use "{client_name}" or "N/A" if missing.

Include a concise background:
- Investigation Date: {investigation_date}
- Property Name (Project): {client_name}
- Claim Type(s): {claim_types}

Required Points:
1) Who authorized the investigation
2) The scope of work
3) Outline major tasks (site visit, photos, etc.)
4) Mention attachments if any
""",

    Section.BACKGROUND: """
You are writing the "Background Information" section for a forensic engineering report.
DO NOT invent placeholder text. Use "{client_name}" or "N/A" if missing.

Property details:
- Property Type: {property_type}
- Property Age: {property_age} years
- Construction Type: {construction_type}
- Current Use: {current_use}
- Square Footage: {square_footage}
""",

    Section.OBSERVATIONS: """
You are writing the "Site Observations and Analysis" section.
DO NOT invent placeholders. Use actual context.

Affected Areas: {affected_areas}

Required Points:
1) Summarize observations
2) Briefly analyze correlation with claimed cause(s): {claim_types}
3) Reference photos or tests if needed
""",

    Section.MOISTURE: """
You are writing the "Survey" (Moisture) section for a forensic engineering report.
Discuss any moisture surveys or mention none if not applicable.
Use professional engineering language.
""",

    Section.METEOROLOGIST: """
You are writing the "Meteorologist Report" section.
DO NOT use placeholders.

Weather Data: {weather_json}

Focus on wind speeds, hail possibility, precipitation, etc.,
and how they correlate to the claimed damages.
""",

    Section.CONCLUSIONS: """
You are writing the "Conclusions and Recommendations" section.
DO NOT use placeholders.
1) Summarize main findings
2) Tie back to the cause(s) of loss
3) Outline recommended next steps or repairs
""",

    Section.REBUTTAL: """
You are writing the "Rebuttal" section.
DO NOT use placeholders.
Address any third-party reports or conflicting opinions with professional analysis.
""",

    Section.LIMITATIONS: """
You are writing the "Limitations" section.
DO NOT use placeholders.
Include typical disclaimers about scope, data reliance, and so on.
""",

    Section.TABLE_OF_CONTENTS: """
You are generating a "Table of Contents" in markdown for a forensic engineering report.
DO NOT use placeholders.

It should include:
1. Opening Letter
2. Introduction
3. Authorization and Scope of Investigation
4. Background Information
5. Site Observations and Analysis
6. Survey
7. Meteorologist Report
8. Conclusions and Recommendations
9. Rebuttal
10. Limitations
""",

    Section.OPENING_LETTER: """
You are writing an "Opening Letter" for the final forensic engineering report.
It should appear before the Table of Contents.
DO NOT invent placeholders. Use actual data or 'N/A' if missing.

For example:
---
Date of Loss: {date_of_loss}
Cause(s): {claim_types}
Property: {client_name}
Location: {location}

Dear [Somebody],

North Star Forensics, LLC (NSF) is pleased to submit this report
for the above-referenced file. By signature below, this report was authorized
and prepared under the direct supervision of the undersigned professional.

Please contact us if you have any questions regarding this report.

Signed,
{engineer_name}
License No. {engineer_license}
Email: {engineer_email}
Phone: {engineer_phone}
---
""",
}

GENERIC_TEMPLATE = """Write a professional engineering section about "{section_name}".
Do not use placeholders like [Client Name]. Use actual context or 'N/A'."""


def needs_weather(section_name: Any) -> bool:
    """Whether a section should be enriched with historical weather data."""
    return Section.from_name(section_name) not in WEATHER_EXEMPT_SECTIONS


def build_section_prompt(
    section_name: Any,
    context: Optional[Dict[str, Any]],
    weather_data: Optional[Dict[str, Any]] = None,
    custom_instructions: Any = "",
) -> str:
    """
    Build the user prompt for one report section.

    Args:
        section_name: Section identifier as sent by the caller
        context: Raw claim context from the request body
        weather_data: Summarized weather observations ({} when unavailable)
        custom_instructions: Free-text instructions appended to the prompt

    Returns:
        Prompt text for the chat-completion call
    """
    section = Section.from_name(section_name)

    if section is None:
        literal = section_name if section_name is not None else ""
        base_prompt = GENERIC_TEMPLATE.format(section_name=literal)
    else:
        fields = vars(ReportContext.from_dict(context)).copy()
        fields["weather_json"] = json.dumps(
            weather_data if weather_data is not None else {},
            indent=2,
            ensure_ascii=False,
        )
        base_prompt = SECTION_TEMPLATES[section].format(**fields)

    extra = safe_string(custom_instructions, "")
    if extra:
        return f"{base_prompt}\n\nAdditional Instructions: {extra}"
    return base_prompt
