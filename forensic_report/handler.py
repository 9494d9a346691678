import base64
import json
from typing import Any, Dict, Optional

from .config import ReportConfig, config as default_config
from .llm.router import generate_completion
from .prompts import (
    EMPTY_PROMPT_FALLBACK,
    SYSTEM_PROMPT,
    build_section_prompt,
    needs_weather,
)
from .utils.logger import logger
from .utils.sanitize import iso_date, safe_parse_date
from .weather.client import get_weather_data

# CORS headers for API Gateway responses
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


def _response(status_code: int, body: Optional[dict]) -> dict:
    """Build API Gateway response."""
    if body is None:
        return {"statusCode": status_code, "headers": dict(CORS_HEADERS), "body": ""}

    headers = {"Content-Type": "application/json"}
    headers.update(CORS_HEADERS)
    return {
        "statusCode": status_code,
        "headers": headers,
        "body": json.dumps(body),
    }


def _get_method(event: dict) -> str:
    """HTTP method for REST (v1) and HTTP (v2) API Gateway payloads."""
    method = event.get("httpMethod")
    if not method:
        method = ((event.get("requestContext") or {}).get("http") or {}).get("method")
    return (method or "").upper()


def _parse_body(event: dict) -> Dict[str, Any]:
    raw = event.get("body")
    if not raw:
        raise ValueError("Request body is required")
    if event.get("isBase64Encoded"):
        raw = base64.b64decode(raw).decode("utf-8")
    body = json.loads(raw) if isinstance(raw, str) else raw
    return body or {}


def _fetch_weather(section: Any, user_context: Any, cfg: ReportConfig) -> Dict[str, Any]:
    """Weather data for the loss date/location, or {} when skipped or failed."""
    if not needs_weather(section) or not isinstance(user_context, dict):
        return {}

    date_of_loss = safe_parse_date(user_context.get("dateOfLoss"))
    location = user_context.get("location")
    if date_of_loss is None or not location:
        return {}

    weather_result = get_weather_data(location, iso_date(date_of_loss), config=cfg)
    if not weather_result.get("success"):
        logger.warning(f"Continuing without weather data: {weather_result.get('error')}")
        return {}
    return weather_result.get("data", {})


def lambda_handler(event, context, config: Optional[ReportConfig] = None):
    """
    Generate one forensic report section.

    POST body:
        {
            "section": "introduction",
            "context": {"clientName": "...", "dateOfLoss": "...", ...},
            "customInstructions": "optional"
        }

    Returns:
        200 {"section": text, "sectionName": section, "weatherData": {...}}
        500 {"error": "Failed to generate report section", "details": "..."}
    """
    if _get_method(event) == "OPTIONS":
        return _response(200, None)

    cfg = config or default_config

    try:
        body = _parse_body(event)
        section = body.get("section")
        user_context = body.get("context")
        custom_instructions = body.get("customInstructions")

        logger.info(f"Generating report section: {section}")

        weather_data = _fetch_weather(section, user_context, cfg)

        prompt = build_section_prompt(section, user_context, weather_data, custom_instructions)
        final_prompt = prompt or EMPTY_PROMPT_FALLBACK

        text = generate_completion(SYSTEM_PROMPT, final_prompt, config=cfg)

        return _response(200, {
            "section": text or "",
            "sectionName": section,
            "weatherData": weather_data,
        })

    except Exception as e:
        logger.error(f"Error generating report section: {e}")
        return _response(500, {
            "error": "Failed to generate report section",
            "details": str(e),
        })
