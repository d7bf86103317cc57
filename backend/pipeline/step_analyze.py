import logging
import re

from pydantic import ValidationError

from backend.models.analysis import AIAnalysis, AnalysisResponse
from backend.models.request import StartupInput
from backend.models.valuations import ValuationResult
from backend.services.llm_service import LLMService
from backend.valuation.formatting import format_currency, format_number

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a startup valuation analyst. Analyze this valuation and provide insights."

RESPONSE_FORMAT = (
    '{"summary": "2-3 sentence summary", '
    '"assumptions": ["assumption 1", "assumption 2", "assumption 3"], '
    '"swot": {"strengths": ["strength 1", "strength 2"], "weaknesses": ["weakness 1", "weakness 2"], '
    '"opportunities": ["opportunity 1", "opportunity 2"], "threats": ["threat 1", "threat 2"]}, '
    '"investorPoints": ["point 1", "point 2", "point 3"]}'
)

_OPENING_FENCES = [
    re.compile(r"^```json\s*", re.IGNORECASE),
    re.compile(r"^```\s*"),
]
_CLOSING_FENCE = re.compile(r"\s*```$")
_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


class AnalysisParseError(Exception):
    """The model response could not be read as an AIAnalysis."""


def build_analysis_prompt(startup: StartupInput, result: ValuationResult) -> str:
    """Render the input profile and every valuation figure into the analyst prompt."""
    return (
        f"Startup: {startup.company_name}\n"
        f"Stage: {startup.stage}\n"
        f"Description: {startup.description}\n"
        f"Revenue: {format_currency(startup.revenue)}\n"
        f"Growth Rate: {format_number(startup.growth_rate)}%\n"
        f"EBITDA Margin: {format_number(startup.ebitda_margin)}%\n"
        f"Discount Rate: {format_number(startup.discount_rate)}%\n"
        "\n"
        "Valuation Results:\n"
        f"- DCF: {format_currency(result.dcf.value)}\n"
        f"- Revenue Multiple: {format_currency(result.revenue_multiple.value)}\n"
        f"- Comparables: {format_currency(result.comparables.value)}\n"
        f"- Blended: {format_currency(result.blended)}\n"
        f"- Range: {format_currency(result.range.low)} - {format_currency(result.range.high)}\n"
        "\n"
        "Respond with ONLY a JSON object (no markdown, no code blocks) in this exact format:\n"
        f"{RESPONSE_FORMAT}"
    )


def parse_analysis_response(content: str) -> AIAnalysis:
    """Strip optional code fences and validate the JSON object in a model response."""
    cleaned = content.strip()
    if not cleaned:
        raise AnalysisParseError("Empty response from AI")

    for fence in _OPENING_FENCES:
        cleaned = fence.sub("", cleaned)
    cleaned = _CLOSING_FENCE.sub("", cleaned)

    match = _JSON_OBJECT.search(cleaned)
    if not match:
        raise AnalysisParseError(f"No valid JSON found. Response was: {cleaned[:200]}")

    try:
        return AIAnalysis.model_validate_json(match.group(0))
    except ValidationError as e:
        raise AnalysisParseError(f"Response did not match the analysis format: {e}") from e


async def analyze_valuation(
    startup: StartupInput,
    result: ValuationResult,
    llm: LLMService,
) -> AnalysisResponse:
    """Ask the LLM for a narrative analysis of a completed valuation."""
    try:
        content = await llm.text_completion(
            system_prompt=SYSTEM_PROMPT,
            user_prompt=build_analysis_prompt(startup, result),
            step_name="analyze",
        )
        analysis = parse_analysis_response(content)
    except Exception as e:
        logger.error(f"AI analysis failed for '{startup.company_name}': {e}")
        return AnalysisResponse(success=False, error=str(e) or "Unknown error")

    return AnalysisResponse(success=True, analysis=analysis)
