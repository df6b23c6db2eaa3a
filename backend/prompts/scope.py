import json

from data.red_flags import SCOPE_CATEGORIES, SCOPE_RED_FLAGS

# Rendered once at import; constant for the process lifetime.
# The caller's text is sent as a separate user message, never interpolated here.

_SCOPE_ANALYSIS_TEMPLATE = """You are a contract expert helping freelancers spot "scope creep" and other traps in a client's contract or scope of work (SOW) before they sign.

The user message is the full contract / SOW text. Analyze it for:
<<CATEGORIES>>

EXAMPLES OF RED FLAGS TO CHECK:
<<RED_FLAGS>>

Return JSON with exactly this shape:
{
    "score": 0-100 (integer, 100 = extremely risky),
    "label": "Low Risk" | "Moderate Risk" | "High Risk" | "Critical Risk",
    "flags": [
        {
            "title": "Short name of the issue",
            "description": "What the clause says and why it hurts the freelancer (plain language)",
            "severity": "low" | "medium" | "high",
            "fix": "Specific replacement or additional contract language to request"
        }
    ]
}

RULES:
- The label MUST match the score: 0-25 = "Low Risk", 26-50 = "Moderate Risk", 51-75 = "High Risk", 76-100 = "Critical Risk".
- Return between 0 and 8 flags, never more. Keep only the most important ones, most severe first.
- Every flag needs a non-empty title, description and fix.
- If the text is not recognizably a contract or scope of work, return {"score": 0, "label": "Low Risk", "flags": []}.

Be direct. Quote the problematic wording in the description where possible.
Return ONLY valid JSON, no markdown formatting."""


def _render_categories() -> str:
    return "\n".join(f"- {description}" for description in SCOPE_CATEGORIES.values())


def _render_red_flags() -> str:
    catalog = [
        {
            "title": flag["title"],
            "category": flag["category"],
            "severity": flag["severity"],
            "description": flag["description"],
        }
        for flag in SCOPE_RED_FLAGS.values()
    ]
    return json.dumps(catalog, indent=2)


SCOPE_ANALYSIS_PROMPT = (
    _SCOPE_ANALYSIS_TEMPLATE
    .replace("<<CATEGORIES>>", _render_categories())
    .replace("<<RED_FLAGS>>", _render_red_flags())
)
