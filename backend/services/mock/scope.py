from data.red_flags import SCOPE_RED_FLAGS, CONTRACT_INDICATORS
from schemas.analysis import MAX_FLAGS, label_for_score

SEVERITY_WEIGHTS = {"high": 20, "medium": 12, "low": 5}
SEVERITY_ORDER = {"high": 0, "medium": 1, "low": 2}


def mock_scope_analysis(contract_text: str) -> dict:
    """Generate mock scope-of-work analysis from keyword matches"""
    text_lower = contract_text.lower()

    # Not a contract: nothing to flag
    if not any(word in text_lower for word in CONTRACT_INDICATORS):
        return {"score": 0, "label": label_for_score(0), "flags": []}

    flags = []
    risk_score = 0

    for flag in SCOPE_RED_FLAGS.values():
        found = any(keyword in text_lower for keyword in flag["keywords"])
        if found == flag["absent"]:
            continue
        flags.append({
            "title": flag["title"],
            "description": flag["description"],
            "severity": flag["severity"],
            "fix": flag["fix"],
        })
        risk_score += SEVERITY_WEIGHTS[flag["severity"]]

    # Most severe first, then cap like the real model is told to
    flags.sort(key=lambda f: SEVERITY_ORDER[f["severity"]])
    flags = flags[:MAX_FLAGS]

    risk_score = min(100, risk_score)
    return {
        "score": risk_score,
        "label": label_for_score(risk_score),
        "flags": flags,
    }
