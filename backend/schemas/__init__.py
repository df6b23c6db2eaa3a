from schemas.analysis import (
    AnalysisRequest, AnalysisPrompt, RedFlag, AnalysisResult, ErrorResponse,
    Severity, RiskLabel, MAX_FLAGS, RISK_BANDS, label_for_score
)
