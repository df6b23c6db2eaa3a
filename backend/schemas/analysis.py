from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator
from pydantic_core import PydanticCustomError
from typing import Literal


Severity = Literal["low", "medium", "high"]
RiskLabel = Literal["Low Risk", "Moderate Risk", "High Risk", "Critical Risk"]

MAX_FLAGS = 8

# Inclusive upper bound of each score band, in order
RISK_BANDS: list[tuple[int, str]] = [
    (25, "Low Risk"),
    (50, "Moderate Risk"),
    (75, "High Risk"),
    (100, "Critical Risk"),
]


def label_for_score(score: int) -> str:
    for upper, label in RISK_BANDS:
        if score <= upper:
            return label
    return RISK_BANDS[-1][1]


class AnalysisRequest(BaseModel):
    text: StrictStr

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, value: str) -> str:
        # Kept verbatim; only the blank check looks at the stripped form
        if not value.strip():
            raise PydanticCustomError("text_required", "Contract text is required.")
        return value


class AnalysisPrompt(BaseModel):
    model_config = ConfigDict(frozen=True)

    system: str
    user: str

    def messages(self) -> list[dict]:
        return [
            {"role": "system", "content": self.system},
            {"role": "user", "content": self.user},
        ]


# Model output is untrusted: Strict* types so nothing gets coerced,
# unknown keys are dropped.

class RedFlag(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: StrictStr = Field(min_length=1)
    description: StrictStr = Field(min_length=1)
    severity: Severity
    fix: StrictStr = Field(min_length=1)


class AnalysisResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    score: StrictInt = Field(ge=0, le=100)
    label: RiskLabel
    flags: list[RedFlag] = Field(max_length=MAX_FLAGS)


class ErrorResponse(BaseModel):
    error: str
