from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import Any, List
from datetime import datetime


# Schlüssel, die nur der Server vergibt und nie aus dem Request übernommen werden
SERVER_OWNED_KEYS = frozenset(
    {"id", "_id", "timestamp", "readingDuration", "reading_duration", "extra_fields"}
)


class SurveyAnswers(BaseModel):
    """Answer fields shared by the submission and the stored result.

    Values are kept exactly as the client sent them; only ``q1_c`` is
    normalised to a list.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    grade_level: Any = Field(default=None, alias="gradeLevel")

    q1_a: Any = None
    q1_b: Any = None
    q1_c: List[Any] = Field(default_factory=list)
    q1_d: Any = None
    q1_e: Any = None
    q1_f: Any = None

    q2_a: Any = None
    q2_b: Any = None
    q2_c: Any = None

    quiz_q1: Any = None
    quiz_q2: Any = None
    quiz_q3: Any = None
    quiz_q4: Any = None
    quiz_q5: Any = None
    quiz_q6: Any = None
    quiz_q7: Any = None

    final_reading_duration: Any = Field(default=None, alias="finalReadingDuration")

    @field_validator("q1_c", mode="before")
    @classmethod
    def wrap_multi_select(cls, value: Any):
        # Mehrfachauswahl: Liste bleibt, Einzelwert wird eingepackt, leer -> []
        if isinstance(value, list):
            return value
        if not value:
            return []
        return [value]


# Modell für den Request-Body von POST /api/submit
class SurveySubmission(SurveyAnswers):
    consent_agreed: bool = Field(default=False, alias="consentAgreed")

    @field_validator("consent_agreed", mode="before")
    @classmethod
    def parse_consent(cls, value: Any) -> bool:
        # Nur "true" (Groß-/Kleinschreibung egal) zählt als Zustimmung
        return str(value).lower() == "true"

    def extra_answers(self) -> dict:
        """Unknown keys from the request body, minus the server-owned ones."""
        extras = self.model_extra or {}
        return {k: v for k, v in extras.items() if k not in SERVER_OWNED_KEYS}


# Antwort nach erfolgreichem Speichern
class SubmitResult(BaseModel):
    message: str = "Survey submitted successfully!"
    id: int


class ErrorMessage(BaseModel):
    message: str


# Ein gespeicherter Datensatz, wie ihn GET /api/results ausliefert
class SurveyResult(SurveyAnswers):
    id: int
    consent_agreed: bool = Field(default=False, alias="consentAgreed")
    timestamp: datetime
