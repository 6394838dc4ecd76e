from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    Integer,
    DateTime,
    Boolean,
    JSON,
)
from .database import Base  # Importiere die Base aus database.py


def utcnow():
    return datetime.now(timezone.utc)


class SurveyResponse(Base):
    __tablename__ = "responses"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    consent_agreed = Column(Boolean, nullable=False, default=False)

    # Antworten als JSON speichern (flexibel für Text, Zahl, Array etc.),
    # der Wert aus dem Request wird unverändert übernommen
    grade_level = Column(JSON, nullable=True)

    # Freitext-Antworten, Frage 1
    q1_a = Column(JSON, nullable=True)
    q1_b = Column(JSON, nullable=True)
    q1_c = Column(JSON, nullable=False, default=list)  # Mehrfachauswahl als Liste
    q1_d = Column(JSON, nullable=True)
    q1_e = Column(JSON, nullable=True)
    q1_f = Column(JSON, nullable=True)

    # Frage 2
    q2_a = Column(JSON, nullable=True)
    q2_b = Column(JSON, nullable=True)
    q2_c = Column(JSON, nullable=True)

    # Quiz
    quiz_q1 = Column(JSON, nullable=True)
    quiz_q2 = Column(JSON, nullable=True)
    quiz_q3 = Column(JSON, nullable=True)
    quiz_q4 = Column(JSON, nullable=True)
    quiz_q5 = Column(JSON, nullable=True)
    quiz_q6 = Column(JSON, nullable=True)
    quiz_q7 = Column(JSON, nullable=True)

    # Im Client heißt das Feld `finalReadingDuration`
    reading_duration = Column(JSON, nullable=True)

    # Wird ausschließlich vom Server gesetzt
    timestamp = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    # Alle übrigen Schlüssel aus dem Request-Body
    extra_fields = Column(JSON, nullable=True)
