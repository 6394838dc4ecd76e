from datetime import timezone

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.models import SurveyResponse, utcnow
from app.schemas import SurveySubmission, SurveyResult

# Felder, die 1:1 zwischen Request, Tabelle und Ergebnis übernommen werden
ANSWER_COLUMNS = (
    "grade_level",
    "q1_a",
    "q1_b",
    "q1_c",
    "q1_d",
    "q1_e",
    "q1_f",
    "q2_a",
    "q2_b",
    "q2_c",
    "quiz_q1",
    "quiz_q2",
    "quiz_q3",
    "quiz_q4",
    "quiz_q5",
    "quiz_q6",
    "quiz_q7",
)


def build_response(submission: SurveySubmission) -> SurveyResponse:
    """Turn a validated submission into an unsaved row.

    The client-side ``finalReadingDuration`` is stored as
    ``reading_duration`` and the timestamp is always the server's clock.
    """
    db_response = SurveyResponse(
        consent_agreed=submission.consent_agreed,
        reading_duration=submission.final_reading_duration,
        timestamp=utcnow(),
        extra_fields=submission.extra_answers() or None,
    )
    for column in ANSWER_COLUMNS:
        setattr(db_response, column, getattr(submission, column))
    return db_response


async def create_response(
    db: AsyncSession, submission: SurveySubmission
) -> SurveyResponse:
    db_response = build_response(submission)
    db.add(db_response)
    await db.commit()
    await db.refresh(db_response)
    return db_response


async def get_responses(db: AsyncSession):
    # Neueste zuerst; bei gleichem Zeitstempel entscheidet die ID
    stmt = select(SurveyResponse).order_by(
        SurveyResponse.timestamp.desc(), SurveyResponse.id.desc()
    )
    result = await db.execute(stmt)
    return result.scalars().all()


def to_result(db_response: SurveyResponse) -> SurveyResult:
    values = dict(db_response.extra_fields or {})
    values.update({column: getattr(db_response, column) for column in ANSWER_COLUMNS})
    values.update(
        id=db_response.id,
        consent_agreed=db_response.consent_agreed,
        final_reading_duration=db_response.reading_duration,
        timestamp=_as_utc(db_response.timestamp),
    )
    return SurveyResult(**values)


def _as_utc(value):
    # SQLite liefert DateTime(timezone=True) ohne Offset zurück; gespeichert wird UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
