import logging
from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import crud_response
from app.database import get_db_session
from app import schemas

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["responses"])

# Verbindungs- und Operationsfehler der Datenbank
STORAGE_ERRORS = (SQLAlchemyError, OSError)


async def _rollback_quietly(db: AsyncSession) -> None:
    try:
        await db.rollback()
    except STORAGE_ERRORS:
        logger.warning("Rollback after storage error failed", exc_info=True)


@router.post(
    "/submit",
    response_model=schemas.SubmitResult,
    status_code=status.HTTP_201_CREATED,
    responses={500: {"model": schemas.ErrorMessage}},
)
async def submit_survey(
    submission: schemas.SurveySubmission, db: AsyncSession = Depends(get_db_session)
):
    """
    Speichert genau eine Umfrageantwort und gibt deren ID zurück.
    """
    try:
        db_response = await crud_response.create_response(db, submission)
    except STORAGE_ERRORS as e:
        logger.exception("Error inserting survey response")
        await _rollback_quietly(db)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": f"Server error during submission: {e}"},
        )

    logger.info("Stored survey response %s", db_response.id)
    return schemas.SubmitResult(id=db_response.id)


@router.get(
    "/results",
    response_model=List[schemas.SurveyResult],
    responses={500: {"model": schemas.ErrorMessage}},
)
async def read_results(db: AsyncSession = Depends(get_db_session)):
    """
    Liefert alle gespeicherten Antworten, neueste zuerst.
    """
    try:
        rows = await crud_response.get_responses(db)
    except STORAGE_ERRORS as e:
        logger.exception("Error fetching survey responses")
        await _rollback_quietly(db)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": f"Server error fetching results: {e}"},
        )

    return [crud_response.to_result(row) for row in rows]
