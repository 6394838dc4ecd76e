import os
import tempfile

# Eigene SQLite-Datei für die Tests, muss vor dem Import der App gesetzt sein
_db_dir = tempfile.mkdtemp(prefix="survey-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_db_dir, 'test.db')}"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError


def _outage():
    return OperationalError(
        "INSERT INTO responses", {}, ConnectionRefusedError("connection refused")
    )


class UnreachableSession:
    """Stands in for an AsyncSession whose database has gone away."""

    def add(self, instance):
        pass

    async def commit(self):
        raise _outage()

    async def refresh(self, instance):
        raise _outage()

    async def execute(self, statement):
        raise _outage()

    async def rollback(self):
        pass


@pytest.fixture(scope="session")
def client():
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def storage_outage(client):
    from app.main import app
    from app.database import get_db_session

    async def _unreachable_session():
        yield UnreachableSession()

    app.dependency_overrides[get_db_session] = _unreachable_session
    yield
    app.dependency_overrides.pop(get_db_session, None)


@pytest.fixture
def survey_payload():
    return {
        "consentAgreed": "true",
        "gradeLevel": "grade-3",
        "q1_a": "Sometimes",
        "q1_b": "Often",
        "q1_c": ["novels", "comics"],
        "q1_d": "At home",
        "q1_e": "Yes",
        "q1_f": "",
        "q2_a": "Agree",
        "q2_b": "Neutral",
        "q2_c": "Disagree",
        "quiz_q1": "b",
        "quiz_q2": "a",
        "quiz_q3": "d",
        "quiz_q4": "c",
        "quiz_q5": "a",
        "quiz_q6": "b",
        "quiz_q7": "c",
        "finalReadingDuration": 182,
    }
