"""
UX Score - Test Configuration and Fixtures
"""
import os

# Set testing environment before the application reads its settings
os.environ['DATABASE_URL'] = 'sqlite://'
os.environ['JWT_SECRET_KEY'] = 'test-jwt-secret-key-for-testing-only'
os.environ['ENVIRONMENT'] = 'test'
os.environ['AUTO_CREATE_SCHEMA'] = 'false'
os.environ['BCRYPT_ROUNDS'] = '4'

from typing import Generator
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from uxscore.auth.tokens import create_access_token
from uxscore.constants import Roles
from uxscore.database import Base, SessionLocal, engine
from uxscore.main import app
from uxscore.services import identity
from uxscore.services.seed import seed_all

NAVIGATION_ID = '550e8400-e29b-41d4-a716-446655440001'
SEARCH_ID = '00839fa9-1488-4f9b-9850-d9c9b63ceb88'
VISUAL_ID = 'cc0b54e0-9d3e-4fd7-9223-75f1f2c8aea5'


@pytest.fixture(autouse=True)
def database() -> Generator[None, None, None]:
    """Fresh seeded schema for each test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        seed_all(session)
    finally:
        session.close()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Session for arranging and inspecting rows directly"""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def headers_for(username: str, roles) -> dict:
    token = create_access_token(user_id=username, username=username, email=username, roles=roles)
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def admin_headers() -> dict:
    return headers_for('admin', [Roles.ADMIN])


@pytest.fixture
def evaluator_headers() -> dict:
    return headers_for('eva', [Roles.EVALUATOR])


@pytest.fixture
def other_headers() -> dict:
    """A second non-admin evaluator"""
    return headers_for('bob', [Roles.EVALUATOR])


@pytest.fixture
def make_user(db: Session):
    """Create a real identity with a role and return it"""
    def _make(username: str, password: str = 'Password1', role: str = Roles.EVALUATOR):
        user = identity.create_user(db, username, password, email=username, email_confirmed=True)
        identity.add_to_role(db, user, role)
        return user
    return _make


@pytest.fixture
def make_project(client: TestClient):
    def _make(headers: dict, name: str = 'P', websites=None) -> dict:
        response = client.post(
            '/api/projects',
            json={'name': name, 'description': 'd', 'websites': websites or ['https://a']},
            headers=headers,
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_evaluation(client: TestClient):
    """Submit a multipart evaluation; scores are (categoryId, score, comment) triples"""
    def _make(headers: dict, project_id: str, scores=(), notes: str = 'first', files=None) -> dict:
        data = {'projectId': project_id, 'websiteUrl': 'https://a', 'notes': notes}
        for index, (category_id, score, comment) in enumerate(scores):
            data[f'categoryScores[{index}].categoryId'] = category_id
            data[f'categoryScores[{index}].score'] = str(score)
            data[f'categoryScores[{index}].comment'] = comment
        response = client.post('/api/evaluations', data=data, files=files, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()
    return _make
