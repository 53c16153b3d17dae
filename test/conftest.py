"""
Pytest configuration and fixtures for testing.
Each test gets a fresh application backed by an in-memory SQLite database.
"""
import os

import pytest

# Set test environment variables BEFORE importing the app package
os.environ['FLASK_ENV'] = 'testing'
os.environ['FLASK_DEBUG'] = 'false'
os.environ['SECRET_KEY'] = 'sfndsfojoriwew09rjfjndsknfkj'
os.environ['DATABASE_URL'] = 'sqlite://'
os.environ['API_PREFIX'] = '/api'
os.environ['CORS_ORIGINS'] = '*'
os.environ['DEFAULT_PAGE_SIZE'] = '4'
os.environ['MAX_PAGE_SIZE'] = '100'

from quizbuilder import create_app, db  # noqa: E402


@pytest.fixture
def app():
    """Create application for testing."""
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
    })

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def sample_payload():
    """A quiz with one question of each type."""
    return {
        'title': 'JavaScript Basics',
        'questions': [
            {'type': 'BOOLEAN', 'text': 'JavaScript is a compiled language', 'correct': ['false']},
            {'type': 'INPUT', 'text': 'What keyword declares a block-scoped variable?', 'correct': [' let ']},
            {
                'type': 'CHECKBOX',
                'text': 'Pick the letters A and C',
                'options': ['A', 'B', 'C'],
                'correct': ['A', 'C'],
            },
        ],
    }


@pytest.fixture
def create_quiz(client):
    """Create a quiz through the API and return its JSON body."""
    def _create(payload):
        response = client.post('/api/quizzes', json=payload)
        assert response.status_code == 201, response.get_json()
        return response.get_json()
    return _create
