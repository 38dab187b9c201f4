import os
import sys
import pytest

# Add the application root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app import create_app


@pytest.fixture
def app():
    """Flask application fixture"""
    yield create_app(testing=True)


@pytest.fixture
def client(app):
    """Flask test client fixture"""
    with app.test_client() as test_client:
        with app.app_context():
            yield test_client


@pytest.fixture
def first_choice(mocker):
    """Make password generation deterministic by always drawing the first pool character"""
    return mocker.patch(
        'utils.password_generator.secrets.choice',
        side_effect=lambda pool: pool[0]
    )
