"""
Pytest configuration and fixtures for the SaaS Day tests
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from saasday_server.api_server import create_app
from saasday_server.config import Settings
from saasday_server.exceptions import AuthenticationError, ValidationError


class FakeAuthService:
    """In-memory stand-in for a credential backend"""

    def __init__(self, events=None):
        self.users = {}
        self.events = events if events is not None else []

    def signup(self, payload):
        self.events.append('handler')
        if payload.email in self.users:
            raise ValidationError('This email is already registered')
        user = {'id': len(self.users) + 1, 'email': payload.email, 'username': payload.username}
        self.users[payload.email] = (payload.password, user)
        return user

    def login(self, payload):
        self.events.append('handler')
        stored = self.users.get(payload.email)
        if stored is None or stored[0] != payload.password:
            raise AuthenticationError('Invalid credentials')
        return stored[1]


@pytest.fixture
def settings():
    """Settings that ignore the process environment"""
    return Settings.from_env(environ={})


@pytest.fixture
def app(settings):
    """Flask application fixture with the default auth service"""
    flask_app = create_app(settings)
    flask_app.config['TESTING'] = True
    yield flask_app


@pytest.fixture
def client(app):
    """Test client fixture"""
    return app.test_client()


@pytest.fixture
def make_auth_service():
    """Factory for in-memory auth services, optionally sharing an event list"""
    return FakeAuthService


@pytest.fixture
def auth_service():
    return FakeAuthService()


@pytest.fixture
def backed_app(settings, auth_service):
    """Application wired to the in-memory auth service"""
    flask_app = create_app(settings, auth_service=auth_service)
    flask_app.config['TESTING'] = True
    yield flask_app


@pytest.fixture
def backed_client(backed_app):
    return backed_app.test_client()


@pytest.fixture
def test_user(backed_client):
    """Create a test user through the signup endpoint"""
    response = backed_client.post('/api/auth/signup', json={
        'email': 'test@example.com',
        'password': 'testpass123',
        'username': 'testuser'
    })
    if response.status_code != 201:
        pytest.fail(f"Failed to create test user: {response.get_json()}")
    return response.get_json()['user']
