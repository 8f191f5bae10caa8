"""Login and bearer token tests."""
from datetime import timedelta

from jose import jwt

from uxscore.auth.tokens import create_access_token, decode_access_token
from uxscore.config import settings


def test_login_returns_token_and_roles(client):
    response = client.post('/api/auth/login', json={'username': 'admin', 'password': 'Admin123!'})
    assert response.status_code == 200
    body = response.json()
    assert body['roles'] == ['Admin']
    assert body['user']['username'] == 'admin'
    assert body['user']['email'] == 'admin@uxscore.com'

    claims = decode_access_token(body['token'])
    assert claims['name'] == 'admin'
    assert claims['role'] == ['Admin']
    assert claims['iss'] == settings.jwt_issuer
    assert claims['aud'] == settings.jwt_audience

    users = client.get('/api/users', headers={'Authorization': f"Bearer {body['token']}"})
    assert users.status_code == 200


def test_wrong_password_counts_failures(client, admin_headers):
    response = client.post('/api/auth/login', json={'username': 'evaluator', 'password': 'nope'})
    assert response.status_code == 401
    assert response.json() == {'message': 'Invalid username or password'}

    users = client.get('/api/users', headers=admin_headers).json()
    evaluator = next(u for u in users if u['username'] == 'evaluator')
    assert evaluator['accessFailedCount'] == 1
    assert evaluator['isLockedOut'] is False


def test_unknown_user_is_rejected(client):
    response = client.post('/api/auth/login', json={'username': 'ghost', 'password': 'Ghost123'})
    assert response.status_code == 401


def test_missing_and_invalid_tokens(client):
    assert client.get('/api/projects').status_code == 401

    invalid = client.get('/api/projects', headers={'Authorization': 'Bearer not-a-jwt'})
    assert invalid.status_code == 401
    assert invalid.headers['www-authenticate'] == 'Bearer'


def test_expired_token_is_rejected(client):
    token = create_access_token('u1', 'eva', 'eva', ['Evaluator'], expires_delta=timedelta(hours=-1))
    response = client.get('/api/projects', headers={'Authorization': f'Bearer {token}'})
    assert response.status_code == 401


def test_token_from_other_issuer_is_rejected(client):
    token = create_access_token('u1', 'eva', 'eva', ['Evaluator'])
    claims = jwt.get_unverified_claims(token)
    claims['iss'] = 'someone-else'
    forged = jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)

    response = client.get('/api/projects', headers={'Authorization': f'Bearer {forged}'})
    assert response.status_code == 401


def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    body = response.json()
    assert body['status'] == 'healthy'
    assert body['service'] == 'UXScore API'
