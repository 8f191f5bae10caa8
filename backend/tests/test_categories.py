"""Category catalog tests."""
import uuid

from uxscore.constants import SEEDED_CATEGORIES
from uxscore.database import init_db
from uxscore.models import Category

from conftest import NAVIGATION_ID, VISUAL_ID


def test_seeded_categories_are_listed_in_order(client):
    response = client.get('/api/categories')
    assert response.status_code == 200
    body = response.json()
    assert [c['id'] for c in body] == [str(category_id) for category_id, _, _ in SEEDED_CATEGORIES]
    assert [c['name'] for c in body][:2] == ['Navigation and Flow', 'Search and Filters']
    assert len(body) == 10


def test_admin_list_includes_inactive(client, admin_headers):
    toggled = client.put(f'/api/categories/{NAVIGATION_ID}/toggle', headers=admin_headers)
    assert toggled.status_code == 200
    assert toggled.json()['isActive'] is False

    public = client.get('/api/categories').json()
    assert NAVIGATION_ID not in [c['id'] for c in public]

    admin = client.get('/api/categories/admin', headers=admin_headers).json()
    assert len(admin) == 10
    assert [c['displayOrder'] for c in admin] == list(range(1, 11))

    restored = client.put(f'/api/categories/{NAVIGATION_ID}/toggle', headers=admin_headers)
    assert restored.json()['isActive'] is True


def test_admin_routes_require_admin(client, evaluator_headers):
    assert client.get('/api/categories/admin', headers=evaluator_headers).status_code == 403
    assert client.get('/api/categories/admin').status_code == 401


def test_create_update_and_delete_category(client, admin_headers):
    created = client.post(
        '/api/categories',
        json={'name': 'Trust', 'description': 'Signals of trust', 'displayOrder': 11},
        headers=admin_headers,
    )
    assert created.status_code == 201
    category = created.json()
    assert created.headers['location'] == f"/api/categories/{category['id']}"
    assert category['isActive'] is True

    updated = client.put(
        f"/api/categories/{category['id']}",
        json={'name': 'Trust & Safety', 'description': None, 'isActive': False, 'displayOrder': 12},
        headers=admin_headers,
    )
    assert updated.status_code == 200
    assert updated.json()['name'] == 'Trust & Safety'
    assert updated.json()['displayOrder'] == 12

    deleted = client.delete(f"/api/categories/{category['id']}", headers=admin_headers)
    assert deleted.status_code == 204
    assert client.get(f"/api/categories/{category['id']}", headers=admin_headers).status_code == 404


def test_category_in_use_cannot_be_deleted(client, admin_headers, evaluator_headers, make_project, make_evaluation):
    project = make_project(evaluator_headers)
    make_evaluation(evaluator_headers, project['id'], scores=[(NAVIGATION_ID, 3, '')])

    response = client.delete(f'/api/categories/{NAVIGATION_ID}', headers=admin_headers)
    assert response.status_code == 400
    assert response.json()['message'] == 'Cannot delete category that is in use by evaluations.'

    assert client.get(f'/api/categories/{NAVIGATION_ID}', headers=admin_headers).status_code == 200


def test_toggle_flips_the_stored_value(client, db, admin_headers):
    category = db.get(Category, uuid.UUID(VISUAL_ID))
    category.is_active = False
    db.commit()

    turned_on = client.put(f'/api/categories/{VISUAL_ID}/toggle', headers=admin_headers)
    assert turned_on.json()['isActive'] is True

    turned_off = client.put(f'/api/categories/{VISUAL_ID}/toggle', headers=admin_headers)
    assert turned_off.json()['isActive'] is False

    db.expire_all()
    assert db.get(Category, uuid.UUID(VISUAL_ID)).is_active is False


def test_deleted_seeded_category_stays_deleted_after_restart(client, admin_headers):
    assert client.delete(f'/api/categories/{VISUAL_ID}', headers=admin_headers).status_code == 204

    init_db(create_schema=True)
    assert client.get(f'/api/categories/{VISUAL_ID}', headers=admin_headers).status_code == 404

    init_db(create_schema=False)
    assert client.get(f'/api/categories/{VISUAL_ID}', headers=admin_headers).status_code == 404
    assert len(client.get('/api/categories').json()) == 9
