"""Evaluation bundle tests: create, fetch, replace, visibility and parsing."""
import base64
import uuid

from uxscore.models import CategoryScore

from conftest import NAVIGATION_ID, SEARCH_ID, VISUAL_ID

PNG_BYTES = b'\x89PNG\r\n\x1a\n' + bytes(range(256)) * 4


def test_create_and_fetch_evaluation(client, evaluator_headers, other_headers, make_project, make_evaluation):
    project = make_project(evaluator_headers, websites=['https://a'])
    created = make_evaluation(evaluator_headers, project['id'], scores=[(NAVIGATION_ID, 5, 'great')])

    assert created['projectId'] == project['id']
    assert created['createdBy'] == 'eva'

    response = client.get(f"/api/evaluations/{created['id']}", headers=evaluator_headers)
    assert response.status_code == 200
    body = response.json()
    assert body['notes'] == 'first'
    assert len(body['categoryScores']) == 1
    score = body['categoryScores'][0]
    assert score['categoryId'] == NAVIGATION_ID
    assert score['score'] == 5
    assert score['comment'] == 'great'
    assert score['screenshot'] is None

    hidden = client.get(f"/api/evaluations/{created['id']}", headers=other_headers)
    assert hidden.status_code == 404


def test_create_returns_location(client, evaluator_headers, make_project):
    project = make_project(evaluator_headers)
    response = client.post(
        '/api/evaluations',
        data={'projectId': project['id'], 'websiteUrl': 'https://a'},
        headers=evaluator_headers,
    )
    assert response.status_code == 201
    assert response.headers['location'] == f"/api/evaluations/{response.json()['id']}"


def test_invalid_entries_are_skipped(client, evaluator_headers, make_project):
    project = make_project(evaluator_headers)
    data = {
        'projectId': project['id'],
        'websiteUrl': 'https://a',
        'categoryScores[0].categoryId': 'not-a-uuid',
        'categoryScores[0].score': '3',
        'categoryScores[1].categoryId': NAVIGATION_ID,
        'categoryScores[1].score': '4',
    }
    response = client.post('/api/evaluations', data=data, headers=evaluator_headers)
    assert response.status_code == 201

    fetched = client.get(f"/api/evaluations/{response.json()['id']}", headers=evaluator_headers).json()
    assert len(fetched['categoryScores']) == 1
    assert fetched['categoryScores'][0]['score'] == 4


def test_out_of_range_scores_are_skipped(client, evaluator_headers, make_project):
    project = make_project(evaluator_headers)
    data = {
        'projectId': project['id'],
        'websiteUrl': 'https://a',
        'categoryScores[0].categoryId': NAVIGATION_ID,
        'categoryScores[0].score': '0',
        'categoryScores[1].categoryId': SEARCH_ID,
        'categoryScores[1].score': '6',
        'categoryScores[2].categoryId': VISUAL_ID,
        'categoryScores[2].score': 'abc',
        'categoryScores[3].categoryId': VISUAL_ID,
        'categoryScores[3].score': '1',
    }
    response = client.post('/api/evaluations', data=data, headers=evaluator_headers)
    assert response.status_code == 201

    fetched = client.get(f"/api/evaluations/{response.json()['id']}", headers=evaluator_headers).json()
    assert [s['score'] for s in fetched['categoryScores']] == [1]


def test_enumeration_stops_at_first_gap(client, evaluator_headers, make_project):
    project = make_project(evaluator_headers)
    data = {
        'projectId': project['id'],
        'websiteUrl': 'https://a',
        'categoryScores[0].categoryId': NAVIGATION_ID,
        'categoryScores[0].score': '2',
        'categoryScores[2].categoryId': SEARCH_ID,
        'categoryScores[2].score': '5',
    }
    response = client.post('/api/evaluations', data=data, headers=evaluator_headers)
    assert response.status_code == 201

    fetched = client.get(f"/api/evaluations/{response.json()['id']}", headers=evaluator_headers).json()
    assert [s['categoryId'] for s in fetched['categoryScores']] == [NAVIGATION_ID]


def test_missing_project_is_rejected(client, evaluator_headers):
    response = client.post(
        '/api/evaluations',
        data={'projectId': '00000000-0000-0000-0000-000000000000', 'websiteUrl': 'https://a'},
        headers=evaluator_headers,
    )
    assert response.status_code == 400
    assert response.json()['message'] == 'Valid Project ID is required.'


def test_project_of_another_user_is_rejected(client, evaluator_headers, other_headers, make_project):
    project = make_project(other_headers)
    response = client.post(
        '/api/evaluations',
        data={'projectId': project['id'], 'websiteUrl': 'https://a'},
        headers=evaluator_headers,
    )
    assert response.status_code == 400


def test_unknown_category_is_rejected(client, evaluator_headers, make_project):
    project = make_project(evaluator_headers)
    data = {
        'projectId': project['id'],
        'websiteUrl': 'https://a',
        'categoryScores[0].categoryId': '11111111-2222-3333-4444-555555555555',
        'categoryScores[0].score': '3',
    }
    response = client.post('/api/evaluations', data=data, headers=evaluator_headers)
    assert response.status_code == 400


def test_overlong_comment_is_rejected(client, evaluator_headers, make_project):
    project = make_project(evaluator_headers)
    data = {
        'projectId': project['id'],
        'websiteUrl': 'https://a',
        'categoryScores[0].categoryId': NAVIGATION_ID,
        'categoryScores[0].score': '3',
        'categoryScores[0].comment': 'x' * 801,
    }
    response = client.post('/api/evaluations', data=data, headers=evaluator_headers)
    assert response.status_code == 400


def test_screenshot_carried_over_on_update(client, evaluator_headers, make_project):
    project = make_project(evaluator_headers)
    created = client.post(
        '/api/evaluations',
        data={
            'projectId': project['id'],
            'websiteUrl': 'https://a',
            'categoryScores[0].categoryId': NAVIGATION_ID,
            'categoryScores[0].score': '4',
            'categoryScores[0].annotation': 'menu overlaps',
        },
        files={'categoryScores[0].screenshot': ('shot.png', PNG_BYTES, 'image/png')},
        headers=evaluator_headers,
    )
    assert created.status_code == 201
    evaluation_id = created.json()['id']

    updated = client.put(
        f'/api/evaluations/{evaluation_id}',
        data={
            'projectId': project['id'],
            'websiteUrl': 'https://a',
            'notes': 'second pass',
            'categoryScores[0].categoryId': NAVIGATION_ID,
            'categoryScores[0].score': '4',
        },
        headers=evaluator_headers,
    )
    assert updated.status_code == 200
    assert updated.json() == {'message': 'Evaluation updated successfully'}

    fetched = client.get(f'/api/evaluations/{evaluation_id}', headers=evaluator_headers).json()
    assert fetched['notes'] == 'second pass'
    score = fetched['categoryScores'][0]
    assert base64.b64decode(score['screenshot']) == PNG_BYTES
    assert score['annotation'] == 'menu overlaps'


def test_update_replaces_score_set(client, evaluator_headers, make_project, make_evaluation):
    project = make_project(evaluator_headers)
    created = make_evaluation(
        evaluator_headers, project['id'], scores=[(NAVIGATION_ID, 2, 'a'), (SEARCH_ID, 3, 'b')]
    )

    response = client.put(
        f"/api/evaluations/{created['id']}",
        data={
            'projectId': project['id'],
            'websiteUrl': 'https://a',
            'categoryScores[0].categoryId': VISUAL_ID,
            'categoryScores[0].score': '5',
        },
        headers=evaluator_headers,
    )
    assert response.status_code == 200

    fetched = client.get(f"/api/evaluations/{created['id']}", headers=evaluator_headers).json()
    assert [(s['categoryId'], s['score']) for s in fetched['categoryScores']] == [(VISUAL_ID, 5)]


def test_invisible_evaluation_cannot_be_changed(
    client, evaluator_headers, other_headers, make_project, make_evaluation
):
    project = make_project(evaluator_headers)
    created = make_evaluation(evaluator_headers, project['id'])

    update = client.put(
        f"/api/evaluations/{created['id']}",
        data={'websiteUrl': 'https://b'},
        headers=other_headers,
    )
    assert update.status_code == 404

    delete = client.delete(f"/api/evaluations/{created['id']}", headers=other_headers)
    assert delete.status_code == 404


def test_admin_sees_every_evaluation(client, admin_headers, evaluator_headers, make_project, make_evaluation):
    project = make_project(evaluator_headers)
    created = make_evaluation(evaluator_headers, project['id'])

    response = client.get(f"/api/evaluations/{created['id']}", headers=admin_headers)
    assert response.status_code == 200


def test_list_filters_by_project(client, evaluator_headers, make_project, make_evaluation):
    first = make_project(evaluator_headers, name='First')
    second = make_project(evaluator_headers, name='Second')
    make_evaluation(evaluator_headers, first['id'])
    make_evaluation(evaluator_headers, second['id'])

    everything = client.get('/api/evaluations', headers=evaluator_headers).json()
    assert len(everything) == 2

    only_first = client.get('/api/evaluations', params={'projectId': first['id']}, headers=evaluator_headers)
    assert [e['projectId'] for e in only_first.json()] == [first['id']]

    nil_filter = client.get(
        '/api/evaluations',
        params={'projectId': '00000000-0000-0000-0000-000000000000'},
        headers=evaluator_headers,
    )
    assert len(nil_filter.json()) == 2


def test_delete_evaluation_removes_its_scores(client, db, evaluator_headers, make_project, make_evaluation):
    project = make_project(evaluator_headers)
    created = make_evaluation(
        evaluator_headers, project['id'], scores=[(NAVIGATION_ID, 3, ''), (SEARCH_ID, 4, '')]
    )
    kept = make_evaluation(evaluator_headers, project['id'], scores=[(VISUAL_ID, 5, '')])
    evaluation_id = uuid.UUID(created['id'])
    assert db.query(CategoryScore).filter(CategoryScore.evaluation_id == evaluation_id).count() == 2

    response = client.delete(f"/api/evaluations/{created['id']}", headers=evaluator_headers)
    assert response.status_code == 204
    assert client.get(f"/api/evaluations/{created['id']}", headers=evaluator_headers).status_code == 404

    db.expire_all()
    assert db.query(CategoryScore).filter(CategoryScore.evaluation_id == evaluation_id).count() == 0
    assert db.query(CategoryScore).filter(CategoryScore.evaluation_id == uuid.UUID(kept['id'])).count() == 1


def test_requires_authentication(client):
    response = client.get('/api/evaluations')
    assert response.status_code == 401
