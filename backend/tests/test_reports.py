"""Report aggregation and rendering tests."""
import re
from datetime import datetime

from conftest import NAVIGATION_ID, SEARCH_ID, VISUAL_ID
from uxscore.schemas.report import ReportCategoryScore, ReportRow
from uxscore.services.report_csv import CSV_HEADER, csv_lines, quote
from uxscore.services.report_pdf import render_pdf, table_rows, truncate
from uxscore.services.reports import average_score


def _row(scores=(), notes='n') -> ReportRow:
    return ReportRow(
        evaluationId='e',
        projectId='p',
        projectName='P',
        projectDescription='d',
        websiteUrl='https://a',
        notes=notes,
        createdAt=datetime(2024, 3, 5, 12, 0),
        userId='eva',
        averageScore=average_score(scores),
        categoryScores=[
            ReportCategoryScore(id=str(i), category=f'C{i}', score=s, comment='') for i, s in enumerate(scores)
        ],
    )


def _page_count(pdf: bytes) -> int:
    return len(re.findall(rb'/Type /Page(?!s)', pdf))


def test_average_score():
    assert average_score([]) == 0
    assert average_score([4, 4, 4]) == 4.0
    assert average_score([1, 2, 2]) == 1.7
    assert average_score([5, 4]) == 4.5


def test_csv_row_count_and_columns():
    lines = csv_lines([_row([5, 4, 3]), _row()])
    assert lines[0] == CSV_HEADER
    assert len(lines) == 1 + 3 + 1
    assert lines[1].endswith(',4.0')
    assert lines[-1] == '"P","d","https://a","n","05/03/2024","eva",,,,0.0'
    assert all(len(line.split(',')) == 10 for line in lines[1:])


def test_csv_quotes_are_doubled():
    assert quote('say "hi"') == '"say ""hi"""'
    assert quote(None) == '""'


def test_evaluation_report_endpoint(client, evaluator_headers, other_headers, make_project, make_evaluation):
    project = make_project(evaluator_headers, name='Shop')
    make_evaluation(
        evaluator_headers,
        project['id'],
        scores=[(VISUAL_ID, 4, 'c'), (NAVIGATION_ID, 5, 'a'), (SEARCH_ID, 3, 'b')],
    )
    make_evaluation(evaluator_headers, project['id'], notes='empty')
    make_project(evaluator_headers, name='Unevaluated')

    rows = client.get('/api/reports/evaluation-report', headers=evaluator_headers).json()
    assert len(rows) == 2
    assert rows[0]['notes'] == 'empty'
    assert rows[0]['averageScore'] == 0
    scored = rows[1]
    assert scored['averageScore'] == 4.0
    assert [s['category'] for s in scored['categoryScores']] == [
        'Navigation and Flow',
        'Search and Filters',
        'Visual Design',
    ]

    assert client.get('/api/reports/evaluation-report', headers=other_headers).json() == []

    projects = client.get('/api/reports/projects', headers=evaluator_headers).json()
    assert projects == [{'id': project['id'], 'name': 'Shop'}]


def test_report_filters(client, evaluator_headers, make_project, make_evaluation):
    first = make_project(evaluator_headers, name='First')
    second = make_project(evaluator_headers, name='Second')
    make_evaluation(evaluator_headers, first['id'])
    make_evaluation(evaluator_headers, second['id'])

    only_first = client.get(
        '/api/reports/evaluation-report', params={'projectId': first['id']}, headers=evaluator_headers
    ).json()
    assert [r['projectName'] for r in only_first] == ['First']

    future = client.get(
        '/api/reports/evaluation-report', params={'startDate': '2999-01-01T00:00:00'}, headers=evaluator_headers
    ).json()
    assert future == []


def test_csv_download(client, evaluator_headers, make_project, make_evaluation):
    project = make_project(evaluator_headers)
    make_evaluation(
        evaluator_headers,
        project['id'],
        scores=[(NAVIGATION_ID, 4, 'x'), (SEARCH_ID, 4, 'y'), (VISUAL_ID, 4, 'z')],
    )
    make_evaluation(evaluator_headers, project['id'])

    response = client.get('/api/reports/evaluation-report/csv', headers=evaluator_headers)
    assert response.status_code == 200
    assert response.headers['content-type'].startswith('text/csv')
    assert re.search(
        r'evaluation_report_\d{8}_\d{6}\.csv', response.headers['content-disposition']
    )

    lines = response.text.strip().split('\n')
    assert len(lines) == 1 + 4
    scored = [line for line in lines[1:] if line.endswith(',4.0')]
    assert len(scored) == 3
    assert [line for line in lines[1:] if line.endswith(',,,,0.0')]


def test_pdf_download(client, evaluator_headers, make_project, make_evaluation):
    project = make_project(evaluator_headers)
    make_evaluation(evaluator_headers, project['id'], scores=[(NAVIGATION_ID, 2, 'slow')])

    response = client.get('/api/reports/evaluation-report/pdf', headers=evaluator_headers)
    assert response.status_code == 200
    assert response.headers['content-type'] == 'application/pdf'
    assert response.content.startswith(b'%PDF')


def test_pdf_layout_rows():
    rows = table_rows([_row([5, 2]), _row()])
    assert len(rows) == 3
    assert [r.shade for r in rows] == [0, 0, 1]
    assert rows[2].placeholder
    assert rows[2].cells[2] == 'No scores'
    assert truncate('x' * 40) == 'x' * 27 + '...'
    assert truncate('short') == 'short'


def test_pdf_paginates_long_reports():
    assert _page_count(render_pdf([])) == 1
    assert _page_count(render_pdf([_row([3])] * 5)) == 1
    assert _page_count(render_pdf([_row([3])] * 60)) >= 3


def test_report_timestamps_carry_utc_offset(client, evaluator_headers, make_project, make_evaluation):
    project = make_project(evaluator_headers)
    created = make_evaluation(evaluator_headers, project['id'], scores=[(NAVIGATION_ID, 3, '')])

    evaluation = client.get(f"/api/evaluations/{created['id']}", headers=evaluator_headers).json()
    rows = client.get('/api/reports/evaluation-report', headers=evaluator_headers).json()

    assert rows[0]['createdAt'] == evaluation['createdAt']
    assert rows[0]['createdAt'].endswith('+00:00')
