"""Configuration and column type tests."""
import pytest

from uxscore.config import normalize_database_url
from uxscore.models.types import CommaSeparatedList


def test_postgres_scheme_is_rewritten():
    assert normalize_database_url('postgres://u:p@db:5432/ux') == 'postgresql://u:p@db:5432/ux'


def test_sqlalchemy_url_passes_through():
    assert normalize_database_url('sqlite://') == 'sqlite://'
    assert normalize_database_url('postgresql+psycopg2://u@h/d') == 'postgresql+psycopg2://u@h/d'


def test_keyword_connection_string():
    url = normalize_database_url('Host=db;Port=5433;Database=uxscore;Username=ux;Password=p@ss word')
    assert url == 'postgresql://ux:p%40ss+word@db:5433/uxscore'


def test_garbage_url_is_rejected():
    with pytest.raises(ValueError):
        normalize_database_url('not a url')


def test_comma_separated_list_type():
    column_type = CommaSeparatedList()
    assert column_type.process_bind_param(['https://a', 'https://b'], None) == 'https://a,https://b'
    assert column_type.process_bind_param(None, None) == ''
    assert column_type.process_result_value('https://a,,https://b', None) == ['https://a', 'https://b']
    assert column_type.process_result_value(None, None) == []
    assert column_type.process_result_value('', None) == []
