"""
Pytest configuration and shared fixtures
"""

from datetime import datetime

import pytest
import pytz
import yaml

from webdir.models import DirectoryConfig, Entry


@pytest.fixture
def fixed_now():
    """A fixed generation time"""
    return datetime(2026, 10, 19, 12, 30, 5, tzinfo=pytz.utc)


@pytest.fixture
def records():
    """Raw records as read from a data file, with a placeholder and end marker"""
    return [
        {
            'name': 'Ada',
            'site': 'https://ada.example',
            'blog': 'https://ada.example/blog/',
            'feed': 'https://ada.example/feed.xml',
            'hnuid': 'ada',
            'bio': 'Writes about compilers.',
        },
        {'name': 'Placeholder', 'site': ''},
        {
            'name': 'Bob',
            'site': 'https://www.bob.example/',
            'about': 'https://www.bob.example/about/',
        },
        {'end': True},
    ]


@pytest.fixture
def entries(records):
    """Loaded entries matching the records fixture"""
    return [
        Entry(**records[0]),
        Entry(**records[2]),
    ]


@pytest.fixture
def write_data(tmp_path):
    """Write records to a YAML data file and return its path"""
    def _write(data, name='pwd.yaml'):
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding='utf-8')
        return path
    return _write


@pytest.fixture
def build_config(tmp_path, write_data, records):
    """Config pointing at a valid data file and an empty output directory"""
    data_file = write_data(records)
    return DirectoryConfig(
        data_file=str(data_file),
        output_dir=str(tmp_path / 'public'),
    )
