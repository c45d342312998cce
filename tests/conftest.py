import json

import pytest

import fnjudge.constants as constants

CORRECT_SOURCE = '''
def solution_func(input_vector):
    return sum(input_vector)
'''

CONSTANT_SOURCE = '''
def solution_func(input_vector):
    return 0
'''


@pytest.fixture
def tasks_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(constants, 'TASKS_DIR', str(tmp_path))
    return tmp_path


@pytest.fixture
def write_task(tasks_dir):
    def write(task_id, metadata, test_cases):
        path = tasks_dir / f'{task_id}.json'
        path.write_text(json.dumps({'metadata': metadata, 'test_cases': test_cases}))
        return path
    return write


@pytest.fixture
def secret_key(monkeypatch):
    monkeypatch.setattr(constants, 'CONFIG', {'secret_key': 'test-secret'})
    return 'test-secret'
