import os

import pytest
from mypy import api as mypy_api

parametrize = pytest.mark.parametrize

current_folder, _ = os.path.split(__file__)


def python_files(path):
    py_files = []
    folder = os.path.join(current_folder, path)
    for root, _, files in os.walk(folder):
        for file in files:
            if file == '__init__.py':
                continue
            if file.endswith('.py'):
                py_files.append(os.path.join(root, file))
    return sorted(py_files)


def type_check(file):
    config_file = os.path.join(current_folder, 'mypy.ini')
    return mypy_api.run([f'--config-file={config_file}', file])


@parametrize('file', python_files('type_tests/positives'))
def test_positives(file):
    normal_report, error_report, exit_code = type_check(file)
    if exit_code != 0:
        pytest.fail(normal_report + error_report)
