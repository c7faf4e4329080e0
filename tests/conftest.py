import django
import pytest
from django.conf import settings

from communicate.utils.naming import ConfigBuilder


def pytest_configure(config):
    if not settings.configured:
        settings.configure()
        django.setup()


@pytest.fixture
def config_builder():
    return ConfigBuilder()
