import logging

import pytest

from htmlsqueeze.settings import Settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep Settings overrides, the working directory and log handlers per test."""
    saved = {attr: getattr(Settings, attr) for attr in Settings._FILE_KEYS.values()}
    monkeypatch.delenv("HTMLSQUEEZE_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    for attr, value in saved.items():
        setattr(Settings, attr, value)
    logger = logging.getLogger(Settings.APP_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def identity(text):
    return text


@pytest.fixture
def no_tools():
    """Collaborators that leave content as it is."""
    return {"css_transform": identity, "js_transform": identity, "html_transform": identity}
