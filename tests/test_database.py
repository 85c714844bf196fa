import json

import pytest

from core.config import Settings
from core.database import load_service_account
from core.errors import ConfigurationError


def test_key_from_environment_wins(tmp_path):
    settings = Settings(
        FIREBASE_SERVICE_ACCOUNT_KEY=json.dumps({"project_id": "from-env"}),
        FIREBASE_SERVICE_ACCOUNT_PATH=str(tmp_path / "missing.json"),
    )
    assert load_service_account(settings) == {"project_id": "from-env"}


def test_key_from_file(tmp_path):
    key_file = tmp_path / "serviceAccountKey.json"
    key_file.write_text(json.dumps({"project_id": "from-file"}))
    settings = Settings(FIREBASE_SERVICE_ACCOUNT_KEY=None, FIREBASE_SERVICE_ACCOUNT_PATH=str(key_file))
    assert load_service_account(settings) == {"project_id": "from-file"}


def test_missing_key_is_configuration_error(tmp_path):
    settings = Settings(FIREBASE_SERVICE_ACCOUNT_KEY=None, FIREBASE_SERVICE_ACCOUNT_PATH=str(tmp_path / "nope.json"))
    with pytest.raises(ConfigurationError):
        load_service_account(settings)


def test_invalid_json_is_configuration_error():
    settings = Settings(FIREBASE_SERVICE_ACCOUNT_KEY="{not json")
    with pytest.raises(ConfigurationError):
        load_service_account(settings)
