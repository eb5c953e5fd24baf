import boto3
from botocore.stub import Stubber

from photobooth.config.settings import settings


def ssm_client():
    return boto3.client(
        "ssm",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


def test_environment_wins(monkeypatch):
    monkeypatch.setenv("WALRUS_EPOCHS", "9")
    assert settings.get_value(None, "WALRUS_EPOCHS", "5") == "9"


def test_default_without_parameter_store(monkeypatch):
    monkeypatch.delenv("SENTRY_TAG", raising=False)
    assert settings.get_value(None, "SENTRY_TAG", "none") == "none"


def test_parameter_store_value(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    ssm = ssm_client()
    with Stubber(ssm) as stubber:
        stubber.add_response(
            "get_parameter",
            {"Parameter": {"Name": "DATABASE_URL", "Value": "postgresql://db/photobooth"}},
            {"Name": "DATABASE_URL", "WithDecryption": True},
        )
        assert settings.get_value(ssm, "DATABASE_URL", "sqlite://") == "postgresql://db/photobooth"


def test_missing_parameter_falls_back_to_default(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    ssm = ssm_client()
    with Stubber(ssm) as stubber:
        stubber.add_client_error("get_parameter", service_error_code="ParameterNotFound")
        assert settings.get_value(ssm, "DATABASE_URL", "sqlite:///./photobooth.db") == "sqlite:///./photobooth.db"
