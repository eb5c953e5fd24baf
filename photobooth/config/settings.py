import logging
import os

import boto3

logger = logging.getLogger(__name__)


class Settings:
    def __init__(self):
        region = os.getenv("PARAMETER_STORE_REGION")
        ssm = boto3.client('ssm', region_name=region) if region else None

        self.DATABASE_URL = self.get_value(ssm, "DATABASE_URL", "sqlite:///./photobooth.db")
        self.SECRET_KEY = self.get_value(ssm, "SECRET_KEY")
        if not self.SECRET_KEY:
            logger.warning("SECRET_KEY not set. Using default (not secure for production).")
            self.SECRET_KEY = "photobooth-dev-secret"
        self.JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")

        self.WALRUS_AGGREGATOR_URL = os.getenv(
            "WALRUS_AGGREGATOR_URL", "https://aggregator.walrus-testnet.walrus.space")
        self.WALRUS_PUBLISHER_URL = os.getenv(
            "WALRUS_PUBLISHER_URL", "https://publisher.walrus-testnet.walrus.space")
        self.WALRUS_EPOCHS = int(os.getenv("WALRUS_EPOCHS", 5))
        self.EXPLORER_URL = os.getenv("EXPLORER_URL", "https://suiscan.xyz")
        self.SUI_NETWORK = os.getenv("SUI_NETWORK", "testnet")

        self.DISPLAY_TIMEZONE = os.getenv("DISPLAY_TIMEZONE", "UTC")
        self.UPLOAD_RATE_LIMIT = os.getenv("UPLOAD_RATE_LIMIT", "30/minute")
        self.UPLOAD_MAX_BYTES = int(os.getenv("UPLOAD_MAX_BYTES", 15 * 1024 * 1024))
        self.CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "info")
        self.AUTO_CREATE_TABLES = os.getenv("AUTO_CREATE_TABLES", "false").lower() == "true"

    def get_value(self, ssm, name, default=None):
        value = os.getenv(name)
        if value:
            return value
        if ssm is not None:
            try:
                return self.get_parameter(ssm, name)
            except ssm.exceptions.ParameterNotFound:
                logger.warning(f"Parameter {name} not found in Parameter Store, using default")
        return default

    def get_parameter(self, ssm, name):
        return ssm.get_parameter(Name=name, WithDecryption=True)['Parameter']['Value']

settings = Settings()
