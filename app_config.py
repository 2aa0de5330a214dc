# app_config.py
import logging
import os

from dotenv import load_dotenv

from keyvault import KeyVaultClient

load_dotenv()

logger = logging.getLogger(__name__)

# Cosmos DB defaults
DEFAULT_DATABASE = "notify-slack-of-web-meeting-db"
DEFAULT_CONTAINER = "Users"
DEFAULT_PAGE_SIZE = 100
DEFAULT_LOG_LEVEL = "INFO"


class Settings:
    """Runtime settings, looked up in Key Vault first and then the environment"""

    def __init__(self, key_vault_client=None):
        self.key_vault_client = key_vault_client

        self.cosmos_connection_string = self.get_config("COSMOS_CONNECTION_STRING")
        self.cosmos_endpoint = self.get_config("COSMOS_ENDPOINT")
        self.cosmos_key = self.get_config("COSMOS_KEY")
        self.cosmos_database = self.get_config("COSMOS_DATABASE", DEFAULT_DATABASE)
        self.cosmos_container = self.get_config("COSMOS_CONTAINER", DEFAULT_CONTAINER)
        self.cosmos_page_size = int(
            self.get_config("COSMOS_PAGE_SIZE", str(DEFAULT_PAGE_SIZE))
        )

    def get_config(self, key, default=None):
        value = None
        if self.key_vault_client:
            value = self.key_vault_client.get_secret(key)

        if not value:
            value = os.environ.get(key, default)

        return value

    @property
    def has_cosmos_credentials(self):
        return bool(
            self.cosmos_connection_string or (self.cosmos_endpoint and self.cosmos_key)
        )


def load_settings():
    """Build settings, wiring in Key Vault when KEY_VAULT_URL is set"""
    key_vault_client = None
    key_vault_url = os.environ.get("KEY_VAULT_URL")
    if key_vault_url:
        try:
            key_vault_client = KeyVaultClient(key_vault_url)
        except Exception as e:
            logger.error(f"Failed to initialize Key Vault client: {str(e)}")

    return Settings(key_vault_client=key_vault_client)


def configure_logging(level=None):
    """Set the root logger level; the Functions host owns the handlers"""
    level = level or os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))
