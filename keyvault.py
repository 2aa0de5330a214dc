import logging
import os

from azure.core.exceptions import ResourceNotFoundError
from azure.identity import DefaultAzureCredential
from azure.keyvault.secrets import SecretClient

logger = logging.getLogger(__name__)


def secret_name_for(key):
    """Key Vault secret names only allow alphanumerics and dashes"""
    return key.replace("_", "-")


class KeyVaultClient:
    def __init__(self, key_vault_url=None, secret_client=None):
        self.key_vault_url = key_vault_url or os.environ.get("KEY_VAULT_URL")
        if not self.key_vault_url:
            raise ValueError("KEY_VAULT_URL environment variable is required")

        if secret_client is None:
            self.credential = DefaultAzureCredential()
            secret_client = SecretClient(
                vault_url=self.key_vault_url, credential=self.credential
            )
        self.client = secret_client
        self.cache = {}

    def get_secret(self, key, default=None):
        """Get a secret from Key Vault with caching"""
        secret_name = secret_name_for(key)
        if secret_name in self.cache:
            return self.cache[secret_name]

        try:
            secret = self.client.get_secret(secret_name)
        except ResourceNotFoundError:
            # Missing secrets are normal, the caller falls back to the environment
            logger.debug(f"Secret {secret_name} not found in Key Vault")
            return default
        except Exception as e:
            logger.error(f"Error retrieving secret {secret_name}: {str(e)}")
            return default

        self.cache[secret_name] = secret.value
        return secret.value
