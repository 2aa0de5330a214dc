import logging

import azure.cosmos.cosmos_client as cosmos_client
import azure.cosmos.exceptions as exceptions
from azure.cosmos.partition_key import PartitionKey

from app_config import load_settings

logger = logging.getLogger(__name__)


class StoreNotConfiguredError(RuntimeError):
    """Raised when a store operation runs without a usable Cosmos DB container"""


class CosmosDBClient:
    def __init__(self, settings, container=None):
        self.settings = settings
        self.page_size = settings.cosmos_page_size
        self.container = container
        self.initialized = container is not None

        if self.initialized:
            return

        # Initialize client if credentials are available
        if settings.has_cosmos_credentials:
            try:
                self.client = self.create_client()
                self.init_database()
                self.initialized = True
                logger.info("Cosmos DB client initialized successfully")
            except Exception as e:
                logger.error(f"Failed to initialize Cosmos DB client: {str(e)}")
        else:
            logger.warning("Cosmos DB credentials not provided - storage disabled")

    def create_client(self):
        if self.settings.cosmos_connection_string:
            return cosmos_client.CosmosClient.from_connection_string(
                self.settings.cosmos_connection_string
            )
        return cosmos_client.CosmosClient(
            self.settings.cosmos_endpoint, credential=self.settings.cosmos_key
        )

    def init_database(self):
        """Initialize database and container"""
        self.database = self.client.create_database_if_not_exists(
            id=self.settings.cosmos_database
        )

        # Users are partitioned on their own id
        self.container = self.database.create_container_if_not_exists(
            id=self.settings.cosmos_container,
            partition_key=PartitionKey(path="/id"),
            offer_throughput=400,  # Minimum throughput
        )

    def _require_container(self):
        if not self.initialized:
            raise StoreNotConfiguredError("Cosmos DB is not configured")
        return self.container

    def add_document(self, document):
        """Insert a new document"""
        container = self._require_container()
        try:
            return container.create_item(body=document)
        except exceptions.CosmosHttpResponseError as e:
            logger.error(f"Error saving document to Cosmos: {str(e)}")
            raise

    def query_documents(self, query, parameters=None):
        """Run a cross-partition query and collect every page of results"""
        container = self._require_container()
        try:
            items = container.query_items(
                query=query,
                parameters=parameters or [],
                enable_cross_partition_query=True,
                max_item_count=self.page_size,
            )

            documents = []
            for page in items.by_page():
                documents.extend(page)
            return documents
        except exceptions.CosmosHttpResponseError as e:
            logger.error(f"Error querying documents from Cosmos: {str(e)}")
            raise

    def delete_document(self, document_id, partition_key):
        container = self._require_container()
        try:
            container.delete_item(item=document_id, partition_key=partition_key)
        except exceptions.CosmosHttpResponseError as e:
            logger.error(f"Error deleting document {document_id} from Cosmos: {str(e)}")
            raise


_cosmos_client = None


def get_cosmos_client():
    """Shared client, created on first use and reused across invocations"""
    global _cosmos_client

    # Retry initialization on later invocations if the last attempt failed
    if _cosmos_client is None or not _cosmos_client.initialized:
        _cosmos_client = CosmosDBClient(load_settings())

    return _cosmos_client


def reset_cosmos_client():
    global _cosmos_client
    _cosmos_client = None
