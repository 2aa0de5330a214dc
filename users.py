import logging

import azure.cosmos.exceptions as exceptions
from pydantic import ValidationError

from models import User, UserNotFoundError
from queries import UsersQueryParameter

logger = logging.getLogger(__name__)


def add_user(client, user_input):
    """Create a user from validated input and store it as a new document"""
    user = user_input.to_user()
    client.add_document(user.to_document())
    logger.info(f"Added user {user.id}")
    return user


def get_users(client, query_parameter):
    """Return every user matching all of the supplied filters"""
    query, parameters = query_parameter.build_query()
    documents = client.query_documents(query, parameters)

    users = []
    for document in documents:
        try:
            users.append(User.from_document(document))
        except ValidationError as e:
            logger.warning(
                f"Skipping malformed user document {document.get('id')}: {str(e)}"
            )
    return users


def delete_user(client, user_id):
    """Delete a user by id and return the deleted records"""
    users = get_users(client, UsersQueryParameter(ids=[user_id]))
    if not users:
        raise UserNotFoundError(user_id)

    for user in users:
        try:
            client.delete_document(user.id, partition_key=user.id)
        except exceptions.CosmosResourceNotFoundError as e:
            # Removed by another request after the lookup
            raise UserNotFoundError(user.id) from e
        logger.info(f"Deleted user {user.id}")

    return users
