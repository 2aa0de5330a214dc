import json
import logging

import azure.functions as func

from cosmos_db import get_cosmos_client
from queries import UsersQueryParameter
from users import get_users


def main(req: func.HttpRequest) -> func.HttpResponse:
    logging.info("GET Users")

    try:
        # Search conditions come from the query string
        query_parameter = UsersQueryParameter.from_params(req.params)

        users = get_users(get_cosmos_client(), query_parameter)

        return func.HttpResponse(
            json.dumps([user.to_document() for user in users]),
            mimetype="application/json",
        )

    except Exception as e:
        logging.error(f"Error getting users: {str(e)}")
        return func.HttpResponse(
            json.dumps({"error": str(e)}),
            mimetype="application/json",
            status_code=400,
        )
