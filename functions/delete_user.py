import json
import logging

import azure.functions as func

from cosmos_db import get_cosmos_client
from models import UserNotFoundError
from users import delete_user


def main(req: func.HttpRequest) -> func.HttpResponse:
    logging.info("DELETE Users")

    try:
        user_id = req.route_params.get("id")
        if not user_id:
            raise ValueError("id is null or empty")

        users = delete_user(get_cosmos_client(), user_id)

        return func.HttpResponse(
            json.dumps([user.to_document() for user in users]),
            mimetype="application/json",
        )

    except UserNotFoundError as e:
        logging.warning(str(e))
        return func.HttpResponse(
            json.dumps({"error": str(e)}),
            mimetype="application/json",
            status_code=404,
        )
    except Exception as e:
        logging.error(f"Error deleting user: {str(e)}")
        return func.HttpResponse(
            json.dumps({"error": str(e)}),
            mimetype="application/json",
            status_code=400,
        )
