import json
import logging

import azure.functions as func

from cosmos_db import get_cosmos_client
from models import UserInput
from users import add_user


def main(req: func.HttpRequest) -> func.HttpResponse:
    logging.info("POST Users")

    try:
        # Get request data
        user_input = UserInput.parse(req.get_json())

        user = add_user(get_cosmos_client(), user_input)

        return func.HttpResponse(
            json.dumps(user.to_document()), mimetype="application/json"
        )

    except Exception as e:
        logging.error(f"Error adding user: {str(e)}")
        return func.HttpResponse(
            json.dumps({"error": str(e)}),
            mimetype="application/json",
            status_code=400,
        )
