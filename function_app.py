import azure.functions as func

from app_config import configure_logging
from functions import add_users, delete_user, get_users

configure_logging()

app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)


@app.function_name(name="AddUsers")
@app.route(route="Users", methods=[func.HttpMethod.POST])
def add_users_http(req: func.HttpRequest) -> func.HttpResponse:
    return add_users.main(req)


@app.function_name(name="GetUsers")
@app.route(route="Users", methods=[func.HttpMethod.GET])
def get_users_http(req: func.HttpRequest) -> func.HttpResponse:
    return get_users.main(req)


@app.function_name(name="DeleteUser")
@app.route(route="Users/{id}", methods=[func.HttpMethod.DELETE])
def delete_user_http(req: func.HttpRequest) -> func.HttpResponse:
    return delete_user.main(req)
