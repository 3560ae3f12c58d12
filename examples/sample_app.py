"""
Sample Lambda API application.

Demonstrates:
- Path parameters
- Typed request/response bodies with pydantic schemas
- Cookies
- Raising LambdaAPIError subclasses for error responses

Run locally:
    python scripts/run_local.py examples.sample_app:handler
"""

from pydantic import BaseModel, Field

from lambda_api import (
    NotFoundError,
    Request,
    Response,
    create_lambda_handler,
    define_handler,
)


class ItemIn(BaseModel):
    """Item creation payload."""

    name: str = Field(..., min_length=1, max_length=100)
    quantity: int = Field(default=1, ge=0)


class ItemOut(BaseModel):
    """Item as returned by the API."""

    item_id: str
    name: str
    quantity: int


# In-memory store, per Lambda container
_items: dict[str, ItemOut] = {}


async def list_items(request: Request) -> Response:
    return Response(body={"items": [item.model_dump() for item in _items.values()]})


async def create_item(request: Request) -> Response:
    item_in: ItemIn = request.body
    item = ItemOut(item_id=str(len(_items) + 1), **item_in.model_dump())
    _items[item.item_id] = item
    return Response(status_code=201, body=item)


async def get_item(request: Request) -> Response:
    item_id = request.path_parameters["item_id"]
    if item_id not in _items:
        raise NotFoundError(f"Item {item_id} not found", details={"item_id": item_id})
    return Response(body=_items[item_id])


async def login(request: Request) -> Response:
    return Response(status_code=204, cookies={"session": "example-session"})


async def logout(request: Request) -> Response:
    return Response(status_code=204, cookies={"session": ""})


routes = {
    "/items": {
        "GET": list_items,
        "POST": define_handler(create_item, request_schema=ItemIn, response_schema=ItemOut),
    },
    "/items/{item_id}": {"GET": define_handler(get_item, response_schema=ItemOut)},
    "/session": {"POST": login, "DELETE": logout},
}

handler = create_lambda_handler(routes)
