"""
aiohttp application exposing the helper operations over HTTP.

Endpoints (all POST, JSON body):
  /keypair         - generate a keypair
  /token/create    - InitializeMint instruction
  /token/mint      - MintTo instruction
  /message/sign    - sign a message with a secret key
  /message/verify  - verify a detached signature
  /send/sol        - System transfer instruction
  /send/token      - token Transfer instruction between derived ATAs
"""

from aiohttp import web

from api.dispatcher import dispatch, failure_from_error
from api.requests import REQUEST_FIELDS, decode_request, parse_body
from core.errors import HelperError
from interfaces.core import Failure, Operation, Reply
from utils.logger import get_logger

logger = get_logger(__name__)

ROUTES: dict[str, Operation] = {
    "/keypair": Operation.KEYPAIR,
    "/token/create": Operation.CREATE_TOKEN,
    "/token/mint": Operation.MINT_TOKEN,
    "/message/sign": Operation.SIGN_MESSAGE,
    "/message/verify": Operation.VERIFY_MESSAGE,
    "/send/sol": Operation.SEND_SOL,
    "/send/token": Operation.SEND_TOKEN,
}


def reply_response(reply: Reply) -> web.Response:
    return web.json_response(reply.to_dict(), status=reply.status)


def make_handler(operation: Operation):
    """Create the request handler for one operation."""

    async def handler(request: web.Request) -> web.Response:
        try:
            # Operations without fields ignore the body
            body = parse_body(await request.read()) if REQUEST_FIELDS[operation] else {}
            operation_request = decode_request(operation, body)
        except HelperError as e:
            return reply_response(failure_from_error(operation.value, e))
        return reply_response(dispatch(operation_request))

    handler.__name__ = f"handle_{operation.value}"
    return handler


async def root(request: web.Request) -> web.Response:
    return web.Response(text="Hello, World!")


@web.middleware
async def error_middleware(request: web.Request, handler) -> web.StreamResponse:
    """Render routing errors and unexpected failures as JSON error envelopes."""
    try:
        return await handler(request)
    except web.HTTPMethodNotAllowed:
        return reply_response(Failure("Method not allowed", status=405))
    except web.HTTPNotFound:
        return reply_response(Failure("Not found", status=404))
    except web.HTTPException as e:
        return reply_response(Failure(e.reason, status=e.status))
    except Exception:
        logger.exception(f"Unhandled error for {request.method} {request.path}")
        return reply_response(Failure("Internal server error", status=500))


def create_app() -> web.Application:
    """Build the application with all routes and middleware."""
    app = web.Application(middlewares=[error_middleware])
    app.router.add_get("/", root)
    for path, operation in ROUTES.items():
        app.router.add_post(path, make_handler(operation))
    return app
