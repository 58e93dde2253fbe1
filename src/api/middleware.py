import logging

from starlette.datastructures import Headers, QueryParams
from starlette.formparsers import FormParser

# Get logger
logger = logging.getLogger(__name__)

OVERRIDE_FIELD = "_method"
ALLOWED_METHODS = {"PUT", "PATCH", "DELETE"}
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class MethodOverrideMiddleware:
    """
    Let HTML forms issue PUT, PATCH and DELETE requests.

    A POST carrying `_method` in its query string or url-encoded form body is
    dispatched with that method instead. The body is buffered and replayed so
    the route can still read the form.
    """

    def __init__(self, app, field=OVERRIDE_FIELD):
        self.app = app
        self.field = field

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http" or scope["method"] != "POST":
            await self.app(scope, receive, send)
            return

        headers = Headers(scope=scope)
        method = QueryParams(scope.get("query_string", b"")).get(self.field)
        if method is None and self._is_form(headers):
            body = await self._read_body(receive)
            form = await FormParser(headers, self._stream(body)).parse()
            method = form.get(self.field)
            receive = self._replay(body, receive)

        if method and method.upper() in ALLOWED_METHODS:
            logger.debug(f"Method override: POST -> {method.upper()} {scope['path']}")
            scope = dict(scope, method=method.upper())

        await self.app(scope, receive, send)

    @staticmethod
    def _is_form(headers):
        content_type = headers.get("content-type", "")
        return content_type.split(";")[0].strip().lower() == FORM_CONTENT_TYPE

    @staticmethod
    async def _stream(body):
        if body:
            yield body
        # An empty chunk tells the parser the body is complete
        yield b""

    @staticmethod
    async def _read_body(receive):
        chunks = []
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] != "http.request":
                break
            chunks.append(message.get("body", b""))
            more_body = message.get("more_body", False)
        return b"".join(chunks)

    @staticmethod
    def _replay(body, receive):
        sent = False

        async def replay_receive():
            nonlocal sent
            if not sent:
                sent = True
                return {"type": "http.request", "body": body, "more_body": False}
            return await receive()

        return replay_receive
