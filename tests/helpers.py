"""Small fake ASGI pieces for middleware unit tests."""


def http_scope(path="/", method="GET"):
    return {"type": "http", "method": method, "path": path, "headers": []}


async def empty_receive():
    return {"type": "http.request", "body": b"", "more_body": False}


class Recorder:
    """ASGI ``send`` that keeps every message."""

    def __init__(self):
        self.messages = []

    async def __call__(self, message):
        self.messages.append(message)

    @property
    def status(self):
        for m in self.messages:
            if m["type"] == "http.response.start":
                return m["status"]
        return None

    @property
    def body(self):
        return b"".join(m.get("body", b"") for m in self.messages if m["type"] == "http.response.body")

    @property
    def headers(self):
        for m in self.messages:
            if m["type"] == "http.response.start":
                return {k.decode().lower(): v.decode() for k, v in m.get("headers", [])}
        return {}


def html_app(body=b"<p>ok</p>", status=200):
    async def app(scope, receive, send):
        await send({
            "type": "http.response.start",
            "status": status,
            "headers": [(b"content-type", b"text/html")],
        })
        await send({"type": "http.response.body", "body": body})
    return app
