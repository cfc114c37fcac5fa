"""Decorated: the same API declared with route decorators at module level.

The routes live beside their handlers instead of in a factory, the way
a controller class would carry routing annotations. Both styles feed the
same route table, so the behavior matches ``greeter.service``.

Run:
    cd examples/decorated && python app.py
"""

from datetime import UTC, datetime

from greeter import App, AppConfig, Request

app = App(AppConfig(service_name="decorated-api"))


@app.route("/hello", name="hello")
def hello(request: Request):
    name = request.query.get("name") or "World"
    return {
        "message": f"Hello, {name}!",
        "timestamp": datetime.now(UTC).isoformat(timespec="seconds"),
        "method": request.method,
        "path": request.path,
    }


@app.route("/api/status", name="status")
def status(config: AppConfig):
    return {"status": "healthy", "service": config.service_name, "version": config.version}


if __name__ == "__main__":
    app.run()
