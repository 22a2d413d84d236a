from flask import Flask

GREETING = "Hello from K3s! Deployed via Argo CD GitOps.\n"


def create_app():
    app = Flask(__name__)

    @app.get("/")
    def hello():
        return GREETING, 200, {"Content-Type": "text/plain; charset=utf-8"}

    return app


app = create_app()
