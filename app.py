import logging

from flask import Flask, render_template, request, current_app

import config
from models import db
from request_store import RequestStore, DatabaseStorage
from form_controller import FormController
from admin.dashboard import admin_bp
from functions.gateway import functions_bp


def create_app(test_config=None, storage=None):
    app = Flask(__name__)
    app.config.from_mapping(
        SECRET_KEY=config.SECRET_KEY,
        SQLALCHEMY_DATABASE_URI=config.DATABASE_URL,
        LICENSE_PROVIDER=config.LICENSE_PROVIDER,
        PORTAL_URL=config.PORTAL_URL,
    )
    if test_config:
        app.config.update(test_config)

    logging.basicConfig(level=config.LOG_LEVEL)

    # ---------------- DATABASE ----------------
    db.init_app(app)
    if storage is None:
        with app.app_context():
            db.create_all()
        storage = DatabaseStorage()
    app.extensions["request_store"] = RequestStore(storage)

    app.register_blueprint(admin_bp)
    app.register_blueprint(functions_bp)
    app.logger.info("Licence provider: %s", app.config["LICENSE_PROVIDER"])

    # ---------------- FORM ----------------

    @app.route("/", methods=["GET", "POST"])
    def home():
        if request.method == "GET":
            return render_template("index.html", form={}, durations=config.DURATION_OPTIONS)

        controller = FormController(
            current_app.extensions["request_store"],
            base_url=current_app.config["PORTAL_URL"],
            provider=current_app.config["LICENSE_PROVIDER"],
        )
        submission = controller.submit(request.form)
        if not submission.accepted:
            current_app.logger.info("Licence request refused: terms not accepted")
            # keep what the user typed
            return render_template(
                "index.html",
                form=request.form,
                notice=submission.notice,
                durations=config.DURATION_OPTIONS,
            )

        return render_template(
            "index.html",
            form={},
            license_text=submission.license_text,
            durations=config.DURATION_OPTIONS,
        )

    # ---------------- HEALTH ----------------

    @app.route("/debug")
    def debug():
        return "SERVER VERSION OK"

    return app


app = create_app()

# ---------------- RUN LOCAL ----------------

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000)
