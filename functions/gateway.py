import json
import logging
import os

import requests
from flask import Blueprint, request, jsonify

from functions.providers import PROVIDERS

logger = logging.getLogger(__name__)

functions_bp = Blueprint("functions", __name__, url_prefix="/functions")


class MissingCredentialError(Exception):
    pass


def read_prompt(raw_body):
    """Prompt from a request body; anything unusable means an empty prompt."""
    try:
        data = json.loads(raw_body or "{}")
    except ValueError:
        return ""
    if not isinstance(data, dict):
        return ""
    prompt = data.get("prompt", "")
    return prompt if isinstance(prompt, str) else ""


def get_credential(provider):
    api_key = os.environ.get(provider.credential_name)
    if not api_key:
        raise MissingCredentialError(f"Missing {provider.credential_name} environment variable.")
    return api_key


def handle(provider, raw_body):
    """Forward one prompt to ``provider`` and return ``(status, body)``."""
    prompt = read_prompt(raw_body)
    try:
        api_key = get_credential(provider)
    except MissingCredentialError as exc:
        logger.error("%s: %s", provider.key, exc)
        return 500, {"error": str(exc)}

    try:
        url, headers, payload = provider.build_request(prompt, api_key)
        response = requests.post(url, headers=headers, json=payload)
        data = response.json()
    except Exception as exc:
        logger.warning("%s call failed: %s", provider.key, type(exc).__name__)
        # request URLs can carry the key (gemini)
        message = (str(exc) or "Unknown error").replace(api_key, "***")
        return 500, {"error": message}

    return 200, {"result": provider.extract_text(data)}


# ---------------- ROUTES ----------------

def _make_view(provider):
    def view():
        status, body = handle(provider, request.get_data(as_text=True))
        return jsonify(body), status
    return view


for _key, _provider in PROVIDERS.items():
    functions_bp.add_url_rule(
        f"/generate_license_{_key}",
        endpoint=f"generate_license_{_key}",
        view_func=_make_view(_provider),
        methods=["POST"],
    )
