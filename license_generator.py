"""
Licence agreement text, either drafted by an LLM through one of the
generation functions or filled into the static template.
"""
import logging

import requests

logger = logging.getLogger(__name__)

# Provider key -> generation function path on the portal
ENDPOINTS = {
    "claude": "/functions/generate_license_claude",
    "gemini": "/functions/generate_license_gemini",
    "chatgpt": "/functions/generate_license_chatgpt",
}

INVENTION_SUMMARY = (
    "The licensed invention is a blockchain‑based dynamic consent management system for synthetic media. "
    "It uses smart contracts, hierarchical consent structures, zero‑knowledge proofs and decentralized oracles "
    "to ensure secure and flexible governance of synthetic media lifecycle.\n\n"
)

GRANT_OF_RIGHTS = (
    "Grant of Rights: The licensor hereby grants the licensee a non‑exclusive, non‑transferable license to use the "
    "invention described above for the stated intended use during the specified duration. All other rights are reserved.\n\n"
)


def _fields(data):
    if isinstance(data, dict):
        return data.get("name", ""), data.get("email", ""), data.get("use", ""), data.get("duration", "")
    return data.name, data.email, data.use, data.duration


def build_prompt(data):
    name, email, use, duration = _fields(data)
    return (
        "Draft a formal licensing agreement based on the following details:\n"
        f"Name: {name}\n"
        f"Email: {email}\n"
        f"Intended use: {use}\n"
        f"Duration: {duration}\n"
        "The licensed invention is a blockchain‑based dynamic consent management system for synthetic media "
        "that uses smart contracts, hierarchical consent structures, zero‑knowledge proofs and decentralized oracles.\n"
        "The agreement should summarise the invention, specify the grant of rights, and be clear and concise."
    )


def generate_license_text_static(data):
    name, email, use, duration = _fields(data)
    return (
        "LICENSE AGREEMENT\n"
        f"Issued to: {name} <{email}>\n"
        f"Duration: {duration}\n"
        f"Intended use: {use}\n\n"
        f"Summary of the invention:\n{INVENTION_SUMMARY}"
        f"{GRANT_OF_RIGHTS}"
        "By accepting this license you agree to abide by any additional terms and conditions set forth by the licensor."
    )


def generate_license_ai(data, provider, base_url):
    """
    Ask the generation function for ``provider`` to draft the agreement.

    Returns the drafted text, or None when the provider is unknown, the call
    fails, or the function reports an error or an empty result.
    """
    path = ENDPOINTS.get(provider)
    if not path:
        logger.info("Unknown licence provider %r, skipping generation", provider)
        return None

    try:
        response = requests.post(base_url.rstrip("/") + path, json={"prompt": build_prompt(data)})
        body = response.json()
    except (requests.RequestException, ValueError) as exc:
        logger.warning("Licence generation via %s failed: %s", provider, exc)
        return None

    if not isinstance(body, dict):
        return None
    return body.get("result") or None
