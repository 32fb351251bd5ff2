"""
LLM providers behind the licence generation functions.

Each provider knows the credential it needs, how to build its request and
where the generated text sits in its response. A missing field in a response
yields "" rather than an error.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

SYSTEM_PROMPT = (
    "You are a legal assistant that drafts clear and concise licensing "
    "agreements based on user-provided details."
)


@dataclass(frozen=True)
class Provider:
    key: str
    credential_name: str
    build_request: Callable[[str, str], Tuple[str, Dict, Dict]]
    extract_text: Callable[[object], str]


def _first(items):
    if isinstance(items, list) and items:
        return items[0]
    return None


def _field(obj, name):
    if isinstance(obj, dict):
        return obj.get(name)
    return None


def _as_text(value):
    return value if isinstance(value, str) and value else ""


# ---------------- OPENAI ----------------

OPENAI_URL = "https://api.openai.com/v1/chat/completions"
OPENAI_MODEL = "gpt-4o"


def openai_request(prompt, api_key):
    payload = {
        "model": OPENAI_MODEL,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ],
        "max_tokens": 800,
        "temperature": 0.3,
    }
    headers = {
        "content-type": "application/json",
        "authorization": f"Bearer {api_key}",
    }
    return OPENAI_URL, headers, payload


def openai_text(data):
    # choices[0].message.content
    message = _field(_first(_field(data, "choices")), "message")
    return _as_text(_field(message, "content"))


# ---------------- ANTHROPIC ----------------

ANTHROPIC_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_MODEL = "claude-3-haiku-20240307"
ANTHROPIC_VERSION = "2023-06-01"


def anthropic_request(prompt, api_key):
    payload = {
        "model": ANTHROPIC_MODEL,
        "max_tokens": 800,
        "temperature": 0.2,
        "messages": [{"role": "user", "content": prompt}],
    }
    headers = {
        "content-type": "application/json",
        "x-api-key": api_key,
        "anthropic-version": ANTHROPIC_VERSION,
    }
    return ANTHROPIC_URL, headers, payload


def anthropic_text(data):
    # content[0].text
    return _as_text(_field(_first(_field(data, "content")), "text"))


# ---------------- GOOGLE ----------------

GOOGLE_URL = "https://generativelanguage.googleapis.com/v1beta/models/gemini-pro:generateContent"


def google_request(prompt, api_key):
    payload = {"contents": [{"parts": [{"text": prompt}]}]}
    headers = {"content-type": "application/json"}
    return f"{GOOGLE_URL}?key={api_key}", headers, payload


def google_text(data):
    # candidates[0].content.parts[*].text, joined
    parts = _field(_field(_first(_field(data, "candidates")), "content"), "parts")
    if not isinstance(parts, list):
        return ""
    return "".join(_as_text(_field(part, "text")) for part in parts)


OPENAI = Provider("chatgpt", "OPENAI_API_KEY", openai_request, openai_text)
ANTHROPIC = Provider("claude", "ANTHROPIC_API_KEY", anthropic_request, anthropic_text)
GOOGLE = Provider("gemini", "GOOGLE_API_KEY", google_request, google_text)

PROVIDERS = {p.key: p for p in (OPENAI, ANTHROPIC, GOOGLE)}
