import logging
from dataclasses import dataclass
from typing import Optional

from license_generator import generate_license_ai, generate_license_text_static
from models import LicenseRequest, PENDING

logger = logging.getLogger(__name__)

IDLE = "idle"
SUBMITTING = "submitting"

ACCEPT_NOTICE = "You must accept the license terms to proceed."


@dataclass
class Submission:
    request: LicenseRequest
    notice: Optional[str] = None
    license_text: Optional[str] = None

    @property
    def accepted(self):
        return self.notice is None


class FormController:
    """Drives one licence form: store the request, generate, fall back."""

    def __init__(self, store, base_url, provider="claude"):
        self.store = store
        self.base_url = base_url
        self.provider = provider
        self.state = IDLE

    def submit(self, form):
        licence_request = LicenseRequest.from_form(form)
        if not licence_request.accepted:
            return Submission(licence_request, notice=ACCEPT_NOTICE)

        self.state = SUBMITTING
        try:
            licence_request.status = PENDING
            requests = self.store.load()
            requests.append(licence_request.to_dict())
            self.store.save(requests)
            logger.info("Stored licence request #%d", len(requests))

            text = generate_license_ai(licence_request, self.provider, self.base_url)
            if not text:
                logger.info("Falling back to the static licence template")
                text = generate_license_text_static(licence_request)
            return Submission(licence_request, license_text=text)
        finally:
            self.state = IDLE
