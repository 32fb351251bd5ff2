import logging

from flask import Blueprint, render_template, redirect, url_for, abort, current_app

from models import LicenseRequest, PENDING, APPROVED, REJECTED

logger = logging.getLogger(__name__)

admin_bp = Blueprint('admin', __name__, url_prefix='/admin')


class AdminTableController:
    """Licence requests as an editable table, re-read from the store each time."""

    def __init__(self, store):
        self.store = store

    def rows(self):
        return [
            dict(LicenseRequest.from_dict(record).to_dict(), index=index)
            for index, record in enumerate(self.store.load())
        ]

    def approve(self, index):
        return self.set_status(index, APPROVED)

    def reject(self, index):
        return self.set_status(index, REJECTED)

    def set_status(self, index, status):
        """Decide a pending request. Returns False if it was already decided.

        Raises IndexError for an unknown row.
        """
        requests = self.store.load()
        if index < 0 or index >= len(requests):
            raise IndexError(index)

        record = requests[index]
        if not isinstance(record, dict):
            return False
        current = record.get("status") or PENDING
        if current != PENDING:
            logger.info("Request #%d is already %s, ignoring %s", index, current, status)
            return False

        record["status"] = status
        self.store.save(requests)
        logger.info("Request #%d %s", index, status)
        return True


def _controller():
    return AdminTableController(current_app.extensions["request_store"])


# ---------------- DASHBOARD ----------------
@admin_bp.route('/dashboard', methods=['GET'])
def dashboard():
    return render_template("admin_dashboard.html", requests=_controller().rows())


# ---------------- APPROVE ----------------
@admin_bp.route('/approve/<int:index>', methods=['POST'])
def approve(index):
    try:
        _controller().approve(index)
    except IndexError:
        abort(404)
    return redirect(url_for('admin.dashboard'))


# ---------------- REJECT ----------------
@admin_bp.route('/reject/<int:index>', methods=['POST'])
def reject(index):
    try:
        _controller().reject(index)
    except IndexError:
        abort(404)
    return redirect(url_for('admin.dashboard'))
