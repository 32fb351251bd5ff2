from dataclasses import dataclass, asdict
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

PENDING = "pending"
APPROVED = "approved"
REJECTED = "rejected"
STATUSES = (PENDING, APPROVED, REJECTED)


class StorageEntry(db.Model):
    __tablename__ = "storage_entries"

    key = db.Column(db.String(120), primary_key=True)
    value = db.Column(db.Text, nullable=False)


@dataclass
class LicenseRequest:
    name: str = ""
    email: str = ""
    use: str = ""
    duration: str = ""
    accepted: bool = False
    status: str = PENDING

    @classmethod
    def from_form(cls, form):
        """Build a request from submitted form fields (name/email/use trimmed)."""
        return cls(
            name=(form.get("name") or "").strip(),
            email=(form.get("email") or "").strip(),
            use=(form.get("use") or "").strip(),
            duration=form.get("duration") or "",
            accepted=form.get("accept") == "on",
        )

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            data = {}
        # older records may lack a status
        return cls(
            name=data.get("name") or "",
            email=data.get("email") or "",
            use=data.get("use") or "",
            duration=data.get("duration") or "",
            accepted=bool(data.get("accepted")),
            status=data.get("status") or PENDING,
        )

    def to_dict(self):
        return asdict(self)
