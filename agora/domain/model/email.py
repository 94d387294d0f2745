"""Queued outbound email.

Emails are only queued here; delivery happens outside this service.
"""

from datetime import datetime

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import EmailId


class Email(DomainModel):
    id: EmailId
    email_to: str
    name_to: str
    email_from: str
    subject: str
    body: str
    created_at: datetime = Field(default_factory=datetime.now)
