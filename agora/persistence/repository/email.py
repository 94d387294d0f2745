"""PostgreSQL implementation of the email queue."""

from typing import List, Sequence

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Email
from agora.domain.repository import EmailRepository
from agora.persistence.mappers import row_to_email
from agora.persistence.tables import emails_table


class PostgresEmailRepository(EmailRepository):
    """PostgreSQL implementation of EmailRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def enqueue(self, emails: Sequence[Email]) -> None:
        """Queue emails for delivery (single multi-row insert)."""
        if not emails:
            return

        await self.session.execute(
            insert(emails_table), [email.model_dump() for email in emails]
        )
        await self.session.flush()

    async def find_queued(self) -> List[Email]:
        stmt = select(emails_table).order_by(emails_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_email(row._asdict()) for row in result.fetchall()]
