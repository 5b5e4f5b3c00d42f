"""
Appointment repository for database operations.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from sqlalchemy import and_, extract, func, select
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_core.core.config import settings
from scheduling_core.core.exceptions import DatabaseException
from scheduling_core.db.repositories.base_repository import AuditedRepository
from scheduling_core.db.repositories.contact_cache import ContactCache
from scheduling_core.db.repositories.reference_caches import load_contact_cache
from scheduling_core.models.appointment import appointments
from scheduling_core.models.contact import contacts
from scheduling_core.schemas.appointment import Appointment
from scheduling_core.schemas.report import MonthTypeCount
from scheduling_core.schemas.user import User

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


class AppointmentRepository(AuditedRepository[Appointment]):
    """
    Repository for appointment operations.

    Besides CRUD it answers the overlap question for the scheduling form and
    the queries behind the appointment reports. ``save`` does not check for
    overlaps: callers must ask ``get_meeting_overlap_count`` first.
    """

    def __init__(
        self,
        session: AsyncSession,
        user: User,
        contact_cache: Optional[ContactCache] = None,
    ):
        super().__init__(
            session,
            user,
            "appointment",
            appointments,
            appointments.c.Appointment_ID,
            order_by=appointments.c.Start,
        )
        self.contact_cache = contact_cache

    async def _prepare(self) -> None:
        if self.contact_cache is None:
            self.contact_cache = await load_contact_cache(self.session)

    def _to_entity(self, row: Row) -> Appointment:
        appointment = Appointment.model_construct(
            id=row.Appointment_ID,
            title=row.Title,
            description=row.Description,
            location=row.Location,
            type=row.Type,
            start_time=row.Start,
            end_time=row.End,
            created_by=row.Created_By,
            last_update=row.Last_Update,
            last_updated_by=row.Last_Updated_By,
            customer_id=row.Customer_ID,
            user_id=row.User_ID,
            contact_id=row.Contact_ID,
        )
        appointment.apply_snapshot(self.contact_cache)
        return appointment

    def _to_values(self, appointment: Appointment) -> Dict[str, Any]:
        return {
            "Title": appointment.title,
            "Description": appointment.description,
            "Location": appointment.location,
            "Type": appointment.type,
            "Start": appointment.start_time,
            "End": appointment.end_time,
            "Created_By": appointment.created_by,
            "Customer_ID": appointment.customer_id,
            "User_ID": appointment.user_id,
            "Contact_ID": appointment.contact_id,
        }

    async def get_all_ordered_by_contact(self) -> List[Appointment]:
        """List all appointments ordered by contact name, then start time."""
        query = (
            select(appointments)
            .join(contacts, appointments.c.Contact_ID == contacts.c.Contact_ID)
            .order_by(contacts.c.Contact_Name, appointments.c.Start)
        )
        return await self._fetch_all(query, "Error getting appointments by contact")

    async def get_month_type_counts(self) -> List[MonthTypeCount]:
        """
        Count appointments by calendar month of their start and by type.

        Months from every year are combined. Rows are ordered by month number
        and then type.
        """
        month = extract("month", appointments.c.Start).label("Month")
        query = (
            select(month, appointments.c.Type, func.count().label("Count"))
            .group_by(month, appointments.c.Type)
            .order_by(month, appointments.c.Type)
        )
        result = await self._execute(query, "Error getting month type counts")
        return [
            MonthTypeCount(
                month=MONTH_NAMES[int(row.Month) - 1],
                type=row.Type,
                count=row.Count,
            )
            for row in result.all()
        ]

    async def get_meeting_overlap_count(
        self,
        customer_id: int,
        start: datetime,
        end: datetime,
        excluded_appointment_id: int = 0,
    ) -> int:
        """
        Count the customer's appointments intersecting [start, end).

        Intervals are half-open, so an appointment that ends exactly when the
        proposed one starts (or starts when it ends) doesn't count.

        Args:
            customer_id: Customer whose appointments are checked
            start: Proposed start time
            end: Proposed end time
            excluded_appointment_id: Appointment being modified, or 0 when
                checking a new appointment

        Returns:
            Number of conflicting appointments; non-zero means reject
        """
        query = select(func.count()).select_from(appointments).where(
            and_(
                appointments.c.Customer_ID == customer_id,
                appointments.c.Start < end,
                appointments.c.End > start,
                appointments.c.Appointment_ID != excluded_appointment_id,
            )
        )
        result = await self._execute(query, f"Error getting {self.item_name} overlap")
        count = result.scalar()
        if count is None:
            raise DatabaseException("Overlap count query didn't return a count")
        return count

    async def get_pending(
        self,
        now: Optional[datetime] = None,
        minutes: Optional[int] = None,
    ) -> List[Appointment]:
        """
        Appointments starting within the next few minutes.

        The comparison uses the caller's clock rather than the database's, so
        it happens here instead of in SQL.

        Args:
            now: Current local time; defaults to datetime.now()
            minutes: Look-ahead; defaults to PENDING_APPOINTMENT_MINUTES

        Returns:
            Appointments starting strictly after now and strictly before the
            end of the look-ahead, by start time
        """
        if now is None:
            now = datetime.now()
        if minutes is None:
            minutes = settings.PENDING_APPOINTMENT_MINUTES
        horizon = now + timedelta(minutes=minutes)
        return [
            appointment
            for appointment in await self.get_all()
            if now < appointment.start_time < horizon
        ]
