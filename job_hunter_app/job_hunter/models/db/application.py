import enum
from datetime import date
from typing import Optional

from sqlalchemy import Column, Date, Enum, Float, Integer, String
from .database import Base

GHOSTED_AFTER_DAYS = 14
NOTES_MAX_LENGTH = 500


class ApplicationStatus(str, enum.Enum):
    """Lifecycle states of a job application, stored by name."""

    APLICAT = "APLICAT"
    INTERVIU = "INTERVIU"
    OFERTA = "OFERTA"
    RESPINS = "RESPINS"
    RETRAS = "RETRAS"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


STATUS_LABELS = {
    ApplicationStatus.APLICAT: "Aplicat",
    ApplicationStatus.INTERVIU: "Interviu",
    ApplicationStatus.OFERTA: "Oferta",
    ApplicationStatus.RESPINS: "Respins",
    ApplicationStatus.RETRAS: "Retras",
}


class JobApplication(Base):
    __tablename__ = "jobs_table"

    id = Column(Integer, primary_key=True, index=True)
    job_title = Column(String, nullable=False)
    company_name = Column(String, nullable=False, index=True)
    application_date = Column(Date)
    status = Column(Enum(ApplicationStatus, native_enum=False, length=20), nullable=False)
    salary_offer = Column(Float, nullable=True)
    notes = Column(String(NOTES_MAX_LENGTH), nullable=True)
    job_link = Column(String, nullable=True)
    position = Column(Integer, nullable=True)

    def is_ghosted(self, today: Optional[date] = None) -> bool:
        """An application still marked APLICAT with no answer for more than two weeks."""
        if self.application_date is None or self.status != ApplicationStatus.APLICAT:
            return False
        today = today or date.today()
        return (today - self.application_date).days > GHOSTED_AFTER_DAYS

    @property
    def ghosted(self) -> bool:
        return self.is_ghosted()

    def __repr__(self):
        return f"<JobApplication id={self.id} company={self.company_name!r} status={self.status}>"
