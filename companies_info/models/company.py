"""Modèle Société / Company model."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from companies_info.config import settings
from companies_info.database import Base


class Company(Base):
    __tablename__ = "companies"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    # Pays optionnel sauf COMPANY_COUNTRY_REQUIRED / Optional unless COMPANY_COUNTRY_REQUIRED
    country_id: Mapped[int | None] = mapped_column(
        ForeignKey("countries.id", ondelete="CASCADE"),
        nullable=not settings.COMPANY_COUNTRY_REQUIRED,
        index=True,
    )

    # Relations
    country: Mapped["Country | None"] = relationship(back_populates="companies")
    contacts: Mapped[list["Contact"]] = relationship(
        back_populates="company", cascade="all, delete", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Company {self.id} - {self.name}>"
