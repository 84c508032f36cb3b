"""Modèle Contact / Contact model."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from companies_info.database import Base


class Contact(Base):
    __tablename__ = "contacts"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    company_id: Mapped[int] = mapped_column(
        ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True
    )
    country_id: Mapped[int] = mapped_column(
        ForeignKey("countries.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relations
    company: Mapped["Company"] = relationship(back_populates="contacts")
    country: Mapped["Country"] = relationship(back_populates="contacts")

    def __repr__(self) -> str:
        return f"<Contact {self.id} - {self.name}>"
