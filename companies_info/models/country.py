"""Modèle Pays / Country model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from companies_info.database import Base


class Country(Base):
    __tablename__ = "countries"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    # Relations - suppression en cascade par la base / store-side cascade delete
    companies: Mapped[list["Company"]] = relationship(
        back_populates="country", cascade="all, delete", passive_deletes=True
    )
    contacts: Mapped[list["Contact"]] = relationship(
        back_populates="country", cascade="all, delete", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Country {self.id} - {self.name}>"
