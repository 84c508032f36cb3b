"""
Contexte de persistance / Persistence context.

Un DataContext par requete, construit sur une AsyncSession. Il expose un
EntitySet par entite (companies, countries, contacts) : composition de
requetes, ajout, remplacement par identifiant et suppression. Les
modifications sont mises en attente et appliquees par save(), qui retourne
le nombre de lignes affectees.

One DataContext per request, built on an AsyncSession. Changes are staged
and applied by save(), which returns the number of affected rows; a zero
count after an update or delete means "no such row".
"""

import logging
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from companies_info.database import Base
from companies_info.models import Company, Contact, Country

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# Bornes d'un entier SQL 64 bits / Signed 64-bit SQL integer bounds
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def in_id_range(value: int) -> bool:
    """Identifiant stockable / Whether the store can hold this id; otherwise no row can match."""
    return MIN_ID <= value <= MAX_ID


class PersistenceError(Exception):
    """Echec cote stockage / Store-level failure (connectivity, constraint, malformed query)."""


class EntitySet(Generic[ModelT]):
    """Collection d'une entite / Mutable collection handle for one entity type."""

    def __init__(self, context: "DataContext", model: type[ModelT]):
        self._context = context
        self.model = model

    def query(self) -> Select:
        """Requete de base composable / Composable base query (always reloads rows)."""
        return select(self.model).execution_options(populate_existing=True)

    async def find(self, entity_id: int) -> ModelT | None:
        """Charger par identifiant / Load by primary key, None if absent."""
        if not in_id_range(entity_id):
            return None
        try:
            return await self._context.session.get(self.model, entity_id, populate_existing=True)
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Unable to load {self.model.__name__} {entity_id}") from exc

    def add(self, entity: ModelT) -> None:
        self._context._stage("add", entity)

    def update(self, entity_id: int, values: dict[str, Any]) -> None:
        """Remplacer les colonnes d'une ligne / Replace a row's columns by identity."""
        if not in_id_range(entity_id):
            return
        statement = update(self.model).where(self.model.id == entity_id).values(**values)
        self._context._stage("update", statement)

    def remove(self, entity: ModelT) -> None:
        self._context._stage("remove", entity)


class DataContext:
    """Unite de travail d'une requete / Per-request unit of work."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self._pending: list[tuple[str, Any]] = []

        self.companies: EntitySet[Company] = EntitySet(self, Company)
        self.countries: EntitySet[Country] = EntitySet(self, Country)
        self.contacts: EntitySet[Contact] = EntitySet(self, Contact)

    def _stage(self, action: str, target: Any) -> None:
        self._pending.append((action, target))

    @property
    def has_changes(self) -> bool:
        return bool(self._pending)

    async def execute(self, statement):
        """Executer une lecture / Run a read statement."""
        try:
            return await self.session.execute(statement)
        except (SQLAlchemyError, OverflowError) as exc:
            raise PersistenceError("Query failed") from exc

    async def save(self) -> int:
        """Appliquer les modifications en attente / Apply staged changes.

        Retourne le nombre de lignes inserees, modifiees ou supprimees.
        Les lignes supprimees en cascade par la base ne sont pas comptees.
        Returns inserted + matched-by-update + removed rows; rows removed by
        the store's ON DELETE CASCADE are not counted.
        """
        pending, self._pending = self._pending, []
        affected = 0
        try:
            for action, target in pending:
                if action == "add":
                    self.session.add(target)
                    await self.session.flush()
                    affected += 1
                elif action == "update":
                    result = await self.session.execute(target)
                    affected += result.rowcount
                else:
                    await self.session.delete(target)
                    await self.session.flush()
                    affected += 1
            await self.session.commit()
        except (SQLAlchemyError, OverflowError) as exc:
            await self.session.rollback()
            logger.warning("Save failed after staging %d change(s): %s", len(pending), exc.__class__.__name__)
            raise PersistenceError("Unable to save changes") from exc
        return affected
