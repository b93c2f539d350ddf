"""ContributionRepository - SQLAlchemy implementation of ContributionRepository protocol."""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from giftcircle.domain.entities.contribution import Contribution
from giftcircle.infrastructure.persistence.models.contribution import (
    ContributionModel,
)
from giftcircle.infrastructure.persistence.models.user import UserModel


class ContributionRepository:
    """SQLAlchemy implementation of ContributionRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, contribution_id: UUID) -> Contribution | None:
        stmt = (
            select(ContributionModel, UserModel.name)
            .outerjoin(UserModel, UserModel.id == ContributionModel.user_id)
            .where(ContributionModel.id == contribution_id)
        )
        result = await self.session.execute(stmt)
        row = result.one_or_none()

        if row is None:
            return None

        model, user_name = row
        return self._to_domain(model, user_name)

    async def list_by_supply(self, supply_id: UUID) -> list[Contribution]:
        """List contributions of a supply in creation order, with user names."""
        stmt = (
            select(ContributionModel, UserModel.name)
            .outerjoin(UserModel, UserModel.id == ContributionModel.user_id)
            .where(ContributionModel.supply_id == supply_id)
            .order_by(ContributionModel.created_at, ContributionModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model, name) for model, name in result.all()]

    async def sum_committed(
        self, supply_id: UUID, *, exclude_id: UUID | None = None
    ) -> int:
        """Total committed units for a supply, 0 when there are none."""
        stmt = select(
            func.coalesce(func.sum(ContributionModel.quantity_committed), 0)
        ).where(ContributionModel.supply_id == supply_id)
        if exclude_id is not None:
            stmt = stmt.where(ContributionModel.id != exclude_id)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def totals_by_supply(self, supply_ids: Sequence[UUID]) -> dict[UUID, int]:
        """Committed totals for many supplies in one query."""
        if not supply_ids:
            return {}
        stmt = (
            select(
                ContributionModel.supply_id,
                func.sum(ContributionModel.quantity_committed),
            )
            .where(ContributionModel.supply_id.in_(supply_ids))
            .group_by(ContributionModel.supply_id)
        )
        result = await self.session.execute(stmt)
        return {supply_id: int(total) for supply_id, total in result.all()}

    async def save(self, contribution: Contribution) -> None:
        """Create or update contribution.

        The commit also releases a supply row lock taken earlier in the
        same session.
        """
        stmt = select(ContributionModel).where(ContributionModel.id == contribution.id)
        result = await self.session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            self.session.add(self._to_model(contribution))
        else:
            existing.quantity_committed = contribution.quantity_committed
            existing.notes = contribution.notes

        await self.session.commit()

    async def delete(self, contribution_id: UUID) -> None:
        """Remove contribution.

        Raises:
            NoResultFound: If contribution doesn't exist.
        """
        stmt = select(ContributionModel).where(ContributionModel.id == contribution_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        await self.session.delete(model)
        await self.session.commit()

    # =========================================================================
    # Entity <-> Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(
        self, model: ContributionModel, user_name: str | None = None
    ) -> Contribution:
        return Contribution(
            id=model.id,
            supply_id=model.supply_id,
            user_id=model.user_id,
            quantity_committed=model.quantity_committed,
            notes=model.notes,
            user_name=user_name,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Contribution) -> ContributionModel:
        return ContributionModel(
            id=entity.id,
            supply_id=entity.supply_id,
            user_id=entity.user_id,
            quantity_committed=entity.quantity_committed,
            notes=entity.notes,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
