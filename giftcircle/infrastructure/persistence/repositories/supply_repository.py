"""SupplyRepository - SQLAlchemy implementation of SupplyRepository protocol."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from giftcircle.domain.entities.supply import Supply
from giftcircle.infrastructure.persistence.models.supply import SupplyModel


class SupplyRepository:
    """SQLAlchemy implementation of SupplyRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(
        self, supply_id: UUID, *, for_update: bool = False
    ) -> Supply | None:
        """Find supply by ID.

        Args:
            supply_id: Supply identifier.
            for_update: Issue SELECT ... FOR UPDATE. The lock is held until
                the session's next commit or rollback.
        """
        stmt = select(SupplyModel).where(SupplyModel.id == supply_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_by_event(self, event_id: UUID) -> list[Supply]:
        stmt = (
            select(SupplyModel)
            .where(SupplyModel.event_id == event_id)
            .order_by(SupplyModel.created_at, SupplyModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, supply: Supply) -> None:
        """Create or update supply in database."""
        stmt = select(SupplyModel).where(SupplyModel.id == supply.id)
        result = await self.session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            self.session.add(self._to_model(supply))
        else:
            self._update_model(existing, supply)

        await self.session.commit()

    async def delete(self, supply_id: UUID) -> None:
        """Remove supply; its contributions go with it (ON DELETE CASCADE).

        Raises:
            NoResultFound: If supply doesn't exist.
        """
        stmt = select(SupplyModel).where(SupplyModel.id == supply_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        await self.session.delete(model)
        await self.session.commit()

    # =========================================================================
    # Entity <-> Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: SupplyModel) -> Supply:
        return Supply(
            id=model.id,
            event_id=model.event_id,
            item_name=model.item_name,
            quantity_needed=model.quantity_needed,
            unit=model.unit,
            description=model.description,
            image_url=model.image_url,
            url=model.url,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Supply) -> SupplyModel:
        return SupplyModel(
            id=entity.id,
            event_id=entity.event_id,
            item_name=entity.item_name,
            quantity_needed=entity.quantity_needed,
            unit=entity.unit,
            description=entity.description,
            image_url=entity.image_url,
            url=entity.url,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def _update_model(self, model: SupplyModel, entity: Supply) -> None:
        model.item_name = entity.item_name
        model.quantity_needed = entity.quantity_needed
        model.unit = entity.unit
        model.description = entity.description
        model.image_url = entity.image_url
        model.url = entity.url
