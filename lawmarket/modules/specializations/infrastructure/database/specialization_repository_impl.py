# 📄 File: lawmarket/modules/specializations/infrastructure/database/specialization_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Reads and stores practice areas in the database.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of SpecializationRepository with domain/model mapping.
# 🔗 Dependencies:
# SQLAlchemy async session, SpecializationModel, Specialization domain model
# 🔄 Connected Modules / Calls From:
# specializations and clients/lawyers presentation dependencies

import logging
from typing import List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from lawmarket.modules.specializations.domain.models.specialization import Specialization
from lawmarket.modules.specializations.domain.repositories.specialization_repository import (
    SpecializationRepository,
)
from lawmarket.modules.specializations.infrastructure.database.models import SpecializationModel
from lawmarket.shared.core.exceptions import ConflictError, DatabaseError

logger = logging.getLogger(__name__)


class SpecializationRepositoryImpl(SpecializationRepository):
    """
    SQLAlchemy implementation of the SpecializationRepository interface.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_all(self) -> List[Specialization]:
        try:
            result = await self._session.execute(
                select(SpecializationModel).order_by(SpecializationModel.name)
            )
            return [self._model_to_domain(model) for model in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Database error listing specializations: {str(e)}")
            raise DatabaseError(f"Failed to list specializations: {str(e)}", operation="find_all") from e

    async def find_by_id(self, specialization_id: str) -> Optional[Specialization]:
        try:
            model = await self._session.get(SpecializationModel, specialization_id)
            return self._model_to_domain(model) if model else None
        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving specialization {specialization_id}: {str(e)}")
            raise DatabaseError(f"Failed to retrieve specialization: {str(e)}", operation="find_by_id") from e

    async def find_by_ids(self, specialization_ids: Sequence[str]) -> List[Specialization]:
        ids = list(dict.fromkeys(specialization_ids))
        if not ids:
            return []
        try:
            result = await self._session.execute(
                select(SpecializationModel).where(SpecializationModel.id.in_(ids))
            )
            return [self._model_to_domain(model) for model in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving specializations {ids}: {str(e)}")
            raise DatabaseError(f"Failed to retrieve specializations: {str(e)}", operation="find_by_ids") from e

    async def find_by_name(self, name: str) -> Optional[Specialization]:
        try:
            result = await self._session.execute(
                select(SpecializationModel).where(func.lower(SpecializationModel.name) == name.strip().lower())
            )
            model = result.scalar_one_or_none()
            return self._model_to_domain(model) if model else None
        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving specialization by name {name}: {str(e)}")
            raise DatabaseError(f"Failed to retrieve specialization: {str(e)}", operation="find_by_name") from e

    async def exists_by_ids(self, specialization_ids: Sequence[str]) -> bool:
        ids = list(dict.fromkeys(specialization_ids))
        if not ids:
            return True
        try:
            result = await self._session.execute(
                select(func.count()).select_from(SpecializationModel).where(SpecializationModel.id.in_(ids))
            )
            return result.scalar_one() == len(ids)
        except SQLAlchemyError as e:
            logger.error(f"Database error checking specializations {ids}: {str(e)}")
            raise DatabaseError(f"Failed to check specializations: {str(e)}", operation="exists_by_ids") from e

    async def save(self, specialization: Specialization) -> Specialization:
        try:
            self._session.add(SpecializationModel(
                id=specialization.id,
                name=specialization.name,
                description=specialization.description,
                created_at=specialization.meta.created_at,
                updated_at=specialization.meta.updated_at,
            ))
            await self._session.commit()
            logger.info(f"Created specialization {specialization.id} ({specialization.name})")
            return specialization
        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"Specialization name already exists: {specialization.name}")
            raise ConflictError(
                f"Specialization '{specialization.name}' already exists",
                conflicting_field="name",
            ) from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error creating specialization: {str(e)}")
            raise DatabaseError(f"Failed to create specialization: {str(e)}", operation="save") from e

    def _model_to_domain(self, model: SpecializationModel) -> Specialization:
        return Specialization.reconstitute(
            specialization_id=model.id,
            name=model.name,
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
