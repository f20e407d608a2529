# 📄 File: lawmarket/modules/clients/infrastructure/database/client_profile_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves and loads client profiles together with their chosen practice areas, making sure a
# profile is either stored completely or not at all.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of ClientProfileRepository. Each write is one transaction: profile
# row, full delete-then-insert of specialization links, and the owning account's onboarding
# flag. A unique violation on account_id surfaces as ClientProfileAlreadyExistsError and a
# missing parent account as AccountNotFoundError.
#
# 🔗 Dependencies:
# - ClientProfileRepository interface, ClientProfile / Location domain models
# - ClientProfileModel, ClientSpecializationModel, AccountModel
# - SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - lawmarket.modules.clients.presentation.dependencies (repository factory)

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from lawmarket.modules.accounts.infrastructure.database.models import AccountModel
from lawmarket.modules.clients.domain.models.client_profile import ClientProfile
from lawmarket.modules.clients.domain.models.location import Location
from lawmarket.modules.clients.domain.repositories.client_profile_repository import ClientProfileRepository
from lawmarket.modules.clients.infrastructure.database.models import (
    ClientProfileModel,
    ClientSpecializationModel,
)
from lawmarket.shared.core.exceptions import (
    AccountNotFoundError,
    ClientProfileAlreadyExistsError,
    ClientProfileNotFoundError,
    ConflictError,
    DatabaseError,
    LawMarketException,
)
from lawmarket.shared.infrastructure.database.constraints import violates_foreign_key, violates_unique

logger = logging.getLogger(__name__)


class ClientProfileRepositoryImpl(ClientProfileRepository):
    """
    SQLAlchemy implementation of the ClientProfileRepository interface.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    # =========================================================================
    # READS
    # =========================================================================

    async def find_by_id(self, profile_id: str) -> Optional[ClientProfile]:
        try:
            model = await self._session.get(ClientProfileModel, profile_id)
            if model is None:
                return None
            return self._model_to_domain(model, await self._load_specialization_ids(model.id))
        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving client profile {profile_id}: {str(e)}")
            raise DatabaseError(f"Failed to retrieve client profile: {str(e)}", operation="find_by_id") from e

    async def find_by_account_id(self, account_id: str) -> Optional[ClientProfile]:
        try:
            result = await self._session.execute(
                select(ClientProfileModel).where(ClientProfileModel.account_id == account_id)
            )
            model = result.scalar_one_or_none()
            if model is None:
                return None
            return self._model_to_domain(model, await self._load_specialization_ids(model.id))
        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving client profile for account {account_id}: {str(e)}")
            raise DatabaseError(
                f"Failed to retrieve client profile: {str(e)}", operation="find_by_account_id"
            ) from e

    async def find_all(self) -> List[ClientProfile]:
        try:
            result = await self._session.execute(
                select(ClientProfileModel).order_by(ClientProfileModel.created_at, ClientProfileModel.id)
            )
            models = list(result.scalars().all())
            links = await self._load_specialization_map([model.id for model in models])
            return [self._model_to_domain(model, links.get(model.id, [])) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error listing client profiles: {str(e)}")
            raise DatabaseError(f"Failed to list client profiles: {str(e)}", operation="find_all") from e

    # =========================================================================
    # WRITES
    # =========================================================================

    async def save(self, profile: ClientProfile) -> ClientProfile:
        try:
            self._session.add(self._domain_to_model(profile))
            await self._session.flush()
            await self._replace_specializations(profile.id, profile.specialization_ids)
            await self._sync_account_onboarding(profile)
            await self._session.commit()

            logger.info(f"Created client profile {profile.id} for account {profile.account_id}")
            return profile

        except IntegrityError as e:
            await self._session.rollback()
            raise self._map_integrity_error(e, profile) from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error creating client profile: {str(e)}")
            raise DatabaseError(f"Failed to create client profile: {str(e)}", operation="save") from e

    async def update(self, profile: ClientProfile) -> ClientProfile:
        try:
            model = await self._session.get(ClientProfileModel, profile.id)
            if model is None:
                raise ClientProfileNotFoundError("Client not found", resource_id=profile.id)

            self._update_model_from_domain(model, profile)
            await self._replace_specializations(profile.id, profile.specialization_ids)
            await self._sync_account_onboarding(profile)
            await self._session.commit()

            logger.info(f"Updated client profile {profile.id}")
            return profile

        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"Client profile update violated a constraint: {str(e.orig)}")
            raise ConflictError("Client profile update conflicts with existing data") from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error updating client profile {profile.id}: {str(e)}")
            raise DatabaseError(f"Failed to update client profile: {str(e)}", operation="update") from e

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _replace_specializations(self, client_id: str, specialization_ids: Sequence[str]) -> None:
        await self._session.execute(
            delete(ClientSpecializationModel).where(ClientSpecializationModel.client_id == client_id)
        )
        rows = [{"client_id": client_id, "specialization_id": sid} for sid in specialization_ids]
        if rows:
            await self._session.execute(insert(ClientSpecializationModel), rows)

    async def _sync_account_onboarding(self, profile: ClientProfile) -> None:
        if not profile.onboarding_completed:
            return
        await self._session.execute(
            update(AccountModel)
            .where(AccountModel.id == profile.account_id)
            .values(onboarding_completed=True, updated_at=profile.updated_at)
        )

    async def _load_specialization_ids(self, client_id: str) -> List[str]:
        result = await self._session.execute(
            select(ClientSpecializationModel.specialization_id)
            .where(ClientSpecializationModel.client_id == client_id)
            .order_by(ClientSpecializationModel.specialization_id)
        )
        return list(result.scalars().all())

    async def _load_specialization_map(self, client_ids: Sequence[str]) -> Dict[str, List[str]]:
        links: Dict[str, List[str]] = defaultdict(list)
        if not client_ids:
            return links
        result = await self._session.execute(
            select(ClientSpecializationModel.client_id, ClientSpecializationModel.specialization_id)
            .where(ClientSpecializationModel.client_id.in_(client_ids))
            .order_by(ClientSpecializationModel.specialization_id)
        )
        for client_id, specialization_id in result.all():
            links[client_id].append(specialization_id)
        return links

    def _map_integrity_error(self, error: IntegrityError, profile: ClientProfile) -> LawMarketException:
        if violates_unique(error, "client_profiles", "account_id"):
            logger.warning(f"Client profile already exists for account {profile.account_id}")
            return ClientProfileAlreadyExistsError(profile.account_id)
        if violates_foreign_key(error, "client_profiles", "account_id"):
            logger.warning(f"Client profile references unknown account {profile.account_id}")
            return AccountNotFoundError(profile.account_id)
        logger.warning(f"Client profile insert violated a constraint: {str(error.orig)}")
        return ConflictError("Client profile conflicts with existing data")

    def _domain_to_model(self, profile: ClientProfile) -> ClientProfileModel:
        return ClientProfileModel(
            id=profile.id,
            account_id=profile.account_id,
            display_name=profile.display_name,
            phone_number=profile.phone_number,
            country=profile.location.country,
            state=profile.location.state,
            company=profile.company,
            onboarding_completed=profile.onboarding_completed,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )

    def _model_to_domain(self, model: ClientProfileModel, specialization_ids: List[str]) -> ClientProfile:
        return ClientProfile.reconstitute(
            profile_id=model.id,
            account_id=model.account_id,
            display_name=model.display_name,
            phone_number=model.phone_number,
            location=Location(country=model.country, state=model.state),
            company=model.company,
            specialization_ids=specialization_ids,
            onboarding_completed=model.onboarding_completed,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _update_model_from_domain(self, model: ClientProfileModel, profile: ClientProfile) -> None:
        model.display_name = profile.display_name
        model.phone_number = profile.phone_number
        model.country = profile.location.country
        model.state = profile.location.state
        model.company = profile.company
        model.onboarding_completed = profile.onboarding_completed
        model.updated_at = profile.updated_at
