# 📄 File: lawmarket/modules/lawyers/infrastructure/database/lawyer_profile_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves and loads lawyer applications, including their files, practice areas and languages,
# so that an application is never stored half-way.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of LawyerProfileRepository. save/update write the root row and
# replace every child set (delete-then-insert) inside one transaction; unique violations on
# account_id and bar_number surface as the matching ConflictError subclasses, a missing
# parent account as AccountNotFoundError.
#
# 🔗 Dependencies:
# - LawyerProfileRepository interface, LawyerProfile aggregate and value objects
# - Lawyer ORM models
# - SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.lawyers.presentation.dependencies (repository factory)

import logging
from typing import List, Optional, Sequence

from sqlalchemy import delete, func, insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from lawmarket.modules.lawyers.domain.models.lawyer_profile import LawyerProfile
from lawmarket.modules.lawyers.domain.models.value_objects import (
    ApplicationStatus,
    BarCredentials,
    DocumentType,
    Education,
    LawyerDocument,
    LawyerSpecialization,
    OnboardingStep,
    SpecializationKind,
)
from lawmarket.modules.lawyers.domain.repositories.lawyer_profile_repository import LawyerProfileRepository
from lawmarket.modules.lawyers.infrastructure.database.models import (
    LawyerDocumentModel,
    LawyerLanguageModel,
    LawyerProfileModel,
    LawyerSpecializationModel,
)
from lawmarket.shared.core.exceptions import (
    AccountNotFoundError,
    BarNumberAlreadyRegisteredError,
    ConflictError,
    DatabaseError,
    LawMarketException,
    LawyerProfileAlreadyExistsError,
    LawyerProfileNotFoundError,
)
from lawmarket.shared.infrastructure.database.constraints import violates_foreign_key, violates_unique

logger = logging.getLogger(__name__)


class LawyerProfileRepositoryImpl(LawyerProfileRepository):
    """
    SQLAlchemy implementation of the LawyerProfileRepository interface.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    # =========================================================================
    # READS
    # =========================================================================

    async def find_by_id(self, profile_id: str) -> Optional[LawyerProfile]:
        return await self._find_one(LawyerProfileModel.id == profile_id, "find_by_id")

    async def find_by_account_id(self, account_id: str) -> Optional[LawyerProfile]:
        return await self._find_one(LawyerProfileModel.account_id == account_id, "find_by_account_id")

    async def find_by_email(self, email: str) -> Optional[LawyerProfile]:
        return await self._find_one(LawyerProfileModel.email == email.strip().lower(), "find_by_email")

    async def exists_by_account_id(self, account_id: str) -> bool:
        return await self._exists(LawyerProfileModel.account_id == account_id, "exists_by_account_id")

    async def exists_by_bar_number(self, bar_number: str) -> bool:
        return await self._exists(LawyerProfileModel.bar_number == bar_number, "exists_by_bar_number")

    # =========================================================================
    # WRITES
    # =========================================================================

    async def save(self, profile: LawyerProfile) -> LawyerProfile:
        try:
            model = LawyerProfileModel(id=profile.id, account_id=profile.account_id, created_at=profile.created_at)
            self._update_model_from_domain(model, profile)
            self._session.add(model)
            await self._session.flush()
            await self._write_children(profile)
            await self._session.commit()

            logger.info(f"Created lawyer profile {profile.id} for account {profile.account_id}")
            return profile

        except IntegrityError as e:
            await self._session.rollback()
            raise self._map_integrity_error(e, profile) from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error creating lawyer profile: {str(e)}")
            raise DatabaseError(f"Failed to create lawyer profile: {str(e)}", operation="save") from e

    async def update(self, profile: LawyerProfile) -> LawyerProfile:
        try:
            model = await self._session.get(LawyerProfileModel, profile.id)
            if model is None:
                raise LawyerProfileNotFoundError("Lawyer profile not found", resource_id=profile.id)

            self._update_model_from_domain(model, profile)
            await self._session.flush()
            await self._write_children(profile)
            await self._session.commit()

            logger.info(f"Updated lawyer profile {profile.id} (step={profile.onboarding_step.value})")
            return profile

        except IntegrityError as e:
            await self._session.rollback()
            raise self._map_integrity_error(e, profile) from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error updating lawyer profile {profile.id}: {str(e)}")
            raise DatabaseError(f"Failed to update lawyer profile: {str(e)}", operation="update") from e

    async def save_documents(self, profile_id: str, documents: Sequence[LawyerDocument]) -> None:
        await self._write_child_set(
            lambda: self._insert_documents(profile_id, documents),
            operation="save_documents",
        )

    async def save_specializations(self, profile_id: str, specializations: Sequence[LawyerSpecialization]) -> None:
        await self._write_child_set(
            lambda: self._replace_specializations(profile_id, specializations),
            operation="save_specializations",
        )

    async def save_languages(self, profile_id: str, language_ids: Sequence[str]) -> None:
        await self._write_child_set(
            lambda: self._replace_languages(profile_id, language_ids),
            operation="save_languages",
        )

    # =========================================================================
    # CHILD SETS
    # =========================================================================

    async def _write_children(self, profile: LawyerProfile) -> None:
        await self._session.execute(
            delete(LawyerDocumentModel).where(LawyerDocumentModel.lawyer_id == profile.id)
        )
        await self._insert_documents(profile.id, profile.documents)
        await self._replace_specializations(profile.id, profile.specializations)
        await self._replace_languages(profile.id, profile.language_ids)

    async def _write_child_set(self, write, operation: str) -> None:
        try:
            await write()
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"Lawyer {operation} violated a constraint: {str(e.orig)}")
            raise ConflictError("Lawyer profile data conflicts with existing data") from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error in lawyer {operation}: {str(e)}")
            raise DatabaseError(f"Failed to {operation.replace('_', ' ')}: {str(e)}", operation=operation) from e

    async def _insert_documents(self, profile_id: str, documents: Sequence[LawyerDocument]) -> None:
        rows = [
            {
                "id": doc.id,
                "lawyer_id": profile_id,
                "document_type": doc.document_type.value,
                "url": doc.url,
                "public_id": doc.public_id,
                "original_name": doc.original_name,
                "file_size": doc.file_size,
                "mime_type": doc.mime_type,
            }
            for doc in documents
        ]
        if rows:
            await self._session.execute(insert(LawyerDocumentModel), rows)

    async def _replace_specializations(self, profile_id: str, specializations: Sequence[LawyerSpecialization]) -> None:
        await self._session.execute(
            delete(LawyerSpecializationModel).where(LawyerSpecializationModel.lawyer_id == profile_id)
        )
        rows = [
            {
                "lawyer_id": profile_id,
                "specialization_id": spec.specialization_id,
                "kind": spec.kind.value,
                "years_of_experience": spec.years_of_experience,
            }
            for spec in specializations
        ]
        if rows:
            await self._session.execute(insert(LawyerSpecializationModel), rows)

    async def _replace_languages(self, profile_id: str, language_ids: Sequence[str]) -> None:
        await self._session.execute(
            delete(LawyerLanguageModel).where(LawyerLanguageModel.lawyer_id == profile_id)
        )
        rows = [{"lawyer_id": profile_id, "language_id": language_id} for language_id in language_ids]
        if rows:
            await self._session.execute(insert(LawyerLanguageModel), rows)

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _find_one(self, condition, operation: str) -> Optional[LawyerProfile]:
        try:
            result = await self._session.execute(select(LawyerProfileModel).where(condition))
            model = result.scalar_one_or_none()
            if model is None:
                return None
            return await self._load_aggregate(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error in lawyer {operation}: {str(e)}")
            raise DatabaseError(f"Failed to retrieve lawyer profile: {str(e)}", operation=operation) from e

    async def _exists(self, condition, operation: str) -> bool:
        try:
            result = await self._session.execute(
                select(func.count()).select_from(LawyerProfileModel).where(condition)
            )
            return result.scalar_one() > 0
        except SQLAlchemyError as e:
            logger.error(f"Database error in lawyer {operation}: {str(e)}")
            raise DatabaseError(f"Failed to check lawyer profile: {str(e)}", operation=operation) from e

    async def _load_aggregate(self, model: LawyerProfileModel) -> LawyerProfile:
        documents = await self._session.execute(
            select(
                LawyerDocumentModel.id,
                LawyerDocumentModel.document_type,
                LawyerDocumentModel.url,
                LawyerDocumentModel.public_id,
                LawyerDocumentModel.original_name,
                LawyerDocumentModel.file_size,
                LawyerDocumentModel.mime_type,
            )
            .where(LawyerDocumentModel.lawyer_id == model.id)
            .order_by(LawyerDocumentModel.created_at, LawyerDocumentModel.id)
        )
        specializations = await self._session.execute(
            select(
                LawyerSpecializationModel.specialization_id,
                LawyerSpecializationModel.kind,
                LawyerSpecializationModel.years_of_experience,
            )
            .where(LawyerSpecializationModel.lawyer_id == model.id)
            .order_by(LawyerSpecializationModel.kind, LawyerSpecializationModel.specialization_id)
        )
        languages = await self._session.execute(
            select(LawyerLanguageModel.language_id)
            .where(LawyerLanguageModel.lawyer_id == model.id)
            .order_by(LawyerLanguageModel.language_id)
        )

        return self._model_to_domain(
            model,
            documents=[
                LawyerDocument(
                    id=row.id,
                    document_type=DocumentType(row.document_type),
                    url=row.url,
                    public_id=row.public_id,
                    original_name=row.original_name,
                    file_size=row.file_size,
                    mime_type=row.mime_type,
                )
                for row in documents.all()
            ],
            specializations=[
                LawyerSpecialization(
                    specialization_id=row.specialization_id,
                    kind=SpecializationKind(row.kind),
                    years_of_experience=row.years_of_experience,
                )
                for row in specializations.all()
            ],
            language_ids=list(languages.scalars().all()),
        )

    def _model_to_domain(
        self,
        model: LawyerProfileModel,
        documents: List[LawyerDocument],
        specializations: List[LawyerSpecialization],
        language_ids: List[str],
    ) -> LawyerProfile:
        bar_credentials = None
        if model.bar_number is not None and model.bar_issue_date is not None:
            bar_credentials = BarCredentials(
                bar_number=model.bar_number,
                bar_association=model.bar_association,
                issue_date=model.bar_issue_date,
                expiry_date=model.bar_expiry_date,
            )
        education = None
        if model.law_school is not None and model.graduation_year is not None:
            education = Education(law_school=model.law_school, graduation_year=model.graduation_year)

        return LawyerProfile.reconstitute(
            profile_id=model.id,
            account_id=model.account_id,
            first_name=model.first_name,
            middle_name=model.middle_name,
            last_name=model.last_name,
            email=model.email,
            phone_number=model.phone_number,
            country=model.country,
            bar_credentials=bar_credentials,
            education=education,
            current_firm=model.current_firm,
            onboarding_step=OnboardingStep(model.onboarding_step),
            application_status=ApplicationStatus(model.application_status),
            profile_completed=model.profile_completed,
            documents=documents,
            specializations=specializations,
            language_ids=language_ids,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _update_model_from_domain(self, model: LawyerProfileModel, profile: LawyerProfile) -> None:
        model.first_name = profile.first_name
        model.middle_name = profile.middle_name
        model.last_name = profile.last_name
        model.email = profile.email
        model.phone_number = profile.phone_number
        model.country = profile.country

        credentials = profile.bar_credentials
        model.bar_number = credentials.bar_number if credentials else None
        model.bar_association = credentials.bar_association if credentials else None
        model.bar_issue_date = credentials.issue_date if credentials else None
        model.bar_expiry_date = credentials.expiry_date if credentials else None

        education = profile.education
        model.law_school = education.law_school if education else None
        model.graduation_year = education.graduation_year if education else None
        model.current_firm = profile.current_firm

        model.onboarding_step = profile.onboarding_step.value
        model.application_status = profile.application_status.value
        model.profile_completed = profile.profile_completed
        model.updated_at = profile.updated_at

    def _map_integrity_error(self, error: IntegrityError, profile: LawyerProfile) -> LawMarketException:
        if violates_unique(error, "lawyer_profiles", "bar_number") and profile.bar_credentials is not None:
            logger.warning(f"Bar number already registered: {profile.bar_credentials.bar_number}")
            return BarNumberAlreadyRegisteredError(profile.bar_credentials.bar_number)
        if violates_unique(error, "lawyer_profiles", "account_id"):
            logger.warning(f"Lawyer profile already exists for account {profile.account_id}")
            return LawyerProfileAlreadyExistsError(profile.account_id)
        if violates_foreign_key(error, "lawyer_profiles", "account_id"):
            logger.warning(f"Lawyer profile references unknown account {profile.account_id}")
            return AccountNotFoundError(profile.account_id)
        logger.warning(f"Lawyer profile write violated a constraint: {str(error.orig)}")
        return ConflictError("Lawyer profile conflicts with existing data")
