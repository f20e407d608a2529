# 📄 File: lawmarket/modules/specializations/domain/services/catalog.py
# 🧭 Purpose (Layman Explanation):
# Works out which of the practice areas someone picked do not actually exist.
# 🧪 Purpose (Technical Summary):
# Catalog lookup shared by client and lawyer specialization validation.
# 🔗 Dependencies:
# SpecializationRepository interface
# 🔄 Connected Modules / Calls From:
# ClientDomainService.validate_specializations, LawyerDomainService.validate_specializations

from typing import List, Sequence

from lawmarket.modules.specializations.domain.repositories.specialization_repository import (
    SpecializationRepository,
)


async def find_unknown_specialization_ids(
    repository: SpecializationRepository,
    specialization_ids: Sequence[str],
) -> List[str]:
    """
    Return the ids absent from the catalog, de-duplicated, in input order.
    """
    requested = list(dict.fromkeys(specialization_ids))
    if not requested:
        return []

    found = await repository.find_by_ids(requested)
    known = {specialization.id for specialization in found}
    return [specialization_id for specialization_id in requested if specialization_id not in known]
