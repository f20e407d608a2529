# 📄 File: lawmarket/modules/accounts/domain/services/account_domain_service.py
# 🧭 Purpose (Layman Explanation):
# Decides who is allowed to do admin things: only unbanned admins, never to themselves,
# and never banning another admin.
#
# 🧪 Purpose (Technical Summary):
# Stateless domain service holding the cross-account authorization predicates used by the admin
# command handlers.
#
# 🔗 Dependencies:
# Account aggregate, lawmarket.shared.core.exceptions
#
# 🔄 Connected Modules / Calls From:
# Admin command/query handlers, client admin queries

from lawmarket.modules.accounts.domain.models.account import Account
from lawmarket.shared.core.exceptions import ForbiddenError


class AccountDomainService:
    """Authorization rules that involve an acting account and a target account."""

    def ensure_can_perform_admin_action(self, actor: Account) -> None:
        if not actor.role.is_admin:
            raise ForbiddenError("Only administrators can perform this action", actor_id=actor.id)
        if actor.banned:
            raise ForbiddenError("Banned users cannot perform admin actions", actor_id=actor.id)

    def can_change_role(self, target: Account, actor: Account) -> bool:
        return actor.role.is_admin and target.id != actor.id

    def can_ban_user(self, target: Account, actor: Account) -> bool:
        return actor.role.is_admin and target.id != actor.id and not target.role.is_admin
