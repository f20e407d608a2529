# 📄 File: lawmarket/modules/accounts/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# Carries out account changes: editing your own profile, and the admin actions of banning,
# unbanning and changing someone's role, after checking the admin is allowed to.
#
# 🧪 Purpose (Technical Summary):
# Command handlers that load the target Account, apply authorization from AccountDomainService,
# call the aggregate, persist through AccountRepository and publish the pulled events afterwards.
#
# 🔗 Dependencies:
# Account repository interface, AccountDomainService, EventPublisher, structured logging
#
# 🔄 Connected Modules / Calls From:
# lawmarket.modules.accounts.presentation.api.v1 (user and admin routers)

__all__ = [
    "UpdateAccountProfileCommandHandler",
    "BanAccountCommandHandler",
    "UnbanAccountCommandHandler",
    "ChangeAccountRoleCommandHandler",
]

from lawmarket.modules.accounts.application.commands.ban_account import BanAccountCommand, UnbanAccountCommand
from lawmarket.modules.accounts.application.commands.change_account_role import ChangeAccountRoleCommand
from lawmarket.modules.accounts.application.commands.update_account_profile import UpdateAccountProfileCommand
from lawmarket.modules.accounts.domain.models.account import Account
from lawmarket.modules.accounts.domain.models.role import Role
from lawmarket.modules.accounts.domain.repositories.account_repository import AccountRepository
from lawmarket.modules.accounts.domain.services.account_domain_service import AccountDomainService
from lawmarket.shared.core.exceptions import AccountNotFoundError, ForbiddenError
from lawmarket.shared.domain.entity import pull_events
from lawmarket.shared.events.publisher import EventPublisher
from lawmarket.shared.utils.logging import get_logger

logger = get_logger(__name__)


async def _load_account(repository: AccountRepository, account_id: str) -> Account:
    account = await repository.find_by_id(account_id)
    if account is None:
        raise AccountNotFoundError(account_id)
    return account


class UpdateAccountProfileCommandHandler:
    """
    Handles self-service profile edits.
    """

    def __init__(self, account_repository: AccountRepository, event_publisher: EventPublisher):
        self._account_repository = account_repository
        self._event_publisher = event_publisher

    async def handle(self, command: UpdateAccountProfileCommand) -> Account:
        account = await _load_account(self._account_repository, command.account_id)
        account.update_profile(display_name=command.display_name, avatar_url=command.avatar_url)

        saved = await self._account_repository.update(account)
        await self._event_publisher.publish_all(pull_events(account.meta))
        logger.info(f"Updated profile for account {account.id}")
        return saved


class BanAccountCommandHandler:
    """
    Handles the admin ban action.

    The acting admin must pass ensure_can_perform_admin_action and
    can_ban_user, so admins can neither ban themselves nor each other.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        domain_service: AccountDomainService,
        event_publisher: EventPublisher,
    ):
        self._account_repository = account_repository
        self._domain_service = domain_service
        self._event_publisher = event_publisher

    async def handle(self, actor: Account, command: BanAccountCommand) -> Account:
        self._domain_service.ensure_can_perform_admin_action(actor)

        target = await _load_account(self._account_repository, command.target_account_id)
        if not self._domain_service.can_ban_user(target, actor):
            logger.log_user_action("ban_account", actor.id, resource=target.id, result="forbidden")
            raise ForbiddenError("You cannot ban this user", actor_id=actor.id, target_id=target.id)

        target.ban(command.reason, expires_at=command.expires_at, acting_admin_id=actor.id)
        saved = await self._account_repository.update(target)
        await self._event_publisher.publish_all(pull_events(target.meta))

        logger.log_user_action(
            "ban_account",
            actor.id,
            resource=target.id,
            extra={"expires_at": command.expires_at.isoformat() if command.expires_at else None},
        )
        return saved


class UnbanAccountCommandHandler:
    def __init__(
        self,
        account_repository: AccountRepository,
        domain_service: AccountDomainService,
        event_publisher: EventPublisher,
    ):
        self._account_repository = account_repository
        self._domain_service = domain_service
        self._event_publisher = event_publisher

    async def handle(self, actor: Account, command: UnbanAccountCommand) -> Account:
        self._domain_service.ensure_can_perform_admin_action(actor)

        target = await _load_account(self._account_repository, command.target_account_id)
        target.unban(acting_admin_id=actor.id)

        saved = await self._account_repository.update(target)
        await self._event_publisher.publish_all(pull_events(target.meta))
        logger.log_user_action("unban_account", actor.id, resource=target.id)
        return saved


class ChangeAccountRoleCommandHandler:
    def __init__(
        self,
        account_repository: AccountRepository,
        domain_service: AccountDomainService,
        event_publisher: EventPublisher,
    ):
        self._account_repository = account_repository
        self._domain_service = domain_service
        self._event_publisher = event_publisher

    async def handle(self, actor: Account, command: ChangeAccountRoleCommand) -> Account:
        self._domain_service.ensure_can_perform_admin_action(actor)
        new_role = Role.create(command.role)

        target = await _load_account(self._account_repository, command.target_account_id)
        if not self._domain_service.can_change_role(target, actor):
            logger.log_user_action("change_role", actor.id, resource=target.id, result="forbidden")
            raise ForbiddenError("You cannot change this user's role", actor_id=actor.id, target_id=target.id)

        old_role = str(target.role)
        target.change_role(new_role, acting_admin_id=actor.id)
        saved = await self._account_repository.update(target)
        await self._event_publisher.publish_all(pull_events(target.meta))

        logger.log_user_action(
            "change_role",
            actor.id,
            resource=target.id,
            extra={"old_role": old_role, "new_role": str(new_role)},
        )
        return saved
