# 📄 File: lawmarket/modules/accounts/infrastructure/external/supabase_auth.py
# 🧭 Purpose (Layman Explanation):
# Asks Supabase, our login provider, who a request's access token belongs to.
#
# 🧪 Purpose (Technical Summary):
# SessionProvider backed by supabase-py: lazily creates a client from settings and resolves
# tokens with auth.get_user in a worker thread, mapping the Supabase user to SessionIdentity.
#
# 🔗 Dependencies:
# - supabase (create_client, ClientOptions, AuthError)
# - starlette.concurrency.run_in_threadpool
# - lawmarket.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# - lawmarket.modules.accounts.presentation.dependencies (get_session_provider)

import logging
from typing import Any, Optional

from starlette.concurrency import run_in_threadpool
from supabase import AuthError, Client, create_client
from supabase.lib.client_options import ClientOptions

from lawmarket.modules.accounts.infrastructure.external.session_provider import SessionIdentity, SessionProvider
from lawmarket.shared.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class SupabaseSessionProvider(SessionProvider):
    """
    Resolves Supabase access tokens to marketplace identities.
    """

    def __init__(self, settings: Optional[Settings] = None, client: Optional[Client] = None):
        self._settings = settings or get_settings()
        self._client = client

    @property
    def client(self) -> Client:
        """Get or create the Supabase client."""
        if self._client is None:
            options = ClientOptions(
                headers={"User-Agent": f"LawMarket/{self._settings.APP_VERSION}"},
                auto_refresh_token=False,
                persist_session=False,
            )
            self._client = create_client(
                self._settings.SUPABASE_URL,
                self._settings.SUPABASE_ANON_KEY,
                options=options,
            )
            logger.info("Supabase client initialized successfully")
        return self._client

    async def resolve(self, access_token: str) -> Optional[SessionIdentity]:
        if not access_token:
            return None
        try:
            response = await run_in_threadpool(self.client.auth.get_user, access_token)
        except AuthError as e:
            logger.info(f"Supabase rejected access token: {e}")
            return None

        user = getattr(response, "user", None)
        if user is None:
            return None
        return self._to_identity(user)

    @staticmethod
    def _to_identity(user: Any) -> SessionIdentity:
        metadata = getattr(user, "user_metadata", None) or {}
        email = getattr(user, "email", None) or ""
        display_name = (
            metadata.get("name")
            or metadata.get("full_name")
            or metadata.get("display_name")
            or email.split("@")[0]
        )
        return SessionIdentity(
            account_id=str(user.id),
            display_name=display_name,
            email=email.lower(),
            email_verified=getattr(user, "email_confirmed_at", None) is not None,
        )
