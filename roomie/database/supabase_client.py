from supabase import create_client, Client
from roomie.config.settings import settings
import logging

logger = logging.getLogger(__name__)


class SupabaseClient:
    """Process-wide Supabase clients, created on first use."""

    _client: Client = None
    _service_client: Client = None

    @staticmethod
    def is_configured() -> bool:
        return bool(settings.supabase_url and settings.supabase_key)

    @classmethod
    def get_client(cls) -> Client:
        if cls._client is None:
            if not cls.is_configured():
                raise RuntimeError("SUPABASE_URL and SUPABASE_KEY must be set")
            cls._client = create_client(settings.supabase_url, settings.supabase_key)
        return cls._client

    @classmethod
    def get_service_client(cls) -> Client:
        """Client with service_role key, needed for auth.admin account lookups.

        Without SUPABASE_SERVICE_ROLE_KEY the anon client is returned and new
        roommates are always recorded as invited.
        """
        if cls._service_client is None and settings.supabase_service_role_key:
            cls._service_client = create_client(
                settings.supabase_url, settings.supabase_service_role_key
            )
        if cls._service_client is None:
            logger.debug("No service role key; using anon client for admin lookups")
        return cls._service_client or cls.get_client()


def get_supabase() -> Client:
    return SupabaseClient.get_client()


def get_service_supabase() -> Client:
    return SupabaseClient.get_service_client()
