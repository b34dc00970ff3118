"""
Database client factory for Supabase.

The backend talks to Supabase exclusively with the service role key: every
table is owned by this service and row ownership is enforced in the
repositories, not through RLS.

There is no module-level client. The service container builds one from its
Settings and keeps it for the life of the process.
"""

from supabase import create_client, Client

from .config import Settings


def create_supabase_client(settings: Settings) -> Client:
    """
    Create a Supabase client with the service role key.

    Args:
        settings: Settings carrying SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY

    Returns:
        Supabase client configured with service role key

    Raises:
        RuntimeError: If the Supabase configuration is incomplete
    """
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )
    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
    )
