"""Remote service integrations.

Currently a Supabase (PostgREST) client implementing the journal's
RemoteStore protocol.
"""

from .supabase import SupabaseStore

__all__ = [
    "SupabaseStore",
]
