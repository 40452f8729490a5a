from storefront_state.infrastructure.catalog.clients.supabase_http_client import SupabaseHttpClient
from storefront_state.infrastructure.catalog.supabase_catalog_adapter import SupabaseCatalogAdapter

__all__ = ["SupabaseCatalogAdapter", "SupabaseHttpClient"]
