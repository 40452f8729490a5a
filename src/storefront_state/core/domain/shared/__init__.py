from storefront_state.core.domain.shared.clock import new_id, now_ms, utc_now
from storefront_state.core.domain.shared.domain_error import DomainError
from storefront_state.core.domain.shared.money import format_amount

__all__ = ["DomainError", "format_amount", "new_id", "now_ms", "utc_now"]
