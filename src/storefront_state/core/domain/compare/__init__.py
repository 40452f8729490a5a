from storefront_state.core.domain.compare.compare_add_outcome import CompareAddOutcome
from storefront_state.core.domain.compare.compare_entry import CompareEntry

__all__ = ["CompareAddOutcome", "CompareEntry"]
