from storefront_state.infrastructure.common.retry.retry_policy import RetryPolicy

__all__ = ["RetryPolicy"]
