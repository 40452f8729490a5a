from storefront_state.infrastructure.fakes.in_memory_catalog_gateway import InMemoryCatalogGateway
from storefront_state.infrastructure.fakes.recording_notifier import RecordingNotifier

__all__ = ["InMemoryCatalogGateway", "RecordingNotifier"]
