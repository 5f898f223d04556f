"""Image store backends and factory."""

from newsroom.infrastructure.external.storage.factory import ImageStoreFactory
from newsroom.infrastructure.external.storage.local_store import LocalImageStore
from newsroom.infrastructure.external.storage.temp_files import spooled_image

__all__ = ["ImageStoreFactory", "LocalImageStore", "spooled_image"]
