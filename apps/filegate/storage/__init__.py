from .base import FileRecord, ResourceStorage
from .local import LocalStorage
from .metadata import MetadataIndex
from .factory import ResourceFactory, get_resource_factory

__all__ = [
    'FileRecord',
    'ResourceStorage',
    'LocalStorage',
    'MetadataIndex',
    'ResourceFactory',
    'get_resource_factory',
]
