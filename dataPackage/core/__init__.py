"""Data objects, their system metadata, and package assembly."""

__all__ = ["AccessRule", "SystemMetadata", "DataObject", "DataPackage"]

from .sysmeta import AccessRule, SystemMetadata
from .data_object import DataObject
from .data_package import DataPackage
