"""Managed-runtime (.NET / CLR) metadata."""
from typing import List, Optional

from fileinfo.formatting import Base, format_number


class DotnetClass:
    """Type definition or type reference from the metadata tables.

    ``parent`` links a nested type to its enclosing type; ``parent_index``
    is the enclosing type's position in the same class list.
    """

    def __init__(self, name: str = "", namespace: str = "", library_name: str = "",
                 parent: Optional["DotnetClass"] = None,
                 parent_index: Optional[int] = None):
        self.name = name
        self.namespace = namespace
        self.library_name = library_name
        self.parent = parent
        self.parent_index = parent_index

    def get_nested_name(self) -> str:
        if self.parent is None:
            return self.name
        return f"{self.parent.get_nested_name()}.{self.name}"

    def get_name_with_parent_class_index(self) -> str:
        if self.parent_index is None:
            return self.name
        return f"{self.name}[{self.parent_index}]"

    def get_full_name(self) -> str:
        nested = self.get_nested_name()
        return f"{self.namespace}.{nested}" if self.namespace else nested

    def __repr__(self):
        return f"<DotnetClass {self.get_full_name()!r}>"


class _Stream:
    __slots__ = ("offset", "size")

    def __init__(self):
        self.offset: Optional[int] = None
        self.size: Optional[int] = None

    def is_present(self) -> bool:
        return self.offset is not None


class DotnetInfo:

    STREAMS = ("metadata", "string", "blob", "guid", "user_string")

    def __init__(self):
        self.used = False
        self.runtime_version: str = ""
        self.metadata_header_address: Optional[int] = None
        self.streams = {name: _Stream() for name in self.STREAMS}
        self.module_version_id: str = ""
        self.typelib_id: str = ""
        self.defined_classes: List[DotnetClass] = []
        self.imported_classes: List[DotnetClass] = []
        self.typeref_hash_crc32: str = ""
        self.typeref_hash_md5: str = ""
        self.typeref_hash_sha256: str = ""

    def is_used(self) -> bool:
        return self.used

    def set_runtime_version(self, major: int, minor: int) -> None:
        self.runtime_version = f"{major}.{minor}"

    def set_stream_info(self, stream: str, offset: int, size: int) -> None:
        """Record *stream* (one of ``STREAMS``) at ``offset`` with ``size`` bytes."""
        entry = self.streams[stream]
        entry.offset = offset
        entry.size = size

    def has_stream(self, stream: str) -> bool:
        return self.streams[stream].is_present()

    def get_stream_offset_str(self, stream: str, base: Base) -> str:
        return format_number(self.streams[stream].offset, base)

    def get_stream_size_str(self, stream: str, base: Base) -> str:
        return format_number(self.streams[stream].size, base)

    def get_metadata_header_address_str(self, base: Base) -> str:
        return format_number(self.metadata_header_address, base)

    def has_typelib_id(self) -> bool:
        return bool(self.typelib_id)

    def has_typeref_table_records(self) -> bool:
        return bool(self.imported_classes)

    def get_number_of_imported_classes(self) -> int:
        return len(self.imported_classes)

    def get_imported_class_name(self, position: int) -> str:
        return self.imported_classes[position].name

    def get_imported_class_nested_name(self, position: int) -> str:
        return self.imported_classes[position].get_nested_name()

    def get_imported_class_name_with_parent_class_index(self, position: int) -> str:
        return self.imported_classes[position].get_name_with_parent_class_index()

    def get_imported_class_lib_name(self, position: int) -> str:
        return self.imported_classes[position].library_name

    def get_imported_class_namespace(self, position: int) -> str:
        return self.imported_classes[position].namespace
