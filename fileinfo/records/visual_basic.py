"""Visual Basic project metadata found in VB5/VB6 executables."""
from dataclasses import dataclass, field
from typing import List, Optional

from fileinfo.formatting import format_number


@dataclass
class VisualBasicObject:
    name: str = ""
    methods: List[str] = field(default_factory=list)

    def add_method(self, method: str) -> None:
        self.methods.append(method)


@dataclass
class VisualBasicExtern:
    module_name: str = ""
    api_name: str = ""


class VisualBasicInfo:

    def __init__(self):
        self.used = False
        self.is_pcode = False
        self.language_dll: str = ""
        self.backup_language_dll: str = ""
        self.project_exe_name: str = ""
        self.project_description: str = ""
        self.project_help_file: str = ""
        self.project_name: str = ""
        self.project_path: str = ""
        self.language_dll_primary_lcid: Optional[int] = None
        self.language_dll_secondary_lcid: Optional[int] = None
        self.project_primary_lcid: Optional[int] = None
        self.project_secondary_lcid: Optional[int] = None
        self.objects: List[VisualBasicObject] = []
        self.externs: List[VisualBasicExtern] = []
        self.object_table_guid: str = ""
        self.typelib_clsid: str = ""
        self.typelib_major_version: Optional[int] = None
        self.typelib_minor_version: Optional[int] = None
        self.typelib_lcid: Optional[int] = None
        self.com_object_name: str = ""
        self.com_object_description: str = ""
        self.com_object_clsid: str = ""
        self.com_object_interface_clsid: str = ""
        self.com_object_events_clsid: str = ""
        self.com_object_type: str = ""
        self.extern_table_hash_crc32: str = ""
        self.extern_table_hash_md5: str = ""
        self.extern_table_hash_sha256: str = ""
        self.object_table_hash_crc32: str = ""
        self.object_table_hash_md5: str = ""
        self.object_table_hash_sha256: str = ""

    def add_object(self, obj: VisualBasicObject) -> None:
        self.objects.append(obj)

    def add_extern(self, ext: VisualBasicExtern) -> None:
        self.externs.append(ext)

    def is_used(self) -> bool:
        return self.used

    def get_number_of_objects(self) -> int:
        return len(self.objects)

    def get_number_of_externs(self) -> int:
        return len(self.externs)

    def get_object(self, position: int) -> VisualBasicObject:
        return self.objects[position]

    def get_extern(self, position: int) -> VisualBasicExtern:
        return self.externs[position]

    def get_extern_module_name(self, position: int) -> str:
        return self.externs[position].module_name

    def get_extern_api_name(self, position: int) -> str:
        return self.externs[position].api_name

    def get_language_dll_primary_lcid_str(self) -> str:
        return format_number(self.language_dll_primary_lcid)

    def get_language_dll_secondary_lcid_str(self) -> str:
        return format_number(self.language_dll_secondary_lcid)

    def get_project_primary_lcid_str(self) -> str:
        return format_number(self.project_primary_lcid)

    def get_project_secondary_lcid_str(self) -> str:
        return format_number(self.project_secondary_lcid)

    def get_typelib_major_version_str(self) -> str:
        return format_number(self.typelib_major_version)

    def get_typelib_minor_version_str(self) -> str:
        return format_number(self.typelib_minor_version)

    def get_typelib_lcid_str(self) -> str:
        return format_number(self.typelib_lcid)
