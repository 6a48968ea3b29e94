"""Resource table with version-info strings and icon hashes."""
from dataclasses import dataclass
from typing import List, Optional

from fileinfo.formatting import Base, format_number


@dataclass
class Resource:
    name: str = ""
    type: str = ""
    language: str = ""
    name_id: Optional[int] = None
    type_id: Optional[int] = None
    language_id: Optional[int] = None
    sublanguage_id: Optional[int] = None
    offset: Optional[int] = None
    size: Optional[int] = None
    crc32: str = ""
    md5: str = ""
    sha256: str = ""


@dataclass
class VersionInfoLanguage:
    lcid: str = ""
    code_page: str = ""


@dataclass
class VersionInfoString:
    name: str = ""
    value: str = ""


class ResourceTable:

    def __init__(self):
        self.resources: List[Resource] = []
        self.version_info_languages: List[VersionInfoLanguage] = []
        self.version_info_strings: List[VersionInfoString] = []
        self.iconhash_crc32: str = ""
        self.iconhash_md5: str = ""
        self.iconhash_sha256: str = ""
        self.icon_perceptual_avg_hash: str = ""

    def add_resource(self, resource: Resource) -> None:
        self.resources.append(resource)

    def add_version_info_language(self, language: VersionInfoLanguage) -> None:
        self.version_info_languages.append(language)

    def add_version_info_string(self, string: VersionInfoString) -> None:
        self.version_info_strings.append(string)

    def get_number_of_resources(self) -> int:
        return len(self.resources)

    def get_number_of_version_info_languages(self) -> int:
        return len(self.version_info_languages)

    def get_number_of_version_info_strings(self) -> int:
        return len(self.version_info_strings)

    def has_records(self) -> bool:
        return bool(self.resources)

    def get_resource_name(self, index: int) -> str:
        return self.resources[index].name

    def get_resource_type(self, index: int) -> str:
        return self.resources[index].type

    def get_resource_language(self, index: int) -> str:
        return self.resources[index].language

    def get_resource_crc32(self, index: int) -> str:
        return self.resources[index].crc32

    def get_resource_md5(self, index: int) -> str:
        return self.resources[index].md5

    def get_resource_sha256(self, index: int) -> str:
        return self.resources[index].sha256

    def get_resource_name_id_str(self, index: int, base: Base) -> str:
        return format_number(self.resources[index].name_id, base)

    def get_resource_type_id_str(self, index: int, base: Base) -> str:
        return format_number(self.resources[index].type_id, base)

    def get_resource_language_id_str(self, index: int, base: Base) -> str:
        return format_number(self.resources[index].language_id, base)

    def get_resource_sublanguage_id_str(self, index: int, base: Base) -> str:
        return format_number(self.resources[index].sublanguage_id, base)

    def get_resource_offset_str(self, index: int, base: Base) -> str:
        return format_number(self.resources[index].offset, base)

    def get_resource_size_str(self, index: int, base: Base) -> str:
        return format_number(self.resources[index].size, base)

    def get_version_info_language_lcid(self, index: int) -> str:
        return self.version_info_languages[index].lcid

    def get_version_info_language_code_page(self, index: int) -> str:
        return self.version_info_languages[index].code_page

    def get_version_info_string_name(self, index: int) -> str:
        return self.version_info_strings[index].name

    def get_version_info_string_value(self, index: int) -> str:
        return self.version_info_strings[index].value
