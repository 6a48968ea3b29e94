"""Import table and the list of dependencies that could not be resolved."""
from dataclasses import dataclass
from typing import List, Optional

from fileinfo.formatting import Base, format_number

# Usage types reported for an imported symbol.
USAGE_UNKNOWN = "UNKNOWN"
USAGE_FUNCTION = "FUNCTION"
USAGE_OBJECT = "OBJECT"
USAGE_FILE = "FILE"


@dataclass
class Import:
    name: str = ""
    library_name: str = ""
    usage_type: str = USAGE_UNKNOWN
    address: Optional[int] = None
    ordinal: Optional[int] = None


class ImportTable:

    def __init__(self):
        self.imports: List[Import] = []
        self.libraries: List[str] = []
        self.missing_dependencies: List[str] = []
        self.imphash_crc32: str = ""
        self.imphash_md5: str = ""
        self.imphash_sha256: str = ""
        self.imphash_tlsh: str = ""

    def add_library(self, name: str) -> None:
        self.libraries.append(name)

    def add_import(self, record: Import) -> None:
        self.imports.append(record)

    def add_missing_dependency(self, name: str) -> None:
        self.missing_dependencies.append(name)

    def get_number_of_libraries(self) -> int:
        return len(self.libraries)

    def get_number_of_imports(self) -> int:
        return len(self.imports)

    def has_records(self) -> bool:
        return bool(self.imports)

    def get_import(self, position: int) -> Import:
        return self.imports[position]

    def get_import_name(self, position: int) -> str:
        return self.imports[position].name

    def get_import_library_name(self, position: int) -> str:
        return self.imports[position].library_name

    def get_import_usage_type(self, position: int) -> str:
        return self.imports[position].usage_type

    def get_import_address_str(self, position: int, base: Base) -> str:
        return format_number(self.imports[position].address, base)

    def get_import_ordinal_number_str(self, position: int, base: Base) -> str:
        return format_number(self.imports[position].ordinal, base)

    def get_number_of_missing_deps(self) -> int:
        return len(self.missing_dependencies)

    def get_missing_dep_name(self, position: int) -> str:
        return self.missing_dependencies[position]
