"""Thread-local storage directory."""
from typing import List, Optional

from fileinfo.formatting import Base, format_number


class TlsInfo:

    def __init__(self):
        self.raw_data_start_address: Optional[int] = None
        self.raw_data_end_address: Optional[int] = None
        self.index_address: Optional[int] = None
        self.callbacks_address: Optional[int] = None
        self.zero_fill_size: Optional[int] = None
        self.characteristics: Optional[int] = None
        self.callbacks: List[int] = []
        self._used = False

    def mark_used(self) -> None:
        self._used = True

    def is_used(self) -> bool:
        return self._used

    def add_callback(self, address: int) -> None:
        self.callbacks.append(address)

    def get_raw_data_start_address_str(self, base: Base) -> str:
        return format_number(self.raw_data_start_address, base)

    def get_raw_data_end_address_str(self, base: Base) -> str:
        return format_number(self.raw_data_end_address, base)

    def get_index_address_str(self, base: Base) -> str:
        return format_number(self.index_address, base)

    def get_callbacks_address_str(self, base: Base) -> str:
        return format_number(self.callbacks_address, base)

    def get_zero_fill_size_str(self, base: Base) -> str:
        return format_number(self.zero_fill_size, base)

    def get_characteristics_str(self) -> str:
        return format_number(self.characteristics, Base.HEX)

    def get_number_of_callbacks(self) -> int:
        return len(self.callbacks)

    def get_callback_address_str(self, position: int, base: Base) -> str:
        return format_number(self.callbacks[position], base)
