"""The address record held by the cache."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Record:
    """A keyed address entry."""

    key: int
    full_name: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""

    def describe(self, verbose: bool = False) -> str:
        """The line printed for this record; ``verbose`` adds every field."""
        if verbose:
            return (
                f"FIFO info from cacheManager.  key: {self.key}; name: {self.full_name}"
                f";address: {self.address}; city: {self.city}; state: {self.state}"
                f"; zip: {self.zip_code}"
            )
        return f"FIFO info from cacheManager:  key: {self.key}"