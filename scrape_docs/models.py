"""Documentation records and the result table that accumulates them."""

from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, Field, field_validator

__all__ = ["ApiDetails", "ResultTable", "ScrapeSettings"]

DEFAULT_HELP_LINK = "https://assimp-docs.readthedocs.io/en/latest/"
DEFAULT_STRIP_PREFIX = "ai"


class ApiDetails(BaseModel):
    """Documentation scraped for a single API symbol."""

    help_link: str | None = None
    description: str | None = None
    remarks: str | None = None
    parameters: dict[str, str] = Field(default_factory=dict)
    fields: dict[str, str] = Field(default_factory=dict)
    return_value: str | None = None

    def set_summary(self, brief: str, detailed: str) -> None:
        """Apply brief/detailed text without blanking previously set values."""

        if brief.strip():
            self.description = brief
        if detailed.strip():
            self.remarks = detailed

    def update_from(self, other: ApiDetails) -> None:
        self.set_summary(other.description or "", other.remarks or "")
        self.parameters.update(other.parameters)
        self.fields.update(other.fields)
        if other.return_value:
            self.return_value = other.return_value
        if other.help_link:
            self.help_link = other.help_link


class ScrapeSettings(BaseModel):
    """Per-run constants shared by every extractor."""

    help_link: str = DEFAULT_HELP_LINK
    strip_prefix: str = DEFAULT_STRIP_PREFIX

    @field_validator("help_link")
    @classmethod
    def _check_help_link(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("help link must be an absolute http(s) URL")
        return value

    @field_validator("strip_prefix")
    @classmethod
    def _check_prefix(cls, value: str) -> str:
        if not value or not value.islower():
            raise ValueError("strip prefix must be a non-empty lowercase string")
        return value


class ResultTable:
    """Sorted mapping from resolved symbol name to :class:`ApiDetails`.

    Records are created on first reference through :meth:`get_or_create` and
    mutated in place afterwards; nothing is ever removed.
    """

    def __init__(self) -> None:
        self._records: dict[str, ApiDetails] = {}

    def get_or_create(self, name: str) -> ApiDetails:
        details = self._records.get(name)
        if details is None:
            details = ApiDetails()
            self._records[name] = details
        return details

    def merge(self, other: ResultTable) -> None:
        """Fold ``other`` into this table using the extractor overwrite rules."""

        for name, details in other.items():
            self.get_or_create(name).update_from(details)

    def get(self, name: str) -> ApiDetails | None:
        return self._records.get(name)

    def items(self) -> list[tuple[str, ApiDetails]]:
        return sorted(self._records.items())

    def keys(self) -> list[str]:
        return sorted(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __getitem__(self, name: str) -> ApiDetails:
        return self._records[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._records)
