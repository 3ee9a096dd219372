"""Request and response validators.

Envelope models mirroring what each endpoint sends and receives, split into
``body``, ``path`` and ``query`` parts. Bodies reuse the option models from
:mod:`.types`, so a field accepted by an endpoint function is accepted here
as well.

Use :func:`safe_parse` to check a payload before making a call; it reports
success or field-level failures without raising.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from . import types

ModelT = TypeVar("ModelT", bound=BaseModel)

LINK_ID_PATTERN = r"^lnk_[A-Za-z0-9]+_[A-Za-z0-9]+$"


@dataclass
class ValidationReport(Generic[ModelT]):
    """Outcome of :func:`safe_parse`.

    Attributes:
        success: Whether the payload validated.
        value: The validated model, None on failure.
        errors: One ``{"loc": ..., "msg": ...}`` entry per failing field.
    """

    success: bool
    value: ModelT | None = None
    errors: list[dict[str, str]] = field(default_factory=list)


def safe_parse(model: type[ModelT], payload: Any) -> ValidationReport[ModelT]:
    """Validate a payload against a model without raising."""
    try:
        value = model.model_validate(payload)
    except ValidationError as e:
        errors = [
            {"loc": ".".join(str(part) for part in err["loc"]), "msg": err["msg"]}
            for err in e.errors()
        ]
        return ValidationReport(success=False, errors=errors)
    return ValidationReport(success=True, value=value)


class Envelope(BaseModel):
    model_config = ConfigDict(extra="forbid")


class LinkPath(BaseModel):
    linkId: str = Field(pattern=LINK_ID_PATTERN)


class DeleteLinkPath(BaseModel):
    link_id: str = Field(pattern=LINK_ID_PATTERN)


# ---------------------------------------------------------------------------
# Links
# ---------------------------------------------------------------------------


class CreateLinkBody(types.LinkCreateOptions):
    originalURL: str = Field(min_length=1)
    domain: str = Field(min_length=1)


class CreateLinkData(Envelope):
    body: CreateLinkBody


class CreateLinkResponse(types.Link):
    shortURL: str
    secureShortURL: str


class GetLinkData(Envelope):
    path: LinkPath


class DeleteLinkData(Envelope):
    path: DeleteLinkPath


class UpdateLinkData(Envelope):
    path: LinkPath
    body: types.LinkUpdateOptions


class ListLinksQuery(types.LinkListOptions):
    domain_id: int = Field(ge=1)
    limit: int | None = Field(default=None, ge=1, le=150)
    offset: int | None = Field(default=None, ge=0)


class ListLinksData(Envelope):
    query: ListLinksQuery


class BulkCreateLinksBody(BaseModel):
    domain: str = Field(min_length=1)
    links: list[types.LinkBulkCreateOptions] = Field(
        min_length=1,
        max_length=types.MAX_BULK_SIZE,
    )
    allowDuplicates: bool | None = None


class BulkCreateLinksData(Envelope):
    body: BulkCreateLinksBody


class ArchiveLinksBulkBody(BaseModel):
    link_ids: list[str] = Field(min_length=1, max_length=types.MAX_BULK_SIZE)


class ArchiveLinksBulkData(Envelope):
    body: ArchiveLinksBulkBody


# ---------------------------------------------------------------------------
# Domains
# ---------------------------------------------------------------------------


class CreateDomainBody(types.DomainCreateOptions):
    hostname: str = Field(min_length=1)


class CreateDomainData(Envelope):
    body: CreateDomainBody


# ---------------------------------------------------------------------------
# Country and region rules
# ---------------------------------------------------------------------------


class CreateLinkCountryData(Envelope):
    path: LinkPath
    body: types.LinkCountryCreateOptions


class CreateLinkRegionData(Envelope):
    path: LinkPath
    body: types.LinkRegionCreateOptions
