"""Wire types for the Short.io API.

Pydantic models describing what the API accepts and returns. Field names are
the exact JSON keys used on the wire, so a model dumped with
``model_dump(mode="json")`` is a valid request body and a decoded response
validates without any renaming.

Response models allow unknown fields since the remote schema grows over
time. Option models only carry what the caller set: bodies are dumped with
``exclude_unset`` so no default ever reaches the service.
"""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, RootModel

# Bulk endpoints refuse larger batches.
MAX_BULK_SIZE = 1000


class ApiModel(BaseModel):
    """Base for response shapes returned by the API."""

    model_config = ConfigDict(extra="allow")


class Options(BaseModel):
    """Base for caller-supplied request options."""

    model_config = ConfigDict(extra="allow")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class LinkType(StrEnum):
    """Path generation strategy of a domain."""

    INCREMENT = "increment"
    RANDOM = "random"
    SECURE = "secure"
    FOUR_CHAR = "four-char"
    EIGHT_CHAR = "eight-char"
    TEN_CHAR = "ten-char"


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"


class Period(StrEnum):
    CUSTOM = "custom"
    TODAY = "today"
    YESTERDAY = "yesterday"
    TOTAL = "total"
    WEEK = "week"
    MONTH = "month"
    LAST_MONTH = "lastmonth"
    LAST_7 = "last7"
    LAST_30 = "last30"


class Interval(StrEnum):
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class Column(StrEnum):
    """Click attribute usable as a statistics grouping column."""

    PATH = "path"
    METHOD = "method"
    STATUS = "st"
    PROTO = "proto"
    HUMAN = "human"
    BROWSER = "browser"
    BROWSER_VERSION = "browser_version"
    COUNTRY = "country"
    CITY = "city"
    SOCIAL = "social"
    REFHOST = "refhost"
    OS = "os"
    UTM_SOURCE = "utm_source"
    UTM_MEDIUM = "utm_medium"
    UTM_CAMPAIGN = "utm_campaign"
    GOAL_COMPLETED = "goal_completed"
    AB_PATH = "ab_path"


# ---------------------------------------------------------------------------
# Common response bodies
# ---------------------------------------------------------------------------


class SuccessResBody(ApiModel):
    success: bool | None = None


class ErrorResBody(ApiModel):
    """Error body as returned by the API.

    The service is inconsistent about its error shape: depending on the
    endpoint it sends ``{statusCode, message}``, ``{error}`` or a mix.
    Every field is therefore optional.
    """

    statusCode: int | None = None
    message: str | None = None
    error: str | None = None
    success: bool | None = None


class StatusResBody(ApiModel):
    status: str | int | None = None


# ---------------------------------------------------------------------------
# Links
# ---------------------------------------------------------------------------


class Link(ApiModel):
    """A short link record."""

    idString: str
    path: str
    originalURL: str
    shortURL: str | None = None
    secureShortURL: str | None = None
    DomainId: int | None = None
    OwnerId: int | None = None
    createdAt: str | None = None
    updatedAt: str | None = None
    expiresAt: str | int | None = None
    cloaking: bool | None = None
    title: str | None = None
    expiredURL: str | None = None
    ttl: str | int | None = None
    source: str | None = None
    duplicate: bool | None = None
    archived: bool | None = None
    redirectType: str | int | None = None
    clicksLimit: int | None = None
    passwordContact: bool | None = None
    hasPassword: bool | None = None
    password: str | None = None
    tags: list[str] | None = None
    androidURL: str | None = None
    iphoneURL: str | None = None
    utmSource: str | None = None
    utmMedium: str | None = None
    utmCampaign: str | None = None
    utmTerm: str | None = None
    utmContent: str | None = None


class LinkUser(ApiModel):
    id: int | None = None
    email: str | None = None
    name: str | None = None
    photoURL: str | None = None


class LinkWithUser(Link):
    """Link as returned by list and update, with its owner attached."""

    User: LinkUser | None = None
    email: str | None = None
    name: str | None = None
    photoURL: str | None = None


class LinksAndCount(ApiModel):
    links: list[LinkWithUser] = Field(default_factory=list)
    count: int | None = None
    nextPageToken: str | None = None
    hasMore: bool | None = None


class BulkCreatedLink(Link):
    success: bool | None = None


class DeleteLinkRes(SuccessResBody):
    idString: str | None = None


class UpdateLinkErrorRes(ErrorResBody):
    """Update error pointing at the offending input field."""

    field: str | None = None


class LinkCountry(ApiModel):
    id: str | int | None = None
    LinkIdString: str | None = None
    country: str
    originalURL: str
    createdAt: datetime | str | None = None


class LinkRegion(ApiModel):
    id: str | int | None = None
    LinkIdString: str | None = None
    country: str
    region: str
    originalURL: str
    name: str | None = None
    createdAt: datetime | str | None = None


class Region(ApiModel):
    region: str
    name: str | None = None


class LinkOpenGraphData(RootModel[list[tuple[str, str]]]):
    """OpenGraph properties of a link as ``[property, value]`` pairs."""


# ---------------------------------------------------------------------------
# Link options
# ---------------------------------------------------------------------------


class LinkListOptions(Options):
    """Query options for listing links. ``domain_id`` is passed separately."""

    limit: int | None = None
    offset: int | None = None
    idString: str | None = None
    createdAt: str | None = None
    beforeDate: str | None = None
    afterDate: str | None = None
    dateSortOrder: SortOrder | None = None
    pageToken: str | None = None
    folderId: str | None = None


class LinkCreateOptions(Options):
    path: str | None = None
    title: str | None = None
    tags: list[str] | None = None
    allowDuplicates: bool | None = None
    cloaking: bool | None = None
    password: str | None = None
    redirectType: int | str | None = None
    expiresAt: int | str | None = None
    expiredURL: str | None = None
    ttl: int | str | None = None
    createdAt: int | str | None = None
    source: str | None = None
    androidURL: str | None = None
    iphoneURL: str | None = None
    clicksLimit: int | None = None
    folderId: str | None = None


class LinkUpdateOptions(LinkCreateOptions):
    originalURL: str | None = None
    archived: bool | None = None
    icon: str | None = None
    splitURL: str | None = None
    splitPercent: int | None = None
    passwordContact: bool | None = None
    utmSource: str | None = None
    utmMedium: str | None = None
    utmCampaign: str | None = None
    utmTerm: str | None = None
    utmContent: str | None = None


class LinkBulkCreateOptions(LinkCreateOptions):
    """One entry of a bulk create request."""

    originalURL: str


class GetLinkQRCodeOptions(Options):
    type: str | None = None
    size: int | None = None
    color: str | None = None
    backgroundColor: str | None = None


class LinkCountryCreateOptions(Options):
    country: str
    originalURL: str


class LinkRegionCreateOptions(Options):
    country: str
    region: str
    originalURL: str


# ---------------------------------------------------------------------------
# Domains
# ---------------------------------------------------------------------------


class Domain(ApiModel):
    """A hostname registered for link shortening."""

    id: int
    hostname: str
    title: str | None = None
    unicodeHostname: str | None = None
    isFavorite: bool | None = None
    faviconURL: str | None = None
    segmentKey: str | None = None
    hasFavicon: bool | None = None
    linkType: LinkType | str | None = None
    state: str | None = None
    redirect404: str | None = None
    hideReferer: bool | None = None
    hideVisitorIp: bool | None = None
    caseSensitive: bool | None = None
    exportEnabled: bool | None = None
    cloaking: bool | None = None
    incrementCounter: str | None = None
    setupType: str | None = None
    httpsLinks: bool | None = None
    integrationGA: str | None = None
    integrationFB: str | None = None
    integrationAdroll: str | None = None
    integrationGTM: str | None = None
    webhookURL: str | None = None
    httpsLevel: str | None = None
    robots: str | None = None
    provider: str | None = None
    purgeExpiredLinks: bool | None = None
    lastPurgeDate: str | None = None
    createdAt: str | None = None
    updatedAt: str | None = None
    clientStorage: str | None = None
    TeamId: int | None = None


class DomainCreateOptions(Options):
    caseSensitive: bool | None = None
    hideReferer: bool | None = None
    httpsLinks: bool | None = None
    linkType: LinkType | None = None
    redirect404: str | None = None


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------


class StartEndDate(Options):
    startDate: str | None = None
    endDate: str | None = None


class GetStatisticsOptions(StartEndDate):
    period: Period | None = None
    tzOffset: int | None = None
    clicksChartInterval: Interval | None = None


class FilterOptions(Options):
    """Click filter used by the ``include``/``exclude`` statistics options."""

    paths: list[str] | None = None
    countries: list[str] | None = None
    dt: tuple[datetime, datetime] | None = None
    browsers: list[str] | None = None
    human: bool | None = None
    socials: list[str] | None = None
    browserVersions: list[str] | None = None
    statuses: list[int] | None = None
    methods: list[str] | None = None
    protos: list[str] | None = None
    refhosts: list[str] | None = None
    utmSources: list[str] | None = None
    utmMediums: list[str] | None = None
    utmCampaigns: list[str] | None = None


class IncludeExcludeOptions(Options):
    include: FilterOptions | None = None
    exclude: FilterOptions | None = None


class FilteredStatisticsOptions(GetStatisticsOptions, IncludeExcludeOptions):
    """Statistics options for the POST variants, which accept filters."""


class TopByColumnOptions(StartEndDate, IncludeExcludeOptions):
    limit: int | None = None
    period: Period | None = None
    tzOffset: int | None = None
    prefix: str | None = None


class TopByIntervalOptions(StartEndDate, IncludeExcludeOptions):
    limit: int | None = None
    interval: Interval | None = None
    period: Period | None = None
    tzOffset: int | None = None


class GetLastClicksOptions(StartEndDate, IncludeExcludeOptions):
    limit: int | None = None
    beforeDate: str | None = None
    afterDate: str | None = None
    tzOffset: int | None = None
    period: Period | None = None


class LinkClicksOptions(StartEndDate):
    """Options for link clicks lookup. ``ids`` is a comma separated list."""

    ids: str


class PathDate(Options):
    path: str
    createdAt: str


class ClicksScore(ApiModel):
    score: int | float


class CountryScore(ClicksScore):
    country: str
    countryName: str | None = None


class CityScore(ClicksScore):
    city: int | str
    name: str | None = None


class BrowserScore(ClicksScore):
    browser: str
    browserName: str | None = None


class OSScore(ClicksScore):
    os: str


class SocialScore(ClicksScore):
    social: str
    socialName: str | None = None


class RefererScore(ClicksScore):
    referer: str


class DatePoint(ApiModel):
    x: str
    y: int | float


class Dataset(ApiModel):
    data: list[DatePoint] = Field(default_factory=list)


class ClickStatistics(ApiModel):
    datasets: list[Dataset] = Field(default_factory=list)


class IntervalResponse(ApiModel):
    startDate: str | None = None
    endDate: str | None = None
    prevStartDate: str | None = None
    prevEndDate: str | None = None


class LinkStatistics(ApiModel):
    totalClicks: int | None = None
    humanClicks: int | None = None
    humanClicksChange: str | None = None
    totalClicksChange: str | None = None
    clickStatistics: ClickStatistics | None = None
    interval: IntervalResponse | None = None
    referer: list[RefererScore] = Field(default_factory=list)
    social: list[SocialScore] = Field(default_factory=list)
    browser: list[BrowserScore] = Field(default_factory=list)
    os: list[OSScore] = Field(default_factory=list)
    city: list[CityScore] = Field(default_factory=list)
    country: list[CountryScore] = Field(default_factory=list)


class DomainStatistics(ApiModel):
    clicks: int | None = None
    humanClicks: int | None = None
    links: int | None = None
    linksChange: str | None = None
    linksChangePositive: bool | None = None
    clicksPerLink: str | None = None
    clicksPerLinkChange: str | None = None
    humanClicksPerLink: str | None = None
    prevClicksChange: str | None = None
    humanClicksChange: str | None = None
    humanClicksChangePositive: bool | None = None
    interval: IntervalResponse | None = None
    clickStatistics: ClickStatistics | None = None
    country: list[CountryScore] = Field(default_factory=list)
    city: list[CityScore] = Field(default_factory=list)
    referer: list[RefererScore] = Field(default_factory=list)
    social: list[SocialScore] = Field(default_factory=list)
    browser: list[BrowserScore] = Field(default_factory=list)
    os: list[OSScore] = Field(default_factory=list)
    utm_medium: list[dict[str, str | int | float]] = Field(default_factory=list)
    utm_source: list[dict[str, str | int | float]] = Field(default_factory=list)
    utm_campaign: list[dict[str, str | int | float]] = Field(default_factory=list)


class TopColumnRes(ApiModel):
    score: int | float
    column: str | int | bool | None = None
    displayName: str | None = None


class IntervalScore(ApiModel):
    column: str | None = None
    score: str | int | float


class TopByIntervalRes(ApiModel):
    date: str
    statistics: list[IntervalScore] = Field(default_factory=list)


class LastClick(ApiModel):
    """A single raw click record."""

    host: str | None = None
    path: str | None = None
    lcpath: str | None = None
    dt: str | None = None
    method: str | None = None
    url: str | None = None
    st: int | None = None
    ip: str | None = None
    proto: str | None = None
    ref: str | None = None
    ua: str | None = None
    human: bool | None = None
    browser: str | None = None
    browser_version: str | None = None
    country: str | None = None
    city: str | None = None
    social: str | None = None
    refhost: str | None = None
    os: str | None = None
    utm_source: str | None = None
    utm_medium: str | None = None
    utm_campaign: str | None = None
    goal_completed: bool | None = None
    ab_path: str | None = None


class LastClicksRes(ApiModel):
    clicks: list[LastClick] = Field(default_factory=list)


class LinkClicks(RootModel[dict[str, int]]):
    """Click counts keyed by link id string."""


class PathClicks(RootModel[dict[str, int]]):
    """Click counts keyed by link path."""
