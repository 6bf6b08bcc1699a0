"""Typed request parameters for the Last.fm user methods."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime

from .errors import InvalidParameterError

RESERVED_QUERY_KEYS = frozenset({"method", "user", "api_key", "format"})


def _datetime_to_epoch_seconds(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return int(value.astimezone(UTC).timestamp())


def _require_datetime(key: str, value: object) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    raise InvalidParameterError(f"{key!r} must be a datetime, got {type(value).__name__}")


@dataclass(slots=True, frozen=True)
class RequestParams:
    """Parameters of a single ``user.*`` request.

    ``limit`` is forwarded to Last.fm as given; the API decides what it accepts.
    ``extra`` carries any further endpoint-specific keys verbatim.
    """

    username: str
    limit: int | str | None = None
    page: int | None = None
    since: datetime | None = None
    until: datetime | None = None
    extended: bool = False
    extra: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.username, str) or not self.username.strip():
            raise InvalidParameterError("A non-empty 'username' is required")
        object.__setattr__(self, "username", self.username.strip())
        reserved = RESERVED_QUERY_KEYS.intersection(self.extra)
        if reserved:
            names = ", ".join(sorted(reserved))
            raise InvalidParameterError(f"Reserved query parameters cannot be overridden: {names}")

    @classmethod
    def coerce(cls, value: RequestParams | Mapping[str, object] | str | None) -> RequestParams:
        """Build parameters from a bare username, a mapping or an existing instance."""

        if isinstance(value, RequestParams):
            return value
        if isinstance(value, str):
            return cls(username=value)
        if isinstance(value, Mapping):
            return cls._from_mapping(value)
        if value is None:
            raise InvalidParameterError("A non-empty 'username' is required")
        raise InvalidParameterError(
            f"Expected a username or a parameter mapping, got {type(value).__name__}"
        )

    @classmethod
    def _from_mapping(cls, value: Mapping[str, object]) -> RequestParams:
        data = dict(value)
        username = data.pop("username", None)
        if not isinstance(username, str):
            raise InvalidParameterError("A non-empty 'username' is required")

        limit = data.pop("limit", None)
        if limit is not None and not isinstance(limit, int | str):
            msg = f"'limit' must be an int or str, got {type(limit).__name__}"
            raise InvalidParameterError(msg)
        page = data.pop("page", None)
        if page is not None and not isinstance(page, int):
            raise InvalidParameterError(f"'page' must be an int, got {type(page).__name__}")

        return cls(
            username=username,
            limit=limit,
            page=page,
            since=_require_datetime("since", data.pop("since", None)),
            until=_require_datetime("until", data.pop("until", None)),
            extended=data.pop("extended", False) in (True, "1", "true"),
            extra={key: str(item) for key, item in data.items() if item is not None},
        )

    def with_limit(self, limit: int | str | None) -> RequestParams:
        return replace(self, limit=limit)

    def optional_query(self) -> dict[str, str]:
        """Query entries beyond ``method``, ``user``, ``api_key`` and ``format``."""

        query: dict[str, str] = {}
        if self.limit is not None:
            query["limit"] = str(self.limit)
        if self.page is not None:
            query["page"] = str(self.page)
        if self.since is not None:
            query["from"] = str(_datetime_to_epoch_seconds(self.since))
        if self.until is not None:
            query["to"] = str(_datetime_to_epoch_seconds(self.until))
        if self.extended:
            query["extended"] = "1"
        query.update(self.extra)
        return query
