"""Dataclasses mirroring the Nike+ activity JSON schema.

Each model decodes from the camelCase wire dictionary with ``from_dict`` and
encodes back with ``to_dict``. Keys the model does not know about are kept in
``extra`` so re-encoding a decoded body reproduces it. Fields that are absent
(or ``null``) on the wire are ``None`` and are left out when encoding.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

JSONObj = Dict[str, Any]

_NUMBER: Tuple[Type[Any], ...] = (int, float)


def _expect_mapping(data: Any, context: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{context} must be a JSON object, got {type(data).__name__}")
    return data


def _field(
    data: Mapping[str, Any],
    key: str,
    expected: Tuple[Type[Any], ...],
    context: str,
) -> Any:
    value = data.get(key)
    if value is None:
        return None
    # bool is an int subclass; only accept it where a bool is expected.
    if isinstance(value, bool) and bool not in expected:
        raise ValueError(f"{context}.{key} has unexpected type bool")
    if not isinstance(value, expected):
        raise ValueError(
            f"{context}.{key} has unexpected type {type(value).__name__}"
        )
    return value


def _extras(data: Mapping[str, Any], known: Tuple[str, ...]) -> JSONObj:
    return {key: value for key, value in data.items() if key not in known}


def _compact(pairs: List[Tuple[str, Any]], extra: JSONObj) -> JSONObj:
    result: JSONObj = {key: value for key, value in pairs if value is not None}
    result.update(extra)
    return result


@dataclass(slots=True)
class MetricSummary:
    """Totals reported for one activity."""

    calories: float | None = None
    fuel: float | None = None
    distance: float | None = None
    steps: int | None = None
    duration: str | None = None
    extra: JSONObj = field(default_factory=dict)

    _KEYS = ("calories", "fuel", "distance", "steps", "duration")

    @classmethod
    def from_dict(cls, data: Any) -> "MetricSummary":
        data = _expect_mapping(data, "metricSummary")
        ctx = "metricSummary"
        return cls(
            calories=_field(data, "calories", _NUMBER, ctx),
            fuel=_field(data, "fuel", _NUMBER, ctx),
            distance=_field(data, "distance", _NUMBER, ctx),
            steps=_field(data, "steps", (int,), ctx),
            duration=_field(data, "duration", (str,), ctx),
            extra=_extras(data, cls._KEYS),
        )

    def to_dict(self) -> JSONObj:
        return _compact(
            [
                ("calories", self.calories),
                ("fuel", self.fuel),
                ("distance", self.distance),
                ("steps", self.steps),
                ("duration", self.duration),
            ],
            self.extra,
        )


@dataclass(slots=True)
class ActivityTag:
    tag_type: str | None = None
    tag_value: str | None = None
    extra: JSONObj = field(default_factory=dict)

    _KEYS = ("tagType", "tagValue")

    @classmethod
    def from_dict(cls, data: Any) -> "ActivityTag":
        data = _expect_mapping(data, "tag")
        return cls(
            tag_type=_field(data, "tagType", (str,), "tag"),
            tag_value=_field(data, "tagValue", (str,), "tag"),
            extra=_extras(data, cls._KEYS),
        )

    def to_dict(self) -> JSONObj:
        return _compact(
            [("tagType", self.tag_type), ("tagValue", self.tag_value)], self.extra
        )


@dataclass(slots=True)
class ActivityMetric:
    """One sampled series (distance, heart rate, ...) recorded at a fixed interval."""

    metric_type: str | None = None
    interval_metric: float | None = None
    interval_unit: str | None = None
    values: List[Any] | None = None
    extra: JSONObj = field(default_factory=dict)

    _KEYS = ("metricType", "intervalMetric", "intervalUnit", "values")

    @classmethod
    def from_dict(cls, data: Any) -> "ActivityMetric":
        data = _expect_mapping(data, "metric")
        ctx = "metric"
        values = _field(data, "values", (list,), ctx)
        return cls(
            metric_type=_field(data, "metricType", (str,), ctx),
            interval_metric=_field(data, "intervalMetric", _NUMBER, ctx),
            interval_unit=_field(data, "intervalUnit", (str,), ctx),
            values=list(values) if values is not None else None,
            extra=_extras(data, cls._KEYS),
        )

    def to_dict(self) -> JSONObj:
        return _compact(
            [
                ("metricType", self.metric_type),
                ("intervalMetric", self.interval_metric),
                ("intervalUnit", self.interval_unit),
                ("values", list(self.values) if self.values is not None else None),
            ],
            self.extra,
        )


@dataclass(slots=True)
class Activity:
    """A single recorded fitness session."""

    activity_id: str | None = None
    activity_type: str | None = None
    start_time: str | None = None
    activity_time_zone: str | None = None
    status: str | None = None
    device_type: str | None = None
    metric_summary: MetricSummary | None = None
    tags: List[ActivityTag] | None = None
    metrics: List[ActivityMetric] | None = None
    is_gps_activity: bool | None = None
    extra: JSONObj = field(default_factory=dict)

    _KEYS = (
        "activityId",
        "activityType",
        "startTime",
        "activityTimeZone",
        "status",
        "deviceType",
        "metricSummary",
        "tags",
        "metrics",
        "isGpsActivity",
    )

    @classmethod
    def from_dict(cls, data: Any) -> "Activity":
        data = _expect_mapping(data, "activity")
        ctx = "activity"
        summary = data.get("metricSummary")
        tags = _field(data, "tags", (list,), ctx)
        metrics = _field(data, "metrics", (list,), ctx)
        return cls(
            activity_id=_field(data, "activityId", (str,), ctx),
            activity_type=_field(data, "activityType", (str,), ctx),
            start_time=_field(data, "startTime", (str,), ctx),
            activity_time_zone=_field(data, "activityTimeZone", (str,), ctx),
            status=_field(data, "status", (str,), ctx),
            device_type=_field(data, "deviceType", (str,), ctx),
            metric_summary=(
                MetricSummary.from_dict(summary) if summary is not None else None
            ),
            tags=[ActivityTag.from_dict(t) for t in tags] if tags is not None else None,
            metrics=(
                [ActivityMetric.from_dict(m) for m in metrics]
                if metrics is not None
                else None
            ),
            is_gps_activity=_field(data, "isGpsActivity", (bool,), ctx),
            extra=_extras(data, cls._KEYS),
        )

    def to_dict(self) -> JSONObj:
        return _compact(
            [
                ("activityId", self.activity_id),
                ("activityType", self.activity_type),
                ("startTime", self.start_time),
                ("activityTimeZone", self.activity_time_zone),
                ("status", self.status),
                ("deviceType", self.device_type),
                (
                    "metricSummary",
                    self.metric_summary.to_dict() if self.metric_summary else None,
                ),
                (
                    "tags",
                    [t.to_dict() for t in self.tags] if self.tags is not None else None,
                ),
                (
                    "metrics",
                    (
                        [m.to_dict() for m in self.metrics]
                        if self.metrics is not None
                        else None
                    ),
                ),
                ("isGpsActivity", self.is_gps_activity),
            ],
            self.extra,
        )


@dataclass(slots=True)
class Paging:
    """Relative links to the neighbouring pages of an activity list."""

    next: str | None = None
    previous: str | None = None
    extra: JSONObj = field(default_factory=dict)

    _KEYS = ("next", "previous")

    @classmethod
    def from_dict(cls, data: Any) -> "Paging":
        data = _expect_mapping(data, "paging")
        return cls(
            next=_field(data, "next", (str,), "paging"),
            previous=_field(data, "previous", (str,), "paging"),
            extra=_extras(data, cls._KEYS),
        )

    def to_dict(self) -> JSONObj:
        return _compact(
            [("next", self.next), ("previous", self.previous)], self.extra
        )


@dataclass(slots=True)
class Activities:
    """One page of activities exactly as returned by the list endpoints."""

    data: List[Activity] = field(default_factory=list)
    paging: Paging | None = None
    extra: JSONObj = field(default_factory=dict)

    _KEYS = ("data", "paging")

    @classmethod
    def from_dict(cls, data: Any) -> "Activities":
        data = _expect_mapping(data, "activities")
        items = _field(data, "data", (list,), "activities") or []
        paging = data.get("paging")
        return cls(
            data=[Activity.from_dict(item) for item in items],
            paging=Paging.from_dict(paging) if paging is not None else None,
            extra=_extras(data, cls._KEYS),
        )

    def to_dict(self) -> JSONObj:
        result: JSONObj = {"data": [a.to_dict() for a in self.data]}
        if self.paging is not None:
            result["paging"] = self.paging.to_dict()
        result.update(self.extra)
        return result

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self):
        return iter(self.data)


@dataclass(slots=True)
class ErrorEnvelope:
    """Structured error object ``{result, errorCode, errorMessage}``.

    A missing or ``null`` ``errorMessage`` decodes to an empty message.
    """

    error_message: str = ""
    error_code: Optional[str] = None
    result: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "ErrorEnvelope":
        data = _expect_mapping(data, "error envelope")
        ctx = "error envelope"
        code = _field(data, "errorCode", (str, int), ctx)
        result = _field(data, "result", (str, int), ctx)
        message = _field(data, "errorMessage", (str,), ctx)
        return cls(
            error_message=message if message is not None else "",
            error_code=str(code) if code is not None else None,
            result=str(result) if result is not None else None,
        )
