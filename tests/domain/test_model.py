from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from fedsync.domain.model import (
    FederationConfig,
    Identifiable,
    LocalResource,
    RemoteResource,
    Timestamped,
    from_epoch_millis,
    parse_iso_datetime,
    to_epoch_millis,
)


def test_epoch_millis_round_trip_for_known_instant() -> None:
    instant = datetime(2024, 5, 1, 12, 30, 15, 123_000, tzinfo=UTC)

    millis = to_epoch_millis(instant)

    assert millis == 1_714_566_615_123
    assert from_epoch_millis(millis) == instant


def test_epoch_millis_respects_offsets() -> None:
    plus_two = timezone(timedelta(hours=2))

    assert to_epoch_millis(datetime(1970, 1, 1, 2, tzinfo=plus_two)) == 0


def test_epoch_millis_rejects_naive_datetimes() -> None:
    with pytest.raises(ValueError, match="timezone information"):
        to_epoch_millis(datetime(2024, 1, 1))  # noqa: DTZ001


def test_federation_config_last_sync_millis() -> None:
    assert FederationConfig(federation_id="fed").last_sync_millis is None
    config = FederationConfig(
        federation_id="fed",
        last_sync_time=datetime(1970, 1, 1, 0, 0, 1, tzinfo=UTC),
    )
    assert config.last_sync_millis == 1_000


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2025-01-02T00:00:00Z", datetime(2025, 1, 2, tzinfo=UTC)),
        ("2025-01-01T03:00:00+03:00", datetime(2025, 1, 1, tzinfo=UTC)),
        ("2025-01-01T03:00:00", datetime(2025, 1, 1, 3, tzinfo=UTC)),
    ],
)
def test_parse_iso_datetime(value: str, expected: datetime) -> None:
    assert parse_iso_datetime(value) == expected


def test_parse_iso_datetime_rejects_garbage() -> None:
    with pytest.raises(ValueError, match="Invalid ISO timestamp"):
        parse_iso_datetime("yesterday")


def test_resources_satisfy_capabilities() -> None:
    remote = RemoteResource(id="a", updated_at=10)
    local = LocalResource(id="a", tenant_id="acme")

    assert isinstance(remote, Identifiable)
    assert isinstance(remote, Timestamped)
    assert isinstance(local, Identifiable)
