"""Unit tests for the Route 53 zone client and its XML parsers."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from stratus.cloud.connectors.route53 import ZoneAsyncClient, ZoneClient, name_equals
from stratus.cloud.connectors.route53.endpoints.parsers import ZonePageAdapter
from stratus.cloud.connectors.route53.endpoints.zones import bind_create_zone
from stratus.cloud.core.exceptions import ProviderError, ResourceNotFoundError, ValidationError
from stratus.cloud.models import ChangeStatus

NS = "https://route53.amazonaws.com/doc/2012-02-29/"


def hosted_zone(zone_id: str, name: str) -> str:
    return f"""
    <HostedZone>
      <Id>/hostedzone/{zone_id}</Id>
      <Name>{name}</Name>
      <CallerReference>ref-{zone_id}</CallerReference>
      <Config><Comment>zone {name}</Comment></Config>
      <ResourceRecordSetCount>3</ResourceRecordSetCount>
    </HostedZone>"""


def list_page(zones: list[tuple[str, str]], next_marker: str | None = None) -> str:
    truncated = "true" if next_marker else "false"
    marker = f"<NextMarker>{next_marker}</NextMarker>" if next_marker else ""
    body = "".join(hosted_zone(zone_id, name) for zone_id, name in zones)
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<ListHostedZonesResponse xmlns="{NS}">
  <HostedZones>{body}</HostedZones>
  <IsTruncated>{truncated}</IsTruncated>
  {marker}
  <MaxItems>100</MaxItems>
</ListHostedZonesResponse>"""


CHANGE_INFO = """
  <ChangeInfo>
    <Id>/change/C2682N5HXP0BZ4</Id>
    <Status>PENDING</Status>
    <SubmittedAt>2011-09-10T01:36:41.958Z</SubmittedAt>
  </ChangeInfo>"""

GET_ZONE = f"""<?xml version="1.0" encoding="UTF-8"?>
<GetHostedZoneResponse xmlns="{NS}">{hosted_zone("Z1PA6795UKMFR9", "example.com.")}
  <DelegationSet>
    <NameServers><NameServer>ns-1.awsdns-1.com</NameServer></NameServers>
  </DelegationSet>
</GetHostedZoneResponse>"""

CREATE_ZONE = f"""<?xml version="1.0" encoding="UTF-8"?>
<CreateHostedZoneResponse xmlns="{NS}">{hosted_zone("Z1PA6795UKMFR9", "example.com.")}{CHANGE_INFO}
  <DelegationSet>
    <NameServers>
      <NameServer>ns-2048.awsdns-64.com</NameServer>
      <NameServer>ns-2049.awsdns-65.net</NameServer>
    </NameServers>
  </DelegationSet>
</CreateHostedZoneResponse>"""

DELETE_ZONE = f"""<?xml version="1.0" encoding="UTF-8"?>
<DeleteHostedZoneResponse xmlns="{NS}">{CHANGE_INFO}
</DeleteHostedZoneResponse>"""

GET_CHANGE = f"""<?xml version="1.0" encoding="UTF-8"?>
<GetChangeResponse xmlns="{NS}">
  <ChangeInfo>
    <Id>/change/C2682N5HXP0BZ4</Id>
    <Status>INSYNC</Status>
    <SubmittedAt>2011-09-10T01:36:41.958Z</SubmittedAt>
  </ChangeInfo>
</GetChangeResponse>"""


@pytest.fixture
def client():
    return ZoneAsyncClient("AKID", "secret")


@pytest.mark.asyncio
async def test_list_zones(client):
    client._transport.get = AsyncMock(return_value=list_page([("Z1", "a."), ("Z2", "b.")]))

    page = await client.list_zones()

    assert [zone.id for zone in page.zones] == ["Z1", "Z2"]
    assert page.zones[0].comment == "zone a."
    assert page.zones[0].resource_record_set_count == 3
    assert page.next_marker is None
    call = client._transport.get.call_args
    assert call.args[0] == "/2012-02-29/hostedzone"
    assert call.kwargs["params"] is None
    assert call.kwargs["headers"]["X-Amzn-Authorization"].startswith(
        "AWS3-HTTPS AWSAccessKeyId=AKID,Algorithm=HmacSHA256,Signature="
    )
    assert "Date" in call.kwargs["headers"]


@pytest.mark.asyncio
async def test_list_zones_with_marker_and_max_items(client):
    client._transport.get = AsyncMock(return_value=list_page([("Z3", "c.")]))

    await client.list_zones(marker="Z2", max_items=10)

    assert client._transport.get.call_args.kwargs["params"] == {"marker": "Z2", "maxitems": 10}


@pytest.mark.asyncio
async def test_list_all_zones_follows_markers(client):
    client._transport.get = AsyncMock(
        side_effect=[
            list_page([("Z1", "a."), ("Z2", "b.")], next_marker="Z3"),
            list_page([("Z3", "c.")]),
        ]
    )

    zones = [zone async for zone in client.list_all_zones()]

    assert [zone.name for zone in zones] == ["a.", "b.", "c."]
    calls = client._transport.get.call_args_list
    assert calls[0].kwargs["params"] is None
    assert calls[1].kwargs["params"] == {"marker": "Z3"}


@pytest.mark.asyncio
async def test_get_zone(client):
    client._transport.get = AsyncMock(return_value=GET_ZONE)

    zone = await client.get_zone("Z1PA6795UKMFR9")

    assert zone.id == "Z1PA6795UKMFR9"
    assert zone.name == "example.com."
    assert zone.caller_reference == "ref-Z1PA6795UKMFR9"
    assert name_equals("example.com.")(zone)
    assert client._transport.get.call_args.args[0] == "/2012-02-29/hostedzone/Z1PA6795UKMFR9"


@pytest.mark.asyncio
async def test_get_zone_accepts_prefixed_id(client):
    client._transport.get = AsyncMock(return_value=GET_ZONE)
    await client.get_zone("/hostedzone/Z1PA6795UKMFR9")
    assert client._transport.get.call_args.args[0] == "/2012-02-29/hostedzone/Z1PA6795UKMFR9"


@pytest.mark.asyncio
async def test_get_zone_missing_returns_none(client):
    client._transport.get = AsyncMock(side_effect=ResourceNotFoundError("NoSuchHostedZone"))
    assert await client.get_zone("Z0") is None


@pytest.mark.asyncio
async def test_create_zone(client):
    client._transport.post = AsyncMock(return_value=CREATE_ZONE)

    new_zone = await client.create_zone("example.com.", "unique-ref", comment="hello")

    assert new_zone.zone.id == "Z1PA6795UKMFR9"
    assert new_zone.change.id == "C2682N5HXP0BZ4"
    assert new_zone.change.status == ChangeStatus.PENDING
    assert new_zone.change.submitted_at == datetime(2011, 9, 10, 1, 36, 41, 958000, tzinfo=UTC)
    assert new_zone.name_servers == ["ns-2048.awsdns-64.com", "ns-2049.awsdns-65.net"]

    call = client._transport.post.call_args
    assert call.args[0] == "/2012-02-29/hostedzone"
    assert call.kwargs["headers"]["Content-Type"] == "application/xml"
    root = ET.fromstring(call.kwargs["data"])
    assert root.tag == f"{{{NS}}}CreateHostedZoneRequest"
    assert root.findtext(f"{{{NS}}}Name") == "example.com."
    assert root.findtext(f"{{{NS}}}CallerReference") == "unique-ref"
    assert root.findtext(f"{{{NS}}}HostedZoneConfig/{{{NS}}}Comment") == "hello"


def test_bind_create_zone_without_comment():
    root = ET.fromstring(bind_create_zone({"name": "a.", "caller_reference": "r"}))
    assert root.find(f"{{{NS}}}HostedZoneConfig") is None


@pytest.mark.asyncio
async def test_delete_zone(client):
    client._transport.delete = AsyncMock(return_value=DELETE_ZONE)

    change = await client.delete_zone("Z1PA6795UKMFR9")

    assert change.id == "C2682N5HXP0BZ4"
    assert client._transport.delete.call_args.args[0] == "/2012-02-29/hostedzone/Z1PA6795UKMFR9"


@pytest.mark.asyncio
async def test_delete_zone_missing_returns_none(client):
    client._transport.delete = AsyncMock(side_effect=ResourceNotFoundError("NoSuchHostedZone"))
    assert await client.delete_zone("Z0") is None


@pytest.mark.asyncio
async def test_delete_zone_not_empty_propagates(client):
    client._transport.delete = AsyncMock(
        side_effect=ProviderError("HostedZoneNotEmpty", status_code=400)
    )
    with pytest.raises(ProviderError, match="HostedZoneNotEmpty"):
        await client.delete_zone("Z1")


@pytest.mark.asyncio
async def test_get_change(client):
    client._transport.get = AsyncMock(return_value=GET_CHANGE)

    change = await client.get_change("/change/C2682N5HXP0BZ4")

    assert change.status == ChangeStatus.INSYNC
    assert client._transport.get.call_args.args[0] == "/2012-02-29/change/C2682N5HXP0BZ4"


def test_malformed_document_raises_validation_error():
    with pytest.raises(ValidationError, match="malformed"):
        ZonePageAdapter().parse("<ListHostedZonesResponse>", {})
    with pytest.raises(ValidationError, match="empty"):
        ZonePageAdapter().parse(None, {})


def test_sync_client_drains_all_zones():
    with ZoneClient("AKID", "secret") as client:
        client.async_client._transport.get = AsyncMock(
            side_effect=[list_page([("Z1", "a.")], next_marker="Z2"), list_page([("Z2", "b.")])]
        )
        zones = client.list_all_zones()
    assert [zone.id for zone in zones] == ["Z1", "Z2"]
