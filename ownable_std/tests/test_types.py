from __future__ import annotations

import json

import pytest

from ownable_std.types import (NFT, UINT128_MAX, ExternalEventMsg,
                               InfoResponse, Metadata, OwnableInfo)


def test_nft_id_is_decimal_string_on_the_wire():
    nft = NFT(network="eip155:1", id=UINT128_MAX, address="0x341")
    d = nft.to_dict()
    assert d == {
        "network": "eip155:1",
        "id": "340282366920938463463374607431768211455",
        "address": "0x341",
        "lock_service": None,
    }
    assert NFT.from_dict(json.loads(json.dumps(d))) == nft


@pytest.mark.parametrize("bad, exc", [(-1, ValueError), (UINT128_MAX + 1, ValueError), (True, TypeError), ("1", TypeError)])
def test_nft_id_range(bad, exc):
    with pytest.raises(exc):
        NFT(network="eip155:1", id=bad, address="0x0")


def test_info_response_roundtrip():
    info = InfoResponse(
        owner="3MtHYnCkd3oFZr21yb2vEdngcSGXvuNNCq2",
        issuer="3MtHYnCkd3oFZr21yb2vEdngcSGXvuNNCq2",
        nft=NFT(network="eip155:1", id=7, address="0xabc", lock_service="lock"),
        ownable_type="potion",
    )
    assert InfoResponse.from_dict(info.to_dict()) == info
    assert InfoResponse.from_dict({"owner": "a", "issuer": "b"}).nft is None


def test_ownable_info_defaults():
    oi = OwnableInfo(owner="a", issuer="b")
    assert oi.to_dict() == {"owner": "a", "issuer": "b", "ownable_type": None}
    assert OwnableInfo.from_dict(oi.to_dict()) == oi


def test_metadata_ignores_unknown_keys():
    md = Metadata.from_dict({"name": "Potion", "image": "ipfs://x", "extra": 1})
    assert md.name == "Potion" and md.image == "ipfs://x"
    assert md.to_dict()["description"] is None
    assert set(md.to_dict()) == {
        "image",
        "image_data",
        "external_url",
        "description",
        "name",
        "background_color",
        "animation_url",
        "youtube_url",
    }


def test_external_event_msg():
    msg = ExternalEventMsg.from_dict(
        {"network": "eip155:1", "event_type": "lock", "attributes": {"token_id": 5}}
    )
    assert msg.attributes == {"token_id": "5"}
    assert msg.to_dict() == {
        "network": "eip155:1",
        "event_type": "lock",
        "attributes": {"token_id": "5"},
    }
    assert ExternalEventMsg.from_dict({"event_type": "x"}).network is None
