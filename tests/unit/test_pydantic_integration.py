"""
Tests for using metadata types as pydantic model fields.
"""

from __future__ import annotations

from pydantic import BaseModel

from sri_metadata import IntegrityMetadata, IntegrityMetadataSet

SHA256 = "sha256-MV9b23bQeMQ7isAGTkoBZGErH853yGk0W/yUx1iU7dM="
SHA512 = "sha512-wVJ82JPBJHc9gRkRlwyP5uhX1t9dySJr2KFgYUwM2WOk3eorlLt9NgIe+dhl1c6ilKgt1JoLsmn1H256V/eUIQ=="


class Asset(BaseModel):
    url: str
    integrity: IntegrityMetadataSet
    primary: IntegrityMetadata | None = None


def test_string_input_is_coerced() -> None:
    asset = Asset(url="/app.js", integrity=f"{SHA256} {SHA512}", primary=SHA256)

    assert isinstance(asset.integrity, IntegrityMetadataSet)
    assert asset.integrity.size == 2
    assert asset.primary == IntegrityMetadata(SHA256)


def test_malformed_metadata_is_not_a_validation_error() -> None:
    asset = Asset(url="/app.js", integrity="sha1-lDpwLQbzRZmu4fjajvn3KWAx1pk=")

    assert asset.integrity.size == 0


def test_serializes_canonical_strings() -> None:
    asset = Asset(url="/app.js", integrity=[SHA256, SHA512], primary=f" {SHA512} ")

    assert asset.model_dump() == {
        "url": "/app.js",
        "integrity": f"{SHA256} {SHA512}",
        "primary": SHA512,
    }
    assert Asset.model_validate_json(asset.model_dump_json()) == asset
