"""Client configuration — immutable settings for the S3 backend."""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    import boto3
    from botocore.config import Config

AES256: str = "AES256"
INTELLIGENT_TIERING: str = "INTELLIGENT_TIERING"


@dataclasses.dataclass(frozen=True)
class ClientConfig:
    """Settings that shape every S3 call made by a :class:`~pathio.Client`.

    Local paths ignore this configuration entirely.

    :param region: Bucket region. Empty means look the region up per call.
    :param disable_encryption: Omit server-side encryption on writes.
    :param storage_class: S3 storage class for writes (e.g.
        ``INTELLIGENT_TIERING``). ``None`` leaves it to the bucket default.
    :param profile_name: Named AWS profile used when no ``session`` is given.
    :param session: A ``boto3.session.Session`` used verbatim for every call.
    :param botocore_config: Transport options. Path-style addressing is
        always layered on top.
    :param client_options: Extra keyword arguments for ``session.client``
        (e.g. ``endpoint_url``, ``aws_access_key_id``). Stored as a
        read-only copy and left out of the hash.
    """

    region: str = ""
    disable_encryption: bool = False
    storage_class: Optional[str] = None
    profile_name: Optional[str] = None
    session: Optional[boto3.session.Session] = None
    botocore_config: Optional[Config] = None
    client_options: Mapping[str, Any] = dataclasses.field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "client_options", types.MappingProxyType(dict(self.client_options)))

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> ClientConfig:
        """Construct from a plain dict (e.g. parsed TOML/JSON).

        Only plain values are accepted; sessions and botocore configs must be
        passed to the constructor directly.
        """
        known = {"region", "disable_encryption", "storage_class", "profile_name", "client_options"}
        unknown = sorted(set(data) - known)
        if unknown:
            msg = f"Unknown client config keys: {unknown}"
            raise ValueError(msg)

        client_options = data.get("client_options", {})
        if not isinstance(client_options, dict):
            msg = "Expected 'client_options' to be a dict"
            raise TypeError(msg)

        storage_class = data.get("storage_class")
        profile_name = data.get("profile_name")
        return cls(
            region=str(data.get("region") or ""),
            disable_encryption=bool(data.get("disable_encryption", False)),
            storage_class=str(storage_class) if storage_class else None,
            profile_name=str(profile_name) if profile_name else None,
            client_options=dict(client_options),
        )
