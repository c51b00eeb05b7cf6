"""Touchlink (inter-PAN) request frames."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass
from typing import Any

__all__ = ["AddressMode", "TouchlinkRequest"]

_MIN_CHANNEL = 11
_MAX_CHANNEL = 26


class AddressMode(enum.IntEnum):
    """APS destination address modes."""

    NONE = 0x00
    GROUP = 0x01
    NWK = 0x02
    EXT = 0x03


def _check_channel(channel: int) -> None:
    if not _MIN_CHANNEL <= channel <= _MAX_CHANNEL:
        raise ValueError(f"channel must be in {_MIN_CHANNEL}..{_MAX_CHANNEL}: {channel}")


def _check_mode(mode: AddressMode) -> None:
    if mode not in (AddressMode.NWK, AddressMode.EXT):
        raise ValueError(f"destination address mode must be NWK or EXT: {mode!r}")


@dataclass
class TouchlinkRequest:
    """An inter-PAN request addressed by NWK or IEEE (extended) address.

    Assigning a channel outside 11..26 or an address mode other than NWK
    or EXT raises ValueError; the initial defaults are the unset values.
    """

    transaction_id: int = 0
    tx_options: int = 0
    dst_ext: int | None = None
    dst_nwk: int | None = None
    dst_address_mode: AddressMode = AddressMode.NONE
    channel: int = 0
    pan_id: int = 0
    profile_id: int = 0
    cluster_id: int = 0
    asdu: bytes = b""

    def __post_init__(self) -> None:
        if self.channel != 0:
            _check_channel(self.channel)
        if self.dst_address_mode is not AddressMode.NONE:
            _check_mode(AddressMode(self.dst_address_mode))
        object.__setattr__(self, "dst_address_mode", AddressMode(self.dst_address_mode))
        object.__setattr__(self, "asdu", bytes(self.asdu))
        object.__setattr__(self, "_ready", True)

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_ready", False):
            if name == "channel":
                _check_channel(value)
            elif name == "dst_address_mode":
                value = AddressMode(value)
                _check_mode(value)
            elif name == "asdu":
                value = bytes(value)
        object.__setattr__(self, name, value)

    def to_bytes(self) -> bytes:
        """Serialise the request in big endian byte order.

        Raises ValueError when the transaction id is zero or the address
        mode does not match an address that is set.
        """
        if self.transaction_id == 0:
            raise ValueError("transaction id must be non-zero")

        mode = self.dst_address_mode
        if mode is AddressMode.EXT and self.dst_ext is not None:
            address = struct.pack(">Q", self.dst_ext & 0xFFFFFFFFFFFFFFFF)
        elif mode is AddressMode.NWK and self.dst_nwk is not None:
            address = struct.pack(">H", self.dst_nwk & 0xFFFF)
        else:
            raise ValueError("destination address does not match address mode")

        head = struct.pack(
            ">IBB",
            self.transaction_id & 0xFFFFFFFF,
            self.tx_options & 0xFF,
            int(mode),
        )
        tail = struct.pack(
            ">HHHB",
            self.pan_id & 0xFFFF,
            self.profile_id & 0xFFFF,
            self.cluster_id & 0xFFFF,
            len(self.asdu) & 0xFF,
        )
        return head + address + tail + self.asdu