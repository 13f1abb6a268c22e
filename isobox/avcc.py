"""The AVC decoder configuration box ('avcC') and its NAL units."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from isobox.binary_stream import BinaryStream
from isobox.box import Box

__all__ = ["NALUnit", "AVCC"]


@dataclass
class NALUnit:
    """A length-prefixed NAL unit stored in a decoder configuration record."""

    data: bytes = b""

    name: ClassVar[str] = "NALUnit"

    @classmethod
    def from_stream(cls, stream: BinaryStream) -> NALUnit:
        """Read a 16-bit big-endian length followed by that many bytes."""
        length = stream.read_big_endian_uint16()
        data = stream.read(length) if length > 0 else b""
        return cls(data)

    def displayable_properties(self) -> list[tuple[str, str]]:
        return [
            ("Length", str(len(self.data))),
            ("Data", " ".join(f"{byte:02X}" for byte in self.data)),
        ]


class AVCC(Box):
    """AVC decoder configuration record."""

    def __init__(self) -> None:
        super().__init__("avcC")
        self.configuration_version = 0
        self.avc_profile_indication = 0
        self.profile_compatibility = 0
        self.avc_level_indication = 0
        self.length_size_minus_one = 0
        self.num_of_sequence_parameter_sets = 0
        self.num_of_picture_parameter_sets = 0
        self.sequence_parameter_set_nal_units: list[NALUnit] = []
        self.picture_parameter_set_nal_units: list[NALUnit] = []

    def read_data(self, parser: object, stream: BinaryStream) -> None:
        self.configuration_version = stream.read_uint8()
        self.avc_profile_indication = stream.read_uint8()
        self.profile_compatibility = stream.read_uint8()
        self.avc_level_indication = stream.read_uint8()
        self.length_size_minus_one = stream.read_uint8() & 0x3

        self.num_of_sequence_parameter_sets = stream.read_uint8() & 0x1F
        for _ in range(self.num_of_sequence_parameter_sets):
            # Some files declare more units than they contain.
            if not stream.has_bytes_available():
                break
            self.add_sequence_parameter_set_nal_unit(NALUnit.from_stream(stream))

        self.num_of_picture_parameter_sets = stream.read_uint8()
        for _ in range(self.num_of_picture_parameter_sets):
            if not stream.has_bytes_available():
                break
            self.add_picture_parameter_set_nal_unit(NALUnit.from_stream(stream))

    def displayable_properties(self) -> list[tuple[str, str]]:
        return super().displayable_properties() + [
            ("Configuration version", str(self.configuration_version)),
            ("AVC profile", str(self.avc_profile_indication)),
            ("Profile compatibility", str(self.profile_compatibility)),
            ("AVC level", str(self.avc_level_indication)),
            ("Length size (minus one)", str(self.length_size_minus_one)),
            ("Number of Sequence Parameter Sets", str(self.num_of_sequence_parameter_sets)),
            ("Number of Picture Parameter Sets", str(self.num_of_picture_parameter_sets)),
            ("SPS NAL Units", str(len(self.sequence_parameter_set_nal_units))),
            ("PPS NAL Units", str(len(self.picture_parameter_set_nal_units))),
        ]

    def displayable_objects(self) -> list[NALUnit]:
        """Return the SPS units followed by the PPS units."""
        return [*self.sequence_parameter_set_nal_units, *self.picture_parameter_set_nal_units]

    def add_sequence_parameter_set_nal_unit(self, nal_unit: NALUnit) -> None:
        self.sequence_parameter_set_nal_units.append(nal_unit)

    def add_picture_parameter_set_nal_unit(self, nal_unit: NALUnit) -> None:
        self.picture_parameter_set_nal_units.append(nal_unit)