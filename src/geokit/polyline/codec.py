"""Encoded polyline codec.

Implements the encoded polyline algorithm format used by mapping services
(https://developers.google.com/maps/documentation/utilities/polylinealgorithm):
each latitude/longitude delta is scaled to an integer, zigzag encoded, split
into 5-bit chunks (least significant first) and written as printable ASCII
characters offset by 63.
"""

import math
from typing import Iterable, List, Tuple

from geokit.geo.schemas import Coordinate
from geokit.utils.checks import check_polyline_character
from geokit.utils.constants import (
    POLYLINE_CHAR_OFFSET,
    POLYLINE_CHUNK_BITS,
    POLYLINE_CHUNK_MASK,
    POLYLINE_CONTINUATION_BIT,
    POLYLINE_PRECISION,
)


def _read_value(encoded: str, index: int) -> Tuple[int, int]:
    """Read one zigzag encoded value starting at `index`.

    Returns the signed value and the index of the next unread character.
    """
    shift = 0
    result = 0
    while True:
        check_polyline_character(encoded, index)
        chunk = ord(encoded[index]) - POLYLINE_CHAR_OFFSET
        index += 1
        result |= (chunk & POLYLINE_CHUNK_MASK) << shift
        shift += POLYLINE_CHUNK_BITS
        if chunk < POLYLINE_CONTINUATION_BIT:
            break

    if result & 1:
        return ~(result >> 1), index
    return result >> 1, index


def decode_geo_polyline(
    encoded: str, precision: int = POLYLINE_PRECISION
) -> List[Coordinate]:
    """
    Decode an encoded polyline into coordinates.

    Parameters
    ----------
    encoded : str
        encoded polyline
    precision : int
        number of decimal digits the polyline was encoded with, by default 5

    Returns
    -------
    List[Coordinate]
        decoded coordinates with zero elevation, empty for an empty string

    Raises
    ------
    InvalidPolylineError
        if the string is truncated in the middle of a value or contains a
        character that cannot appear in an encoded polyline
    """

    factor = 10**precision
    coordinates = []
    index = 0
    lat = 0
    long = 0

    while index < len(encoded):
        dlat, index = _read_value(encoded, index)
        dlong, index = _read_value(encoded, index)
        lat += dlat
        long += dlong
        coordinates.append(Coordinate(latitude=lat / factor, longitude=long / factor))

    return coordinates


def _round(value: float) -> int:
    # half away from zero, as the reference encoder does
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _write_value(value: int, chunks: List[str]) -> None:
    value = ~(value << 1) if value < 0 else value << 1
    while value >= POLYLINE_CONTINUATION_BIT:
        chunks.append(
            chr(
                (POLYLINE_CONTINUATION_BIT | (value & POLYLINE_CHUNK_MASK))
                + POLYLINE_CHAR_OFFSET
            )
        )
        value >>= POLYLINE_CHUNK_BITS
    chunks.append(chr(value + POLYLINE_CHAR_OFFSET))


def encode_geo_polyline(
    coordinates: Iterable[Coordinate], precision: int = POLYLINE_PRECISION
) -> str:
    """
    Encode coordinates into an encoded polyline.

    Elevations are not part of the format and are dropped.

    Parameters
    ----------
    coordinates : Iterable[Coordinate]
        coordinates to encode
    precision : int
        number of decimal digits to keep, by default 5

    Returns
    -------
    str
        encoded polyline
    """

    factor = 10**precision
    chunks = []
    last_lat = 0
    last_long = 0

    for coordinate in coordinates:
        lat = _round(coordinate.latitude * factor)
        long = _round(coordinate.longitude * factor)
        _write_value(lat - last_lat, chunks)
        _write_value(long - last_long, chunks)
        last_lat, last_long = lat, long

    return "".join(chunks)
