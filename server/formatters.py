"""JSON formatting utilities for decoded NMEA data."""

import json

from gpstpv.nmea import LAT_LON_FACTOR, TPV, VALUE_FACTOR, Result, error_string

__all__ = ["format_decode_response", "format_tpv_message"]


def format_tpv_message(tpv: TPV) -> str:
    """Serialize a TPV snapshot into a JSON string for WebSocket transmission.

    Values stay scaled integers; the factors travel with every message so
    clients need no out-of-band knowledge to convert them.
    """
    return json.dumps({
        "type": "tpv",
        **tpv.as_dict(),
        "value_factor": VALUE_FACTOR,
        "lat_lon_factor": LAT_LON_FACTOR,
    })


def format_decode_response(result: Result, tpv: TPV) -> dict[str, object]:
    """Build the ``/decode`` response body; ``tpv`` is omitted on rejection."""
    return {
        "result": int(result),
        "message": error_string(result),
        "tpv": tpv.as_dict() if result == Result.OK else None,
    }
