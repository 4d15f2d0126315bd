from collections.abc import Mapping
from typing import Any
from urllib.parse import quote


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        value = "true" if value else "false"
    return quote(str(value), safe="")


def build_query_string(parameters: Mapping[str, Any]) -> str:
    """
    Percent-encode a flat mapping into ``key=value&key=value`` form.

    Values are escaped with URI component rules, so spaces become ``%20`` and
    reserved characters such as ``&``, ``=``, ``/`` and ``+`` are escaped.
    Pairs keep the mapping's iteration order. ``None`` values are skipped.
    """
    return "&".join(
        f"{quote(str(key), safe='')}={_encode_value(value)}"
        for key, value in parameters.items()
        if value is not None
    )
