"""
Power and energy unit conversion.

Factorio encodes power and energy as strings such as ``"150kW"`` or
``"2MJ"``. These helpers turn them into plain numbers of watts/joules.
"""

import re
from types import MappingProxyType
from typing import Any, Mapping, MutableMapping, Union

SI_PREFIX_FACTORS: Mapping[str, int] = MappingProxyType(
    {
        "": 1,
        "k": 1_000,
        "M": 1_000_000,
        "G": 1_000_000_000,
    }
)

POWER_PATTERN = re.compile(r"^\s*([^A-Za-z]+?)\s*([A-Za-z]?)[WJ]\s*$")


class UnitConversionError(ValueError):
    """Raised when a power/energy string does not have the expected shape."""
    pass


def convert_power(value: Union[str, int, float]) -> Union[int, float]:
    """Convert a power/energy string to a number.

    Args:
        value: String like ``"10kW"`` or ``"5MJ"``

    Returns:
        Magnitude multiplied by the SI prefix factor; integral results are
        returned as ``int``

    Raises:
        UnitConversionError: If the string cannot be parsed or the prefix is
            not one of ``k``, ``M`` or ``G``
    """
    if not isinstance(value, str):
        raise UnitConversionError(f"Expected a power string, got {value!r}")

    match = POWER_PATTERN.match(value)
    if not match:
        raise UnitConversionError(f"Malformed power value: {value!r}")

    quantity, prefix = match.groups()
    factor = SI_PREFIX_FACTORS.get(prefix)
    if factor is None:
        raise UnitConversionError(f"Unknown SI prefix {prefix!r} in {value!r}")

    try:
        magnitude = float(quantity)
    except ValueError as e:
        raise UnitConversionError(f"Malformed power magnitude in {value!r}") from e

    result = magnitude * factor
    return int(result) if result.is_integer() else result


def convert_field(record: MutableMapping[str, Any], field_name: str) -> None:
    """Convert ``record[field_name]`` in place."""
    try:
        record[field_name] = convert_power(record[field_name])
    except UnitConversionError as e:
        raise UnitConversionError(f"{field_name}: {e}") from e
