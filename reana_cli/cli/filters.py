"""Filter sets built from ``--filter key=value`` options.

A filter set knows two whitelists of keys: single-valued keys keep the last
value given, multi-valued keys accumulate every value. The set can be
serialized to the JSON ``search`` parameter understood by the server.
"""

import json
from typing import Iterable, Optional

from reana_cli.errors import ValidationError

WRONG_FILTER_FORMAT_MSG = (
    "wrong input format. Please use --filter filter_name=filter_value"
)


def split_key_value(value: str) -> tuple[str, str]:
    """Split ``key=value`` on the first ``=``.

    Raises:
        ValueError: If ``value`` contains no ``=``
    """
    key, sep, rest = value.partition("=")
    if not sep:
        raise ValueError(f"'{value}' is not in key=value format")
    return key, rest


def parse_key_value(filter_string: str) -> tuple[str, str]:
    """Parse one filter string into its lowercased key and its value.

    >>> parse_key_value("a=b=c")
    ('a', 'b=c')
    >>> parse_key_value("KEY=v")
    ('key', 'v')
    """
    try:
        key, value = split_key_value(filter_string)
    except ValueError:
        raise ValidationError(WRONG_FILTER_FORMAT_MSG) from None
    return key.lower(), value


def _join(keys: Iterable[str]) -> str:
    return "', '".join(keys)


class Filters:
    """Validated set of filters for one command.

    Attributes:
        single_keys: Keys that hold a single value (last one wins)
        multi_keys: Keys that hold a list of values
    """

    def __init__(
        self,
        single_keys: Optional[Iterable[str]] = None,
        multi_keys: Optional[Iterable[str]] = None,
        filters: Optional[Iterable[str]] = None,
    ) -> None:
        self.single_keys = list(single_keys or [])
        self.multi_keys = list(multi_keys or [])
        self._single_values: dict[str, str] = {}
        self._multi_values: dict[str, list[str]] = {}
        for filter_string in filters or []:
            self.add(filter_string)

    @property
    def available_keys(self) -> list[str]:
        return self.single_keys + self.multi_keys

    def _invalid_key(self, key: str) -> ValidationError:
        return ValidationError(
            f"filter key '{key}' is not valid\n"
            f"Available filters are '{_join(self.available_keys)}'"
        )

    def add(self, filter_string: str) -> None:
        """Parse ``key=value`` and store the value under its key.

        Raises:
            ValidationError: If the string is malformed or the key unknown
        """
        key, value = parse_key_value(filter_string)
        if key in self.single_keys:
            self._single_values[key] = value
        elif key in self.multi_keys:
            self._multi_values.setdefault(key, []).append(value)
        else:
            raise self._invalid_key(key)

    def get_single(self, key: str) -> str:
        """Return the value of a single-valued filter, or "" when unset."""
        if key not in self.single_keys:
            raise ValidationError(
                f"'{key}' is not a valid single value filter\n"
                f"Available filters are '{_join(self.single_keys)}'"
            )
        return self._single_values.get(key, "")

    def get_multi(self, key: str) -> list[str]:
        """Return the values of a multi-valued filter, or [] when unset."""
        if key not in self.multi_keys:
            raise ValidationError(
                f"'{key}' is not a valid multi value filter\n"
                f"Available filters are '{_join(self.multi_keys)}'"
            )
        return list(self._multi_values.get(key, []))

    def get_json(self, keys: Iterable[str]) -> str:
        """Serialize the set filters among ``keys`` to canonical JSON.

        Returns:
            JSON object with sorted keys, or "" when none of the keys is set
        """
        selected: dict[str, object] = {}
        for key in keys:
            if key in self.single_keys:
                if key in self._single_values:
                    selected[key] = self._single_values[key]
            elif key in self.multi_keys:
                if key in self._multi_values:
                    selected[key] = list(self._multi_values[key])
            else:
                raise self._invalid_key(key)

        if not selected:
            return ""
        return json.dumps(selected, sort_keys=True, separators=(",", ":"))

    def validate_values(self, key: str, allowed: Iterable[str]) -> None:
        """Check that every value given for ``key`` is in ``allowed``."""
        allowed = list(allowed)
        if key in self.single_keys:
            values = [self._single_values[key]] if key in self._single_values else []
        elif key in self.multi_keys:
            values = self._multi_values.get(key, [])
        else:
            raise self._invalid_key(key)

        for value in values:
            if value not in allowed:
                raise ValidationError(
                    f"'{value}' is not a valid value for the filter '{key}'\n"
                    f"Available values are '{_join(allowed)}'"
                )
