"""Configuration model and YAML text parsing.

This module only turns text into a :class:`Config`; locating and
reading the file is the job of :mod:`zk.infra.config_file`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

import yaml

from zk.exceptions import FieldMissingError, YamlBadFormatError, YamlIsMultiDocumentError

_BOOL_TAG = "tag:yaml.org,2002:bool"
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _ConfigLoader(yaml.SafeLoader):
    """``SafeLoader`` with YAML 1.2 scalar typing.

    Dates stay strings, and only ``true``/``false`` are booleans
    (``yes``, ``on``, ``no``, ``off`` stay strings).
    """


_ConfigLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag not in (_BOOL_TAG, _TIMESTAMP_TAG)
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_ConfigLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


@dataclass(frozen=True, slots=True)
class Config:
    """User configuration for zk-cli."""

    working_dir: str
    """Directory holding the note archive.  Not validated here."""

    @classmethod
    def from_str(cls, text: str) -> Config:
        """Parse a single YAML document into a :class:`Config`.

        Raises
        ------
        YamlBadFormatError
            When *text* is not valid YAML.
        YamlIsMultiDocumentError
            When *text* does not contain exactly one YAML document
            (empty text included).
        FieldMissingError
            When ``working_dir`` is absent or is not a string.
        """
        document = _load_single_document(text)
        return cls(working_dir=_get_str_field("working_dir", document))


def _load_single_document(text: str) -> Any:
    try:
        documents = list(yaml.load_all(text, Loader=_ConfigLoader))
    except yaml.YAMLError as exc:
        raise YamlBadFormatError(
            f"Invalid YAML in configuration: {exc}",
        ) from exc

    if len(documents) != 1:
        raise YamlIsMultiDocumentError(
            f"Configuration must be exactly one YAML document, found {len(documents)}.",
            hint="Keep a single document with a 'working_dir' entry, "
            "without '---' separators.",
        )
    return documents[0]


def _get_str_field(name: str, document: Any) -> str:
    value = document.get(name) if isinstance(document, dict) else None
    if not isinstance(value, str):
        raise FieldMissingError(
            name,
            hint=f"Add a string '{name}' entry to the configuration file.",
        )
    return value
