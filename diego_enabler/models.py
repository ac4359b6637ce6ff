# Copyright 2020 Philips HSDP
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Typed entities and the pure functions that build them from v2 API
resource records.

A v2 record has the shape::

    {"metadata": {"guid": "..."}, "entity": {"name": "...", ...}}

Every parser raises ``MalformedRecord`` naming the dotted path of the first
missing or invalid field. Fields not named here are ignored."""
from collections import namedtuple
from types import MappingProxyType
from .exceptions import MalformedRecord


Application = namedtuple(
    'Application', ['guid', 'name', 'space_guid', 'diego', 'entity'])
"""An application and its Diego flag. ``entity`` is a read-only view of a copy
of the record attributes."""

Space = namedtuple('Space', ['guid', 'name', 'organization_guid'])

Organization = namedtuple('Organization', ['guid', 'name'])

_missing = object()


def _section(record, name):
    if not isinstance(record, dict):
        raise MalformedRecord('Record is not an object: {!r}'.format(record))
    section = record.get(name, _missing)
    if not isinstance(section, dict):
        raise MalformedRecord('Record field `{}\' is missing or is not an '
                              'object.'.format(name), name)
    return section


def _field(record, section_name, name, types=str, required=True):
    section = _section(record, section_name)
    path = '.'.join([section_name, name])
    value = section.get(name, _missing)
    if value is _missing or value is None:
        if required:
            raise MalformedRecord(
                'Record field `{}\' is missing.'.format(path), path)
        return None
    if not isinstance(value, types):
        raise MalformedRecord('Record field `{}\' has an invalid value: {!r}'
                              .format(path, value), path)
    return value


def parse_application(record):
    """Builds an Application from a ``/v2/apps`` resource record

    Args:
        record (dict)

    Returns:
        Application"""
    return Application(
        guid=_field(record, 'metadata', 'guid'),
        name=_field(record, 'entity', 'name'),
        space_guid=_field(record, 'entity', 'space_guid'),
        diego=_field(record, 'entity', 'diego', bool),
        entity=MappingProxyType(dict(record['entity'])),
    )


def parse_space(record):
    """Builds a Space from a ``/v2/spaces`` resource record. The organization
    guid is optional.

    Args:
        record (dict)

    Returns:
        Space"""
    return Space(
        guid=_field(record, 'metadata', 'guid'),
        name=_field(record, 'entity', 'name'),
        organization_guid=_field(
            record, 'entity', 'organization_guid', required=False),
    )


def parse_organization(record):
    return Organization(
        guid=_field(record, 'metadata', 'guid'),
        name=_field(record, 'entity', 'name'),
    )
