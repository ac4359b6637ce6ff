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
"""Collectors fetch a whole collection through a ``PaginatedRequester`` and
parse every record into a typed entity. A single bad record fails the whole
collection."""


def collect(parser, requester):
    """Fetches all records and parses each one.

    Args:
        parser (callable): an entity parser from ``diego_enabler.models``
        requester (PaginatedRequester)

    Returns:
        list: the parsed entities in server order"""
    return [parser(r) for r in requester.get_all_resources()]


def applications(parser, requester):
    return collect(parser, requester)


def diego_applications(parser, requester):
    """Only the applications running on Diego"""
    return [a for a in collect(parser, requester) if a.diego]


def dea_applications(parser, requester):
    """Only the applications running on the DEAs"""
    return [a for a in collect(parser, requester) if not a.diego]


def spaces(parser, requester):
    return collect(parser, requester)


def organizations(parser, requester):
    return collect(parser, requester)
