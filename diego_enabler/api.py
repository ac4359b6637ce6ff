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
import re
import json
import logging
import requests
from collections import namedtuple
from urllib.parse import urlsplit, urlunsplit
from .exceptions import MalformedResponse, RemoteError, TransportError


logger = logging.getLogger('diego_enabler.api')

NEXT_URL_KEY = ('next_url',)
"""Key path of the next page locator in a v2 collection page"""

V3_NEXT_KEY = ('pagination', 'next', 'href')
"""Key path of the next page locator in a v3 collection page"""

DEFAULT_RESULTS_PER_PAGE = 100

Page = namedtuple('Page', ['resources', 'next_url'])


def parse_page(body, next_key=NEXT_URL_KEY):
    """Decodes one page of a paginated collection.

    Args:
        body (bytes|str): raw HTTP response content
        next_key (tuple[str]): key path of the next page locator; a missing
            object anywhere along the path means there is no next page

    Returns:
        Page: the page records and the next page locator, or None when this
            is the last page"""
    try:
        data = json.loads(body)
    except (TypeError, ValueError) as e:
        raise MalformedResponse('Response is not valid JSON: {}'.format(e))
    if not isinstance(data, dict):
        raise MalformedResponse('Response is not a JSON object.')
    if 'resources' not in data:
        raise MalformedResponse('Response field `resources\' is missing.')
    resources = data['resources']
    if not isinstance(resources, list):
        raise MalformedResponse('Response field `resources\' is not a list.')
    next_url = data
    for key in next_key:
        if not isinstance(next_url, dict):
            next_url = None
            break
        next_url = next_url.get(key)
    if next_url is not None and not isinstance(next_url, str):
        raise MalformedResponse('Response field `{}\' is not a string: {!r}'
                                .format('.'.join(next_key), next_url))
    return Page(resources, next_url or None)


class ApiClient(object):
    """ApiClient builds the Cloud Controller v2 requests used by the listing
    commands. Every ``new_get_*_request`` method and every wrapper returned by
    ``authorize()`` and ``handle_filters_and_parameters()`` is a request
    factory: a function taking a page locator (empty for the first page) and
    returning an unprepared ``requests.Request``."""

    api_endpoint = None
    """The API base url, e.g. ``https://api.example.com``"""

    access_token = None
    """The access token, with or without its ``bearer`` prefix"""

    def __init__(self, api_endpoint, access_token):
        self.api_endpoint = re.sub('/$', '', api_endpoint)
        self.access_token = access_token

    @property
    def authorization(self):
        if re.match('^bearer ', self.access_token, re.I):
            return self.access_token
        return 'bearer {}'.format(self.access_token)

    def url_for(self, locator, *path):
        """Returns the URL for a page. The first page (empty locator) is the
        joined ``path`` under the API endpoint. A later page is the
        server-supplied locator itself: an absolute locator is returned
        unchanged and a relative one is resolved against the endpoint's host.

        Args:
            locator (str)
            *path (str): URL path segments of the collection

        Returns:
            str"""
        if not locator:
            return '/'.join([self.api_endpoint] + list(path))
        if re.match('^https?://', locator):
            return locator
        parts = list(urlsplit(self.api_endpoint))
        loc = urlsplit(locator)
        parts[2] = loc.path
        parts[3] = loc.query
        parts[4] = loc.fragment
        return urlunsplit(parts)

    def new_request(self, locator, *path):
        return requests.Request('GET', self.url_for(locator, *path),
                                headers={'Accept': 'application/json'})

    def new_get_apps_request(self, locator):
        return self.new_request(locator, 'v2', 'apps')

    def new_get_spaces_request(self, locator):
        return self.new_request(locator, 'v2', 'spaces')

    def new_get_organizations_request(self, locator):
        return self.new_request(locator, 'v2', 'organizations')

    def authorize(self, factory):
        """Wraps a request factory so that every request it builds carries
        the bearer ``Authorization`` header.

        Args:
            factory (callable)

        Returns:
            callable: the wrapped request factory"""
        def authorized(locator):
            req = factory(locator)
            req.headers['Authorization'] = self.authorization
            return req
        return authorized

    def handle_filters_and_parameters(self, factory, filters=None,
                                      params=None):
        """Wraps a request factory so that the first page request carries
        ``q`` filters and additional query parameters. Requests for later
        pages are left untouched since the server-supplied locator already
        encodes the filter state.

        Args:
            factory (callable)
            filters (list[str]): v2 ``q`` filters, e.g.
                ``['organization_guid:<GUID>']``
            params (dict): other query parameters, e.g.
                ``{'results-per-page': 100}``

        Returns:
            callable: the wrapped request factory"""
        def filtered(locator):
            req = factory(locator)
            if not locator:
                req.params.update(params or {})
                if filters:
                    req.params['q'] = list(filters)
            return req
        return filtered


class PaginatedRequester(object):
    """PaginatedRequester sends a request for every page of a collection and
    follows the next page locator until the server stops returning one.

    There is no retry: the first transport failure, non-success status or
    unparseable page ends the fetch and no further request is sent."""

    def __init__(self, request_factory, session, page_parser=parse_page,
                 next_key=NEXT_URL_KEY):
        self.request_factory = request_factory
        self.session = session
        self.page_parser = page_parser
        self.next_key = next_key

    def get_page(self, locator):
        req = self.request_factory(locator)
        try:
            req = self.session.prepare_request(req)
            logger.debug('%s %s', req.method, req.url)
            res = self.session.send(req)
        except requests.exceptions.RequestException as e:
            # a server-supplied locator may not even be a valid URL
            raise TransportError(
                'Error requesting {}: {}'.format(req.url, e), e)
        logger.debug('HTTP %s %s', res.status_code, req.url)
        if not 200 <= res.status_code < 300:
            raise RemoteError(res.status_code, res.text)
        return self.page_parser(res.content, self.next_key)

    def get_all_resources(self):
        """Fetches every page of the collection.

        Returns:
            list[dict]: the raw records of all pages in server order"""
        resources = []
        locator = ''
        while True:
            page = self.get_page(locator)
            resources.extend(page.resources)
            if page.next_url is None:
                break
            locator = page.next_url
        logger.debug('Fetched %d resources', len(resources))
        return resources
