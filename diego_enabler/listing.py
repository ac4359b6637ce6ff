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
import logging
import requests
from collections import namedtuple
from . import api
from . import collect
from . import models
from .exceptions import NotLoggedIn, OrgNotFound


logger = logging.getLogger('diego_enabler.listing')

UNKNOWN_SPACE = '<unknown>'
"""Shown in place of the space name of an app whose space was not fetched"""


class PresentableApplication(
        namedtuple('PresentableApplication', ['application', 'space'])):
    """An application paired with its space. ``space`` is None when the
    application's space guid was not found among the fetched spaces."""

    __slots__ = ()

    @property
    def guid(self):
        return self.application.guid

    @property
    def name(self):
        return self.application.name

    @property
    def diego(self):
        return self.application.diego

    @property
    def space_name(self):
        if self.space is None:
            return UNKNOWN_SPACE
        return self.space.name


def index_spaces(spaces):
    """Maps space guid to space. A later space with a guid already seen
    replaces the earlier one.

    Args:
        spaces (list[Space])

    Returns:
        dict"""
    return dict((s.guid, s) for s in spaces)


def join(apps, space_index):
    """Pairs every application with its space, keeping the application order

    Args:
        apps (list[Application])
        space_index (dict): as returned by ``index_spaces()``

    Returns:
        list[PresentableApplication]"""
    presentables = []
    for app in apps:
        space = space_index.get(app.space_guid)
        if space is None:
            logger.debug('Space %s of app %s not found',
                         app.space_guid, app.guid)
        presentables.append(PresentableApplication(app, space))
    return presentables


def new_session(connection):
    """Creates the HTTP session shared by every request of one command"""
    session = requests.Session()
    session.verify = not connection.is_ssl_disabled()
    return session


class ListApps(object):
    """ListApps lists the applications visible to the logged in user, each
    with its space and Diego flag, optionally limited to one organization.

    The steps run strictly in order and the first error ends the command
    before anything is handed to ``after_all()``:

        1) check for a ``cf`` session
        2) resolve the organization, if one was given
        3) fetch all apps, then all spaces
        4) join apps to spaces and present them"""

    def __init__(self, list_apps_command, organization=None,
                 apps_getter=collect.applications,
                 results_per_page=api.DEFAULT_RESULTS_PER_PAGE):
        self.list_apps_command = list_apps_command
        self.organization = organization
        self.apps_getter = apps_getter
        self.results_per_page = results_per_page

    def requester(self, client, session, factory, filters=None):
        factory = client.handle_filters_and_parameters(
            client.authorize(factory), filters,
            {'results-per-page': self.results_per_page})
        return api.PaginatedRequester(factory, session)

    def find_organization(self, client, session):
        orgs = collect.organizations(
            models.parse_organization,
            self.requester(client, session,
                           client.new_get_organizations_request,
                           ['name:' + self.organization]))
        if not orgs:
            raise OrgNotFound(self.organization)
        return orgs[0]

    def execute(self, connection):
        """Runs the command against the API the ``cf`` CLI is targeting

        Args:
            connection (CliConnection)

        Returns:
            list[PresentableApplication]: the rows handed to ``after_all()``
        """
        if not connection.is_logged_in():
            raise NotLoggedIn()
        client = api.ApiClient(connection.api_endpoint(),
                               connection.access_token())
        session = new_session(connection)

        self.list_apps_command.before_all()

        filters = []
        if self.organization:
            org = self.find_organization(client, session)
            logger.debug('Organization %s has guid %s', org.name, org.guid)
            filters.append('organization_guid:' + org.guid)

        apps = self.apps_getter(
            models.parse_application,
            self.requester(client, session, client.new_get_apps_request,
                           filters))
        spaces = collect.spaces(
            models.parse_space,
            self.requester(client, session, client.new_get_spaces_request,
                           filters))

        presentables = join(apps, index_spaces(spaces))
        self.list_apps_command.after_all(presentables)
        return presentables
