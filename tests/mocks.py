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
import json
import responses as r
from base64 import urlsafe_b64encode


def jwt_payload(jwt_data):
    data = json.dumps(jwt_data).encode('utf-8')
    return urlsafe_b64encode(data).decode('utf-8').rstrip('=')


def jwt_token(jwt_payload):
    return '<JWTDETAILS>.{}.<SIGNATURE>'.format(jwt_payload)


cf_url = 'http://localhost:8080'
cf_username = 'usr'
test_jwt_token = jwt_token(jwt_payload({'user_name': cf_username,
                                        'client_id': 'cf'}))
test_access_token = 'bearer ' + test_jwt_token
test_org_guid = 'org-guid-1'
test_org_name = 'org-1'


def app_v2(guid, name, space_guid, diego=True, **entity):
    entity.update({'name': name, 'space_guid': space_guid, 'diego': diego})
    return {'metadata': {'guid': guid, 'url': '/v2/apps/' + guid},
            'entity': entity}


def space_v2(guid, name, org_guid=test_org_guid):
    return {'metadata': {'guid': guid},
            'entity': {'name': name, 'organization_guid': org_guid}}


def org_v2(guid, name):
    return {'metadata': {'guid': guid}, 'entity': {'name': name}}


def page(resources, next_url=None):
    return {'total_results': len(resources), 'resources': resources,
            'next_url': next_url}


def add_page(path, resources, next_url=None, status=200):
    """Registers a v2 collection page at ``cf_url + path``. A query string in
    ``path`` must match exactly."""
    r.add(r.GET, cf_url + path, status=status,
          json=page(resources, next_url))


class FakeConnection(object):
    """Stands in for the ``cf`` CLI session"""

    def __init__(self, logged_in=True, access_token=test_access_token,
                 api_endpoint=cf_url, ssl_disabled=False):
        self.logged_in = logged_in
        self.token = access_token
        self.endpoint = api_endpoint
        self.ssl_disabled = ssl_disabled

    def is_logged_in(self):
        return self.logged_in

    def access_token(self):
        return self.token

    def api_endpoint(self):
        return self.endpoint

    def username(self):
        return cf_username

    def is_ssl_disabled(self):
        return self.ssl_disabled


class FakeListAppsCommand(object):
    """Records what the listing command hands to the presentation layer"""

    def __init__(self):
        self.calls = []
        self.apps = None

    def before_all(self):
        self.calls.append('before_all')

    def after_all(self, apps):
        self.calls.append('after_all')
        self.apps = apps
