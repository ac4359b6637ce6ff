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
from unittest import TestCase
from diego_enabler import models
from diego_enabler.exceptions import MalformedRecord
from .mocks import app_v2, space_v2, org_v2, test_org_guid


class TestParseApplication(TestCase):

    def test_parse(self):
        app = models.parse_application(
            app_v2('app-guid-1', 'app-1', 'space-guid-1', diego=False,
                   state='STARTED'))
        self.assertEqual(app.guid, 'app-guid-1')
        self.assertEqual(app.name, 'app-1')
        self.assertEqual(app.space_guid, 'space-guid-1')
        self.assertIs(app.diego, False)
        self.assertEqual(app.entity['state'], 'STARTED')

    def test_immutable(self):
        app = models.parse_application(app_v2('a1', 'app-1', 's1'))
        with self.assertRaises(AttributeError):
            app.diego = False

    def test_entity_is_read_only(self):
        record = app_v2('a1', 'app-1', 's1', state='STARTED')
        app = models.parse_application(record)
        with self.assertRaises(TypeError):
            app.entity['state'] = 'STOPPED'
        record['entity']['state'] = 'STOPPED'
        self.assertEqual(app.entity['state'], 'STARTED')

    def test_ignores_unknown_fields(self):
        record = app_v2('a1', 'app-1', 's1', random_key='random_value')
        record['unknown'] = {'nested': True}
        app = models.parse_application(record)
        self.assertEqual(app.guid, 'a1')

    def test_missing_fields(self):
        cases = [
            ('metadata.guid', lambda rec: rec['metadata'].pop('guid')),
            ('entity.name', lambda rec: rec['entity'].pop('name')),
            ('entity.space_guid',
             lambda rec: rec['entity'].pop('space_guid')),
            ('entity.diego', lambda rec: rec['entity'].pop('diego')),
            ('entity', lambda rec: rec.pop('entity')),
            ('metadata', lambda rec: rec.pop('metadata')),
        ]
        for field, remove in cases:
            record = app_v2('a1', 'app-1', 's1')
            remove(record)
            with self.assertRaises(MalformedRecord) as ctx:
                models.parse_application(record)
            self.assertEqual(ctx.exception.field, field)
            self.assertIn(field, str(ctx.exception))

    def test_invalid_diego_flag(self):
        record = app_v2('a1', 'app-1', 's1', diego='true')
        with self.assertRaises(MalformedRecord) as ctx:
            models.parse_application(record)
        self.assertEqual(ctx.exception.field, 'entity.diego')

    def test_null_space_guid(self):
        record = app_v2('a1', 'app-1', None)
        with self.assertRaises(MalformedRecord) as ctx:
            models.parse_application(record)
        self.assertEqual(ctx.exception.field, 'entity.space_guid')

    def test_not_an_object(self):
        with self.assertRaises(MalformedRecord):
            models.parse_application(['a1'])


class TestParseSpace(TestCase):

    def test_parse(self):
        space = models.parse_space(space_v2('space-guid-1', 'space-1'))
        self.assertEqual(space, models.Space(
            'space-guid-1', 'space-1', test_org_guid))

    def test_organization_is_optional(self):
        record = space_v2('space-guid-1', 'space-1')
        del record['entity']['organization_guid']
        space = models.parse_space(record)
        self.assertIsNone(space.organization_guid)

    def test_missing_name(self):
        record = space_v2('space-guid-1', 'space-1')
        del record['entity']['name']
        with self.assertRaises(MalformedRecord) as ctx:
            models.parse_space(record)
        self.assertEqual(ctx.exception.field, 'entity.name')


class TestParseOrganization(TestCase):

    def test_parse(self):
        org = models.parse_organization(org_v2('org-guid-1', 'org-1'))
        self.assertEqual(org.guid, 'org-guid-1')
        self.assertEqual(org.name, 'org-1')

    def test_missing_guid(self):
        with self.assertRaises(MalformedRecord):
            models.parse_organization({'metadata': {},
                                       'entity': {'name': 'org-1'}})
