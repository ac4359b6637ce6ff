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


class DiegoEnablerException(Exception):
    """Base class of all exceptions used in this library
    """
    pass


class ConfigException(DiegoEnablerException):
    """Indicates that the ``cf`` CLI configuration could not be read
    """
    config = None

    def __init__(self, msg, config=None):
        super(ConfigException, self).__init__(msg)
        self.config = config


class NotLoggedIn(DiegoEnablerException):
    """Indicates that there is no active ``cf`` CLI session
    """

    def __init__(self, msg='You must be logged in. Run `cf login\' '
                           'and try again.'):
        super(NotLoggedIn, self).__init__(msg)


class TransportError(DiegoEnablerException):
    """Indicates that a request could not be sent or no response was received
    """
    cause = None

    def __init__(self, msg, cause=None):
        super(TransportError, self).__init__(msg)
        self.cause = cause


class RemoteError(DiegoEnablerException):
    """Indicates that the API responded with a non-success HTTP status
    """
    status = None
    body = None

    def __init__(self, status, body):
        super(RemoteError, self).__init__(
            'An API error occurred: HTTP {} {}'.format(status, body))
        self.status = status
        self.body = body


class MalformedResponse(DiegoEnablerException):
    """Indicates that a page body is not a valid paginated collection
    """
    pass


class MalformedRecord(DiegoEnablerException):
    """Indicates that a resource record is missing a field or has a field of
    the wrong type
    """
    field = None

    def __init__(self, msg, field=None):
        super(MalformedRecord, self).__init__(msg)
        self.field = field


class OrgNotFound(DiegoEnablerException):
    """Indicates that the requested organization does not exist
    """
    org = None

    def __init__(self, org):
        super(OrgNotFound, self).__init__(
            'Organization not found: {}'.format(org))
        self.org = org
