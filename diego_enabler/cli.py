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
import os
import sys
import json
import logging
import argparse
from base64 import urlsafe_b64decode
from . import __version__
from . import collect
from . import ui
from .exceptions import ConfigException, DiegoEnablerException, NotLoggedIn
from .listing import ListApps


def jwt_decode(jwt):
    """Decodes the payload of a JWT token. It is used to find the user name
    of the ``cf`` session without making a request to UAA.

    WARNING: jwt_decode() does NOT verify the token's signature.

    Args:
        jwt (str): JWT token string, optionally prefixed with ``bearer``

    Returns:
        dict: A dictionary of the token's attributes"""
    parts = jwt.split(' ')[-1].split('.', 2)
    if len(parts) != 3:
        raise ConfigException('JWT is invalid: {}'.format(jwt))
    try:
        # add extra padding (==) to avoid b64decode errors
        data = urlsafe_b64decode(parts[1] + '==').decode('utf-8')
        data = json.loads(data)
    except ValueError as e:
        raise ConfigException('JWT is invalid: {}'.format(e))
    if not isinstance(data, dict):
        raise ConfigException(
            'JWT payload is not an object: {}'.format(jwt))
    return data


def default_config_path():
    """The ``cf`` CLI config file; it lives under $CF_HOME when set, else under
    the user's home directory"""
    home = os.getenv('CF_HOME') or os.path.expanduser('~')
    return os.path.join(home, '.cf', 'config.json')


class CliConnection(object):
    """CliConnection provides the session details of the ``cf`` CLI by
    reading its config file. Login is never performed here; run ``cf login``
    first."""

    config = None
    """Contains a dictionary of the ``cf`` CLI config"""

    def __init__(self, config):
        self.config = config

    @classmethod
    def from_config_file(cls, path=None):
        """Reads the ``cf`` CLI config. A missing file yields an empty config,
        i.e. a connection that is not logged in.

        Args:
            path (str): defaults to ``default_config_path()``

        Returns:
            CliConnection"""
        if path is None:
            path = default_config_path()
        if not os.path.exists(path):
            return cls({})
        try:
            with open(path) as f:
                config = json.load(f)
        except (IOError, ValueError) as e:
            raise ConfigException(
                'Unable to read cf CLI config {}: {}'.format(path, e), path)
        if not isinstance(config, dict):
            raise ConfigException(
                'Invalid cf CLI config {}.'.format(path), path)
        return cls(config)

    def is_logged_in(self):
        return bool(self.config.get('AccessToken'))

    def access_token(self):
        if not self.is_logged_in():
            raise NotLoggedIn()
        return self.config['AccessToken']

    def api_endpoint(self):
        target = self.config.get('Target')
        if not target:
            raise ConfigException('No API endpoint set. Use `cf api\' to set '
                                  'an endpoint.', self.config)
        return target

    def username(self):
        data = jwt_decode(self.access_token())
        return data.get('user_name') or data.get('client_id')

    def is_ssl_disabled(self):
        return bool(self.config.get('SSLDisabled'))


def configure_trace(trace):
    """Sends the library's debug log to stderr or to a file, following the
    ``cf`` CLI's CF_TRACE convention: ``true`` traces to stderr, ``false`` or
    an empty value disables tracing and any other value is a file path. A
    handler already attached by an earlier call is reused.

    Args:
        trace (str): the value of CF_TRACE

    Returns:
        logging.Handler: the attached handler, or None"""
    if not trace or trace.lower() == 'false':
        return None
    logger = logging.getLogger('diego_enabler')
    if logger.handlers:
        return logger.handlers[0]
    if trace.lower() == 'true':
        handler = logging.StreamHandler(sys.stderr)
    else:
        try:
            handler = logging.FileHandler(trace)
        except (IOError, OSError) as e:
            raise ConfigException(
                'Unable to open CF_TRACE file {}: {}'.format(trace, e), trace)
    handler.setFormatter(
        logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    return handler


apps_getters = {
    None: collect.applications,
    ui.DIEGO: collect.diego_applications,
    ui.DEA: collect.dea_applications,
}

commands = [
    ('apps', None,
     'Lists all apps with their Diego flag'),
    ('diego-apps', ui.DIEGO,
     'Lists all apps running on the Diego runtime'),
    ('dea-apps', ui.DEA,
     'Lists all apps running on the DEA runtime'),
]


def parse_args(argv):
    args = argparse.ArgumentParser(
        prog='cf-diego-apps',
        description='Lists Cloud Foundry applications and their Diego '
                    'enablement status.')
    args.add_argument('--version', action='version', version=__version__)
    subcommands = args.add_subparsers(dest='command')
    subcommands.required = True
    for name, runtime, help in commands:
        cmd = subcommands.add_parser(name, help=help, description=help)
        cmd.add_argument(
            '-o', '--organization', dest='organization',
            help='Only list the apps of this organization')
        cmd.set_defaults(runtime=runtime)
    return args.parse_args(argv)


def main(argv=None, connection=None, out=None):
    """Runs a listing command using the current ``cf`` CLI session.

    Returns:
        int: the process exit status"""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        configure_trace(os.getenv('CF_TRACE', ''))
        if connection is None:
            connection = CliConnection.from_config_file()
        if not connection.is_logged_in():
            raise NotLoggedIn()
        cmd = ui.ListAppsCommand(connection.username(), args.organization,
                                 args.runtime, out)
        ListApps(cmd, args.organization,
                 apps_getters[args.runtime]).execute(connection)
    except DiegoEnablerException as e:
        ui.failed(str(e), out)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
