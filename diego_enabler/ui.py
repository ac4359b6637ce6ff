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
import sys


DIEGO = 'diego'
DEA = 'dea'

runtime_labels = {
    DIEGO: 'Diego',
    DEA: 'DEA',
}


def format_table(headers, rows):
    """Left aligns every column to its widest cell and separates columns with
    three spaces.

    Args:
        headers (list[str])
        rows (list[list[str]])

    Returns:
        list[str]: table lines, header first"""
    widths = [len(h) for h in headers]
    for row in rows:
        widths = [max(w, len(c)) for w, c in zip(widths, row)]
    lines = []
    for row in [headers] + rows:
        cells = [c.ljust(w) for w, c in zip(widths, row)]
        lines.append('   '.join(cells).rstrip())
    return lines


class ListAppsCommand(object):
    """ListAppsCommand prints the progress header and the final application
    table of a listing command.

    When ``runtime`` is set, only applications of that runtime are listed so
    the table leaves out the Diego column."""

    def __init__(self, username, organization=None, runtime=None, out=None):
        self.username = username
        self.organization = organization
        self.runtime = runtime
        self.out = sys.stdout if out is None else out

    def say(self, msg=''):
        print(msg, file=self.out)

    def before_all(self):
        msg = 'Getting apps'
        if self.runtime is not None:
            msg += ' on the {} runtime'.format(runtime_labels[self.runtime])
        if self.organization:
            msg += ' in org {}'.format(self.organization)
        self.say('{} as {}...'.format(msg, self.username))

    def after_all(self, apps):
        """Prints the table of applications in the given order

        Args:
            apps (list[PresentableApplication])"""
        self.say('OK')
        self.say()
        if not apps:
            self.say('No apps found')
            return
        headers = ['name', 'space']
        if self.runtime is None:
            headers.append('diego')
        rows = []
        for app in apps:
            row = [app.name, app.space_name]
            if self.runtime is None:
                row.append(str(app.diego).lower())
            rows.append(row)
        for line in format_table(headers, rows):
            self.say(line)


def failed(msg, out=None):
    """Prints a command failure the way the ``cf`` CLI does"""
    out = sys.stdout if out is None else out
    print('FAILED', file=out)
    print(msg, file=out)
